"""
Configuration loading and validation for btools.

Provides a strongly typed settings object for display defaults and logging,
loaded from environment variables with upfront validation.
"""
