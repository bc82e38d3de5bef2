"""
String helpers: word capitalization and whitespace trimming.
"""
