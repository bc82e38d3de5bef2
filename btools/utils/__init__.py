"""
Generic utility functions shared across btools modules.

Includes scalar/sequence normalization so every helper can accept a single
value, a list, a numpy array or a pandas Series.
"""
