"""
Value coercion and selection helpers.

Converts messy spreadsheet values (currency strings, Excel serial dates,
numeric-labelled categoricals, nullable booleans) into clean pandas values.
"""
