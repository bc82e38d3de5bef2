"""
String manipulation helpers.

Small, regex-based text cleanups that show up constantly when tidying
spreadsheet exports: capitalizing names and stripping stray whitespace.
Each function accepts a single string or a sequence of strings (see
`btools.utils.vectors`), and missing elements pass through untouched.
"""

import re
from typing import Any

from btools.utils.vectors import restore_shape, to_series

# \s covers space, tab, newline, carriage return, form feed (and vertical tab)
LEADING_WHITESPACE = re.compile(r"^\s+")
TRAILING_WHITESPACE = re.compile(r"\s+$")
SURROUNDING_WHITESPACE = re.compile(r"^\s+|\s+$")


def _capitalize_word(word: str, strict: bool) -> str:
    # word[:1] is "" for empty segments, so consecutive spaces survive
    rest = word[1:].lower() if strict else word[1:]
    return word[:1].upper() + rest


def _capitalize_string(text: str, strict: bool) -> str:
    return " ".join(_capitalize_word(word, strict) for word in str(text).split(" "))


def capitalize_words(text: Any, strict: bool = False) -> Any:
    """
    Capitalize the first letter of each space-separated word.

    **Functionally**:
    - Splits on single spaces, uppercases the first character of each word and
      rejoins with single spaces, so word count and order are preserved.
    - With `strict=True` the remainder of each word is lowercased as well,
      which normalizes SHOUTED input.
    - Characters with no uppercase form (digits, punctuation) are left alone.
    - Empty segments produced by consecutive spaces pass through unchanged.

    **Edge cases**:
    - Missing elements (None/NaN) stay missing.
    - Only the space character separates words; tabs and newlines do not.

    Args:
        text: A string or a sequence of strings.
        strict: If True, lowercase everything after the first letter of each word.

    Returns:
        Capitalized string, or a Series of them for sequence input.

    Example:
        >>> capitalize_words("string to capitalize words in")
        'String To Capitalize Words In'
        >>> capitalize_words("HELLO world", strict=True)
        'Hello World'
    """
    values = to_series(text, dtype=object)
    result = values.map(lambda s: _capitalize_string(s, strict), na_action="ignore")
    return restore_shape(result, text)


def _substitute(text: Any, pattern: re.Pattern) -> Any:
    values = to_series(text, dtype=object)
    result = values.map(lambda s: pattern.sub("", str(s)), na_action="ignore")
    return restore_shape(result, text)


def trim_leading(text: Any) -> Any:
    """
    Remove whitespace from the start of a string (`^\\s+`).

    Example:
        >>> trim_leading("   leading and trailing   ")
        'leading and trailing   '
    """
    return _substitute(text, LEADING_WHITESPACE)


def trim_trailing(text: Any) -> Any:
    """
    Remove whitespace from the end of a string (`\\s+$`).

    Example:
        >>> trim_trailing("   leading and trailing   ")
        '   leading and trailing'
    """
    return _substitute(text, TRAILING_WHITESPACE)


def trim(text: Any) -> Any:
    """
    Remove whitespace from both ends of a string; internal whitespace is kept.

    Example:
        >>> trim("  a  b  ")
        'a  b'
    """
    return _substitute(text, SURROUNDING_WHITESPACE)
