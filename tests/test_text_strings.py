"""
Tests for btools/text/strings.py
"""

import pandas as pd
import pytest

from btools.text.strings import capitalize_words, trim, trim_leading, trim_trailing


def test_capitalize_words_basic():
    """Each word gets an initial capital; the rest is untouched."""
    assert capitalize_words("hello world") == "Hello World"
    assert capitalize_words("string to capitalize words in") == "String To Capitalize Words In"


def test_capitalize_words_strict_lowercases_remainder():
    assert capitalize_words("HELLO world", strict=True) == "Hello World"
    # Without strict the shouting survives
    assert capitalize_words("HELLO world") == "HELLO World"


def test_capitalize_words_preserves_empty_segments():
    """Consecutive spaces produce empty words that pass through unchanged."""
    assert capitalize_words("a  b") == "A  B"
    assert capitalize_words(" leading") == " Leading"


def test_capitalize_words_non_alphabetic_first_character():
    assert capitalize_words("3rd place") == "3rd Place"


def test_capitalize_words_series_keeps_index_and_missing():
    text = pd.Series(["new york", None, "los angeles"], index=["a", "b", "c"])
    result = capitalize_words(text)

    assert list(result.index) == ["a", "b", "c"]
    assert result["a"] == "New York"
    assert pd.isna(result["b"])
    assert result["c"] == "Los Angeles"


def test_capitalize_words_list_returns_series():
    result = capitalize_words(["one two", "three"])
    assert isinstance(result, pd.Series)
    assert result.tolist() == ["One Two", "Three"]


def test_trim_variants():
    s = "   original string has leading and trailing spaces   "
    assert trim_leading(s) == "original string has leading and trailing spaces   "
    assert trim_trailing(s) == "   original string has leading and trailing spaces"
    assert trim(s) == "original string has leading and trailing spaces"


def test_trim_handles_all_whitespace_classes():
    """Tabs, newlines, carriage returns and form feeds count as whitespace."""
    s = "\t\n\r\f value \t x\f\r\n\t"
    assert trim(s) == "value \t x"
    assert trim_leading(s) == "value \t x\f\r\n\t"
    assert trim_trailing(s) == "\t\n\r\f value \t x"


@pytest.mark.parametrize("s", ["", "   ", "abc", "  a b  ", "\tx\n", "x  "])
def test_trim_composition_is_idempotent(s):
    assert trim(trim_leading(trim_trailing(s))) == trim(s)
    assert trim(trim(s)) == trim(s)


def test_trim_series_keeps_missing():
    result = trim(pd.Series(["  a ", None]))
    assert result.iloc[0] == "a"
    assert pd.isna(result.iloc[1])
