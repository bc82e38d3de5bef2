"""
Tests for btools/display/formatting.py
"""

import numpy as np
import pandas as pd
import pytest

from btools.display.formatting import dollar_format, head_tail


# ============================================================================
# dollar_format
# ============================================================================

def test_dollar_format_negative_with_minus():
    assert dollar_format(-1.235, 1) == "-$1.2"


def test_dollar_format_negative_with_parens():
    assert dollar_format(-1.235, 1, use_parens=True) == "($1.2)"


def test_dollar_format_vector_defaults():
    x = [-10, -1.235, -23456.789, 1, 10, 100, 1000000, 1789456.23456789]
    result = dollar_format(x)

    assert result.tolist() == [
        "-$10", "-$1", "-$23,457", "$1", "$10", "$100", "$1,000,000", "$1,789,456",
    ]


def test_dollar_format_without_dollar_sign():
    x = [-23456.789, 1789456.23456789]
    assert dollar_format(x, 1, show_sign=False).tolist() == ["-23,456.8", "1,789,456.2"]
    assert dollar_format(x, 1, use_parens=True, show_sign=False).tolist() == [
        "(23,456.8)", "1,789,456.2",
    ]


def test_dollar_format_negative_decimals_round_to_hundreds():
    assert dollar_format(123456.0, -2) == "$123,500"


def test_dollar_format_rounds_half_to_even():
    assert dollar_format(0.5) == "$0"
    assert dollar_format(2.5) == "$2"
    assert dollar_format(-3.5) == "-$4"


def test_dollar_format_missing_values():
    result = dollar_format(pd.Series([1.0, np.nan], index=["a", "b"]))
    assert result["a"] == "$1"
    assert result["b"] is None


# ============================================================================
# head_tail
# ============================================================================

def test_head_tail_list(capsys):
    head_tail(list(range(10)), 3)
    out = capsys.readouterr().out.splitlines()
    assert out == ["[0, 1, 2]", "[7, 8, 9]"]


def test_head_tail_dataframe_prints_head_then_tail(capsys):
    df = pd.DataFrame({"value": range(20)})
    result = head_tail(df, 2)
    out = capsys.readouterr().out

    assert result is None
    assert out == f"{df.head(2)}\n{df.tail(2)}\n"


def test_head_tail_short_collection_prints_what_exists(capsys):
    head_tail([1, 2], 6)
    assert capsys.readouterr().out.splitlines() == ["[1, 2]", "[1, 2]"]


def test_head_tail_empty_collection(capsys):
    head_tail([], 3)
    assert capsys.readouterr().out.splitlines() == ["[]", "[]"]


def test_head_tail_none_prints_none_twice(capsys):
    assert head_tail(None, 3) is None
    assert capsys.readouterr().out.splitlines() == ["None", "None"]


def test_head_tail_scalar_prints_value_twice(capsys):
    head_tail(5, 3)
    assert capsys.readouterr().out.splitlines() == ["5", "5"]


def test_head_tail_zero_rows(capsys):
    head_tail((1, 2, 3), 0)
    assert capsys.readouterr().out.splitlines() == ["()", "()"]


def test_head_tail_function_source(capsys):
    def sample():
        first = 1
        second = 2
        return first + second

    head_tail(sample, 1)
    out = capsys.readouterr().out.splitlines()
    assert out[0].strip() == "def sample():"
    assert out[1].strip() == "return first + second"


def test_head_tail_default_rows_from_settings(monkeypatch, capsys):
    monkeypatch.setenv("BTOOLS_HEAD_TAIL_ROWS", "2")
    head_tail(list(range(10)))
    assert capsys.readouterr().out.splitlines() == ["[0, 1]", "[8, 9]"]


def test_head_tail_default_is_six(monkeypatch, capsys):
    monkeypatch.delenv("BTOOLS_HEAD_TAIL_ROWS", raising=False)
    head_tail(list(range(20)))
    out = capsys.readouterr().out.splitlines()
    assert out == [str(list(range(6))), str(list(range(14, 20)))]


def test_head_tail_rejects_negative_n():
    with pytest.raises(ValueError):
        head_tail([1, 2, 3], -1)
