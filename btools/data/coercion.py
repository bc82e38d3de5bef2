"""
Character-to-numeric, NA and date coercion.

Spreadsheet exports routinely carry numbers as text ("$198,234.75", "12%"),
blanks where zeros were meant, dates as Excel serial day counts, and numeric
codes stored as categorical labels. The helpers here turn those into plain
floats and timestamps. Parse failures become NaN/NaT rather than exceptions,
so a batch conversion never stops halfway through a column.
"""

import re
from typing import Any

import numpy as np
import pandas as pd

from btools.data.types import Factor
from btools.logging.config import get_logger
from btools.utils.vectors import restore_shape, to_series

logger = get_logger(__name__)

CURRENCY_CHARACTERS = re.compile(r"[ ,$%]")
HEX_NUMBER = re.compile(r"[+-]?0[xX][0-9a-fA-F]+")

# Day 0 of the Excel (1900 date system) serial calendar. Using 12-30 instead
# of 12-31 absorbs Excel's phantom 1900-02-29 for every serial from 61 on;
# serials 0-59 predate the phantom day and are shifted forward one day.
EXCEL_EPOCH = pd.Timestamp("1899-12-30")
_MIN_SERIAL_DAYS = (pd.Timestamp.min.ceil("D").to_pydatetime() - EXCEL_EPOCH.to_pydatetime()).days
_MAX_SERIAL_DAYS = (pd.Timestamp.max.floor("D").to_pydatetime() - EXCEL_EPOCH.to_pydatetime()).days
PHANTOM_LEAP_DAY_SERIAL = 60


def parse_numeric_currency(text: Any) -> Any:
    """
    Convert currency/percent text to a float.

    **Functionally**:
    - Deletes every space, comma, dollar sign and percent sign, then parses
      the remainder leniently with `pd.to_numeric`.
    - Letters are kept, so scientific notation ("1.5e3") still parses.
    - A percent sign is only stripped, not applied: "12%" becomes 12.0.
    - Hexadecimal text with a 0x prefix is read as an integer: "0x1A"
      becomes 26.0.

    **Edge cases**:
    - Text that is not numeric after cleaning (including "") becomes NaN;
      nothing is raised.
    - Missing elements stay NaN.

    Args:
        text: A string or a sequence of strings (numbers are accepted too).

    Returns:
        Float, or a float Series for sequence input.

    Example:
        >>> parse_numeric_currency("$198,234.75")
        198234.75
    """
    values = to_series(text, dtype=object)
    cleaned = values.map(lambda s: CURRENCY_CHARACTERS.sub("", str(s)), na_action="ignore")
    cleaned = cleaned.map(_hex_to_int, na_action="ignore")
    parsed = pd.to_numeric(cleaned, errors="coerce").astype(float)
    return restore_shape(parsed, text)


def _hex_to_int(text: str) -> Any:
    if HEX_NUMBER.fullmatch(text):
        return int(text, 16)
    return text


def na_to_zero(values: Any) -> Any:
    """
    Replace missing values with 0, keeping length and order.

    Example:
        >>> na_to_zero([None, 1, None, 2]).tolist()
        [0.0, 1.0, 0.0, 2.0]
    """
    series = to_series(values).infer_objects()
    return restore_shape(series.fillna(0), values)


def excel_serial_to_date(value: Any) -> Any:
    """
    Convert Excel serial day numbers to dates.

    **Mathematical**: date = 1899-12-30 + floor(value) days, the fractional
    part (time of day) being dropped. Excel counts a nonexistent 1900-02-29
    as serial 60, so serials 0-59 are shifted forward one day to line up
    with what Excel displays: serial 1 is 1900-01-01, serial 60 (the phantom
    day) collapses onto 1900-02-28, serial 61 is 1900-03-01 and serial 30000
    is 1982-02-18.

    **Functionally**:
    - Accepts a number, a numeric string, or a sequence of either.
    - Returns a pd.Timestamp for scalar input, otherwise a datetime64 Series.

    **Edge cases**:
    - Non-finite, non-numeric or missing values become NaT.
    - Serials outside the pandas Timestamp range also become NaT.

    Args:
        value: Excel serial date(s).

    Returns:
        pd.Timestamp (or NaT), or a datetime64[ns] Series.
    """
    numeric = pd.to_numeric(to_series(value, dtype=object), errors="coerce").astype(float)
    days = np.floor(numeric.where(np.isfinite(numeric)))

    out_of_range = (days < _MIN_SERIAL_DAYS) | (days > _MAX_SERIAL_DAYS)
    if out_of_range.any():
        logger.debug("excel_serial_out_of_range", count=int(out_of_range.sum()))
        days = days.mask(out_of_range)

    before_phantom = (days >= 0) & (days < PHANTOM_LEAP_DAY_SERIAL)
    days = days.where(~before_phantom, days + 1)

    dates = EXCEL_EPOCH + pd.to_timedelta(days, unit="D")
    return restore_shape(dates, value)


def _categorical_parts(categorical: Any):
    """Split a categorical input into (codes, categories, index)."""
    if isinstance(categorical, Factor):
        return np.asarray(categorical.codes, dtype=int), pd.Index(categorical.levels), None
    if isinstance(categorical, pd.Series):
        if not isinstance(categorical.dtype, pd.CategoricalDtype):
            raise TypeError(f"expected a categorical Series, got dtype {categorical.dtype}")
        return (
            categorical.cat.codes.to_numpy(),
            categorical.cat.categories,
            categorical.index,
        )
    if isinstance(categorical, pd.Categorical):
        return categorical.codes, categorical.categories, None
    raise TypeError(
        "expected Factor, pd.Categorical or categorical Series, "
        f"got {type(categorical).__name__}"
    )


def factor_to_numeric(categorical: Any) -> pd.Series:
    """
    Convert a categorical to the numeric values of its *labels*.

    **Conceptual**: For a categorical with labels ["10", "20", "30"], the
    element labelled "20" has code 1. This returns 20.0, never 1.

    **Edge cases**:
    - Missing elements (code -1) become NaN.
    - Labels that are not numeric text become NaN and a warning is logged
      naming them; the conversion itself does not raise.

    Args:
        categorical: A Factor, pd.Categorical or categorical-dtype Series.

    Returns:
        Float Series, one value per element (index kept for Series input).

    Raises:
        TypeError: If the input is not categorical.

    Example:
        >>> factor_to_numeric(pd.Categorical(["3", "1", "3"])).tolist()
        [3.0, 1.0, 3.0]
    """
    codes, categories, index = _categorical_parts(categorical)

    label_values = pd.to_numeric(
        pd.Series(np.asarray(categories, dtype=object)), errors="coerce"
    ).astype(float).to_numpy()

    unparsed = [str(label) for label, number in zip(categories, label_values) if np.isnan(number)]
    if unparsed:
        logger.warning("non_numeric_factor_labels", labels=unparsed)

    if len(label_values) == 0:
        result = np.full(len(codes), np.nan)
    else:
        result = np.where(codes >= 0, label_values[np.clip(codes, 0, None)], np.nan)
    return pd.Series(result, index=index, dtype=float)
