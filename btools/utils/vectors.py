"""
Scalar/sequence normalization for the btools helpers.

**Conceptual**: Every value-transforming helper in btools follows the same
calling convention, borrowed from vectorized analysis languages:

  - scalar in -> scalar out
  - pandas Series in -> pandas Series out, index preserved
  - any other list-like (list, tuple, numpy array) in -> pandas Series out

Centralizing the convention here keeps each helper down to its actual logic:
normalize with `to_series`, operate on the Series, then hand the result back
through `restore_shape`.
"""

from typing import Any

import numpy as np
import pandas as pd


def is_scalar_input(value: Any) -> bool:
    """
    Return True when `value` should be treated as a single element.

    Strings, numbers, None, pandas NA markers and datetimes are scalars;
    lists, tuples, sets, numpy arrays and pandas objects are not.
    """
    if isinstance(value, (str, bytes)):
        return True
    if isinstance(value, (pd.Series, pd.Index, pd.DataFrame, pd.Categorical)):
        return False
    return np.ndim(value) == 0


def to_series(values: Any, dtype: Any = None) -> pd.Series:
    """
    Normalize `values` to a pandas Series.

    Args:
        values: Scalar, list-like or Series.
        dtype: Optional dtype passed to the Series constructor.

    Returns:
        A new Series. Series inputs are copied so callers never mutate them;
        scalars become a one-element Series.
    """
    if isinstance(values, pd.Series):
        if dtype is not None:
            return values.astype(dtype)
        return values.copy()
    if is_scalar_input(values):
        return pd.Series([values], dtype=dtype)
    if isinstance(values, (set, frozenset)):
        raise TypeError("unordered collections are not supported; pass a list or Series")
    if isinstance(values, pd.DataFrame):
        raise TypeError("DataFrames are not supported; pass a single column (Series)")
    return pd.Series(list(values) if not isinstance(values, np.ndarray) else values, dtype=dtype)


def restore_shape(result: pd.Series, original: Any) -> Any:
    """
    Hand a computed Series back in the caller's shape.

    Scalars unwrap to their single element; everything else stays a Series.
    Missing values in a scalar result are returned as-is (nan, NaT or None).
    """
    if is_scalar_input(original):
        return result.iloc[0]
    return result


def to_float_series(values: Any) -> pd.Series:
    """
    Normalize `values` to a float64 Series with NaN for every missing marker.

    None, np.nan and pd.NA all become NaN; the index of Series input is kept.

    Raises:
        ValueError/TypeError: If an element cannot be represented as a float.
    """
    series = to_series(values)
    return pd.Series(series.to_numpy(dtype=float, na_value=np.nan), index=series.index)
