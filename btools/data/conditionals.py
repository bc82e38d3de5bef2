"""
Element-wise selection and NA-safe truth tests.

`safe_conditional` is a vectorized ternary that does not degrade dates into
integer offsets, and `is_true` treats missing booleans as False so filters
built from partially missing flags never propagate NA.
"""

import datetime
from typing import Any

import numpy as np
import pandas as pd

from btools.utils.vectors import is_scalar_input, to_series


def _is_datelike_scalar(value: Any) -> bool:
    return isinstance(value, (datetime.date, np.datetime64))


def _branch(values: Any, length: int, index: pd.Index) -> pd.Series:
    """Broadcast a branch to `length` elements aligned on `index`."""
    if is_scalar_input(values):
        branch = pd.Series([values] * length, index=index)
    else:
        branch = to_series(values)
        if len(branch) == 1 and length != 1:
            branch = pd.Series([branch.iloc[0]] * length)
        elif len(branch) != length:
            raise ValueError(
                f"branch has {len(branch)} elements but condition has {length}"
            )
        branch = branch.set_axis(index)

    # Python date objects arrive as object dtype; give them the datetime dtype
    if branch.dtype == object:
        present = branch.dropna()
        if len(present) and all(_is_datelike_scalar(v) for v in present):
            branch = pd.to_datetime(branch)
    return branch


def safe_conditional(condition: Any, if_true: Any, if_false: Any) -> Any:
    """
    Element-wise `if_true if condition else if_false` that keeps dates as dates.

    **Conceptual**: Naive vectorized selection (`np.where`) over two date
    columns often hands back raw integers, which is how a "date" column quietly
    turns into nanoseconds-since-1970. Here each element carries the type of
    the branch that won it: when both branches are dates the result is a
    datetime64 Series; when they differ the result is an object Series whose
    elements keep their own types.

    **Functionally**:
    - Scalar branches (and one-element sequences) are broadcast to the
      condition's length.
    - A missing condition gives a missing result (NaT for dates, NaN otherwise).
    - The result keeps the condition's index when the condition is a Series.

    Args:
        condition: Boolean scalar or sequence (missing values allowed).
        if_true: Value(s) chosen where condition is True.
        if_false: Value(s) chosen where condition is False.

    Returns:
        A single value for scalar condition, otherwise a Series.

    Raises:
        ValueError: If a branch length is neither 1 nor the condition's length.

    Example:
        >>> dates = pd.to_datetime(["2020-01-01", "2021-01-01"])
        >>> safe_conditional([True, False], dates, pd.Timestamp("1999-12-31")).dtype
        dtype('<M8[ns]')
    """
    cond = to_series(condition, dtype="boolean")
    yes = _branch(if_true, len(cond), cond.index)
    no = _branch(if_false, len(cond), cond.index)

    chosen = cond.fillna(False).astype(bool)
    both_dates = (
        pd.api.types.is_datetime64_any_dtype(yes)
        and pd.api.types.is_datetime64_any_dtype(no)
    )
    if both_dates:
        result = yes.where(chosen, no)
    else:
        result = pd.Series(
            np.where(chosen.to_numpy(), yes.to_numpy(dtype=object), no.to_numpy(dtype=object)),
            index=cond.index,
            dtype=object,
        ).infer_objects()

    missing = cond.isna().to_numpy()
    if missing.any():
        result = result.mask(missing)

    if is_scalar_input(condition):
        return result.iloc[0]
    return result


def is_true(x: Any) -> Any:
    """
    True only where a value is present and truthy; missing counts as False.

    Example:
        >>> is_true([True, False, None]).tolist()
        [True, False, False]
    """
    values = to_series(x, dtype=object)
    result = values.map(lambda v: False if pd.isna(v) else bool(v)).astype(bool)
    if is_scalar_input(x):
        return bool(result.iloc[0])
    return result
