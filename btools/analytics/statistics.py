"""
Sample percentiles.

This module provides the sample quantile used throughout ad hoc analysis
scripts, together with the three quartile shortcuts (p25/p50/p75) that are
typed most often when summarizing a column.
"""

from typing import Any, Union

import numpy as np
from scipy.stats import mstats

from btools.utils.vectors import is_scalar_input, to_float_series


def percentile(
    values: Any,
    p: Union[float, Any],
    skip_missing: bool = False,
) -> Union[float, np.ndarray]:
    """
    Compute the sample quantile of `values` at proportion `p`.

    **Conceptual**: A percentile answers "below which value does a fraction p
    of the observations fall?" With finite samples there are several ways to
    pick a value between two order statistics; this uses the definition that
    spreadsheets, numpy and R all default to, so numbers agree across tools.

    **Mathematical**: For sorted values x_(1) <= ... <= x_(n), the target
    position is
        h = 1 + p * (n - 1)
    and the result interpolates linearly between x_(floor(h)) and x_(ceil(h)):
        Q(p) = x_(floor h) + (h - floor h) * (x_(ceil h) - x_(floor h))
    This is Hyndman & Fan type 7, computed here with
    `scipy.stats.mstats.mquantiles(alphap=1, betap=1)`.

    **Functionally**:
    - Input: numeric scalar/sequence; `p` as a scalar or a sequence of
      proportions in [0, 1].
    - Output: float for scalar `p`, numpy array for sequence `p`.
    - Missing values: if any are present and `skip_missing` is False, the
      result is NaN. With `skip_missing=True` they are dropped first.

    **Edge cases**:
    - Empty input (or nothing left after dropping missing values) gives NaN.
    - A single value is returned for every p.

    Args:
        values: Numeric values.
        p: Proportion(s) in [0, 1].
        skip_missing: Drop missing values before computing.

    Returns:
        The quantile(s).

    Raises:
        ValueError: If any p is NaN or outside [0, 1].

    Example:
        >>> percentile(range(1, 101), 0.5)
        50.5
    """
    probs = np.atleast_1d(np.asarray(p, dtype=float))
    if np.isnan(probs).any() or ((probs < 0) | (probs > 1)).any():
        raise ValueError(f"p must be within [0, 1], got: {p}")

    data = to_float_series(values).to_numpy()
    missing = np.isnan(data)

    if (missing.any() and not skip_missing) or (~missing).sum() == 0:
        quantiles = np.full(probs.shape, np.nan)
    else:
        quantiles = np.asarray(
            mstats.mquantiles(data[~missing], prob=probs, alphap=1, betap=1),
            dtype=float,
        ).ravel()

    if is_scalar_input(p):
        return float(quantiles[0])
    return quantiles


def p25(values: Any, skip_missing: bool = False) -> float:
    """Sample 25th percentile (first quartile). See `percentile`."""
    return percentile(values, 0.25, skip_missing=skip_missing)


def p50(values: Any, skip_missing: bool = False) -> float:
    """Sample 50th percentile (median). See `percentile`."""
    return percentile(values, 0.50, skip_missing=skip_missing)


def p75(values: Any, skip_missing: bool = False) -> float:
    """Sample 75th percentile (third quartile). See `percentile`."""
    return percentile(values, 0.75, skip_missing=skip_missing)
