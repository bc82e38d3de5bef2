"""
Rolling-window statistics.

Right-aligned (trailing) windows over a sequence: the value at position i
summarizes positions i-window+1 through i. Unlike pandas' default rolling
mean, missing values inside a window are skipped rather than poisoning the
whole window, which is what quarterly series with occasional gaps need.
"""

from typing import Any

import numpy as np
import pandas as pd

from btools.logging.config import get_logger
from btools.utils.vectors import restore_shape, to_float_series

logger = get_logger(__name__)


def rolling_mean(values: Any, window: int) -> Any:
    """
    Compute a trailing moving average that skips missing values.

    **Conceptual**: A moving average smooths short-term noise by averaging the
    most recent `window` observations. Series built from public filings often
    have holes; rather than losing every window that touches a hole, the mean
    is taken over whatever values in the window are present.

    **Mathematical**: For each position i (0-indexed):
        MA_i = NaN                                  if i < window - 1
        MA_i = mean{ x_j : i-window+1 <= j <= i, x_j not missing }   otherwise
    and MA_i is NaN when every value in the window is missing.

    **Functionally**:
    - Input: numeric sequence; window size (integer).
    - Output: float Series of the same length (index kept for Series input).
    - The first (window - 1) values are always NaN, even when enough
      non-missing data would be available.

    **Edge cases**:
    - window <= 0 or window > len(values) gives all-NaN output, keeping the
      output length stable instead of raising.
    - window = 1 returns the values themselves (as floats).

    Args:
        values: Numeric sequence, oldest first.
        window: Number of trailing periods to average.

    Returns:
        Series of rolling means.

    Example:
        >>> rolling_mean(range(7, 22), 4).tolist()[:5]
        [nan, nan, nan, 8.5, 9.5]
    """
    series = to_float_series(values)

    if window <= 0 or window > len(series):
        logger.debug("rolling_window_out_of_range", window=window, length=len(series))
        result = pd.Series(np.nan, index=series.index, dtype=float)
        return restore_shape(result, values)

    # min_periods=1 so a window with gaps still averages its present values
    result = series.rolling(window=window, min_periods=1).mean()
    result.iloc[: window - 1] = np.nan
    return restore_shape(result, values)


def rolling_sum(values: Any, window: int = 4) -> Any:
    """
    Compute a trailing moving "sum" as rolling_mean(values, window) * window.

    **Note**: When a window contains missing values the mean is taken over
    the present values only, so this scales that mean back up rather than
    adding the present values. For [1, NaN, 3, 4] with window 4 the result
    is (8 / 3) * 4 = 10.67, not 8. It behaves like a sum that imputes the
    missing quarters at the window's average.

    Args:
        values: Numeric sequence, oldest first.
        window: Number of trailing periods (default 4, e.g. quarters in a year).

    Returns:
        Series of rolling sums.
    """
    return rolling_mean(values, window) * window


def ma4(values: Any) -> Any:
    """4-period moving average (3 lags + current)."""
    return rolling_mean(values, 4)


def sum4(values: Any) -> Any:
    """4-period moving sum (3 lags + current); see rolling_sum."""
    return rolling_sum(values, 4)
