"""
Formatting and console display helpers.
"""

import inspect
from typing import Any, Optional

import numpy as np
import pandas as pd

from btools.config.settings import get_settings
from btools.utils.vectors import restore_shape, to_float_series


def _format_amount(
    amount: float,
    decimals: int,
    use_parens: bool,
    show_sign: bool,
) -> Optional[str]:
    if np.isnan(amount):
        return None
    # Negative decimals round to tens, hundreds, ... and print no fraction
    magnitude = float(np.round(abs(amount), decimals))
    digits = f"{magnitude:,.{max(decimals, 0)}f}"
    text = f"${digits}" if show_sign else digits
    if amount >= 0:
        return text
    return f"({text})" if use_parens else f"-{text}"


def dollar_format(
    values: Any,
    decimals: int = 0,
    use_parens: bool = False,
    show_sign: bool = True,
) -> Any:
    """
    Format numbers as dollar (or plain comma) amounts.

    **Functionally**:
    - Rounds the absolute value to `decimals` places and inserts thousands
      separators; the sign is re-applied afterwards, either as a leading
      minus or by wrapping the amount in parentheses (accounting style).
    - The dollar sign sits inside the sign marker: "-$1.2", "($1.2)".
    - With `show_sign=False` no dollar sign is added (comma format).

    **Edge cases**:
    - Missing values give None.
    - A negative number that rounds to zero keeps its marker ("-$0").

    Args:
        values: Number or numeric sequence.
        decimals: Digits after the decimal point; negative values round to
                  tens, hundreds, etc.
        use_parens: Enclose negative amounts in parentheses instead of "-".
        show_sign: Prefix a dollar sign.

    Returns:
        Formatted string, or a Series of them for sequence input.

    Example:
        >>> x = [-10, -1.235, -23456.789, 1, 1000000]
        >>> dollar_format(x, 1).tolist()
        ['-$10.0', '-$1.2', '-$23,456.8', '$1.0', '$1,000,000.0']
        >>> dollar_format(-1.235, 1, use_parens=True)
        '($1.2)'
    """
    amounts = to_float_series(values)
    formatted = pd.Series(
        [_format_amount(amount, decimals, use_parens, show_sign) for amount in amounts],
        index=amounts.index,
        dtype=object,
    )
    return restore_shape(formatted, values)


def _head_and_tail(collection: Any, n: int):
    """Return (head, tail) slices of `collection` with up to n items each."""
    if isinstance(collection, (pd.DataFrame, pd.Series)):
        return collection.head(n), collection.tail(n)

    if inspect.isfunction(collection) or inspect.ismethod(collection):
        try:
            lines = inspect.getsource(collection).splitlines()
        except (OSError, TypeError):
            # defined interactively or compiled; there is no source to show
            lines = [repr(collection)]
        head, tail = _head_and_tail(lines, n)
        return "\n".join(head), "\n".join(tail)

    if not hasattr(collection, "__iter__"):
        # nothing to slice; show the value itself at both ends
        return collection, collection

    if isinstance(collection, dict):
        collection = list(collection.items())
    elif not hasattr(collection, "__getitem__") or not hasattr(collection, "__len__"):
        collection = list(collection)

    if n == 0:
        return collection[:0], collection[:0]
    return collection[:n], collection[-n:]


def head_tail(collection: Any, n: Optional[int] = None) -> None:
    """
    Print the first `n` and the last `n` items of a collection.

    Works on DataFrames and Series (rows), numpy arrays (first axis), lists,
    tuples, strings, dicts (items) and plain functions (source lines). A
    collection shorter than `n` is simply printed in full, twice; None and
    other scalars are printed as they are.

    Args:
        collection: The object to preview.
        n: Items to show at each end. Defaults to BTOOLS_HEAD_TAIL_ROWS (6).

    Raises:
        ValueError: If n is negative.
    """
    if n is None:
        n = get_settings().head_tail_rows
    if n < 0:
        raise ValueError(f"n must be >= 0, got: {n}")

    head, tail = _head_and_tail(collection, n)
    print(head)
    print(tail)
