"""
btools - small pandas-native helpers for ad hoc analysis scripts.

Every helper is independent and stateless. Import what you need from here:

    from btools import trim, parse_numeric_currency, rolling_sum, dollar_format

Importing btools configures structlog with a WARNING level filter unless
structlog is already configured (see `btools.logging.config`).
"""

from btools.analytics.rolling import ma4, rolling_mean, rolling_sum, sum4
from btools.analytics.statistics import p25, p50, p75, percentile
from btools.data.coercion import (
    excel_serial_to_date,
    factor_to_numeric,
    na_to_zero,
    parse_numeric_currency,
)
from btools.data.conditionals import is_true, safe_conditional
from btools.data.types import Factor
from btools.display.diagnostics import describe_memory, object_sizes
from btools.display.formatting import dollar_format, head_tail
from btools.text.strings import capitalize_words, trim, trim_leading, trim_trailing

__version__ = "0.1.0"

__all__ = [
    "Factor",
    "capitalize_words",
    "describe_memory",
    "dollar_format",
    "excel_serial_to_date",
    "factor_to_numeric",
    "head_tail",
    "is_true",
    "ma4",
    "na_to_zero",
    "object_sizes",
    "p25",
    "p50",
    "p75",
    "parse_numeric_currency",
    "percentile",
    "rolling_mean",
    "rolling_sum",
    "safe_conditional",
    "sum4",
    "trim",
    "trim_leading",
    "trim_trailing",
]
