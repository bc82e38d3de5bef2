"""
Centralized logging configuration for btools.

All modules obtain their logger through `get_logger(__name__)` so that output
is consistent whether a script calls `configure_logging` or not.

Importing this module calls `configure_library_defaults`, which changes
structlog's global configuration: it installs a level filter at
`BTOOLS_LOG_LEVEL` (WARNING by default) so debug events do not land in
console reports. This only happens if structlog is not configured yet; an
application that wants its own setup should configure structlog before
importing btools, or call `configure_logging` afterwards.
"""
import logging
import sys
from typing import Optional

import structlog
from structlog.types import FilteringBoundLogger

from btools.config.settings import get_settings


def configure_logging(
    level: Optional[str] = None,
    format_json: Optional[bool] = None,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structlog for btools and the calling script.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to BTOOLS_LOG_LEVEL from settings.
        format_json: If True, output JSON format; otherwise human-readable.
                     Defaults to BTOOLS_LOG_JSON from settings.
        include_timestamp: Include an ISO timestamp in log output.
    """
    settings = get_settings()
    if level is None:
        level = settings.log_level
    if format_json is None:
        format_json = settings.log_json

    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s",  # structlog will handle formatting
    )
    logging.getLogger("btools").setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_library_defaults() -> None:
    """
    Filter structlog's default pipeline at BTOOLS_LOG_LEVEL.

    structlog prints every level to stdout until configured, which would mix
    debug events into the console output of the display helpers. Applications
    that configure structlog themselves are left alone.
    """
    if structlog.is_configured():
        return
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(get_settings().log_level_number),
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        structlog logger instance
    """
    return structlog.get_logger(name)


configure_library_defaults()
