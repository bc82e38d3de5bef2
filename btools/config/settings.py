"""
Configuration settings for the btools helpers.

**Conceptual**: A handful of helpers have defaults that users like to tune
per machine or per project: how many rows `head_tail` prints, how many
objects `describe_memory` lists, and how chatty the library logger is. This
module loads those values from environment variables (via .env files) into a
frozen dataclass and validates them up front.

**Why centralized config?**
  - Single source of truth for display and logging defaults.
  - Easy to test (inject fake settings or monkeypatch the environment).
  - Fail-fast validation (a typo in BTOOLS_LOG_LEVEL raises a clear error at
    load time, not deep inside a formatting call).

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (dev/local environments); missing file is fine
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE_STRINGS = ("1", "true", "yes", "on")
_FALSE_STRINGS = ("0", "false", "no", "off", "")


def _read_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back to `default`."""
    raw = os.getenv(name, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw}")
    return value


def _read_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got: {raw}")


@dataclass(frozen=True)
class BtoolsSettings:
    """
    Display and logging defaults for the btools helpers.

    **Environment variables**:
      - BTOOLS_HEAD_TAIL_ROWS (optional): rows shown at each end by
        `head_tail`. Defaults to 6.
      - BTOOLS_MEMORY_MAX_OBJECTS (optional): objects listed by
        `describe_memory`. Defaults to 5.
      - BTOOLS_LOG_LEVEL (optional): one of DEBUG, INFO, WARNING, ERROR,
        CRITICAL. Defaults to WARNING.
      - BTOOLS_LOG_JSON (optional): render log lines as JSON instead of the
        console renderer. Defaults to false.

    Attributes:
        head_tail_rows: Default number of elements printed at head and tail.
        memory_max_objects: Default number of objects in the memory table.
        log_level: Logging level name (upper case).
        log_json: If True, configure_logging renders JSON.
    """
    head_tail_rows: int = 6
    memory_max_objects: int = 5
    log_level: str = "WARNING"
    log_json: bool = False

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.head_tail_rows < 0:
            raise ValueError(
                f"BTOOLS_HEAD_TAIL_ROWS must be >= 0, got: {self.head_tail_rows}"
            )
        if self.memory_max_objects < 0:
            raise ValueError(
                f"BTOOLS_MEMORY_MAX_OBJECTS must be >= 0, got: {self.memory_max_objects}"
            )
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"BTOOLS_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, "
                f"got: {self.log_level}"
            )

    @property
    def log_level_number(self) -> int:
        """Numeric stdlib logging level for `log_level`."""
        return getattr(logging, self.log_level.upper())

    @classmethod
    def from_env(cls) -> "BtoolsSettings":
        """
        Load btools settings from environment variables.

        Returns:
            BtoolsSettings object with values loaded from environment.

        Raises:
            ValueError: If a count is not a non-negative integer, the log level
                        is unknown, or BTOOLS_LOG_JSON is not a boolean.

        Usage example:
            >>> # In .env file:
            >>> # BTOOLS_HEAD_TAIL_ROWS=3
            >>>
            >>> settings = BtoolsSettings.from_env()
            >>> settings.head_tail_rows
            3
        """
        return cls(
            head_tail_rows=_read_int("BTOOLS_HEAD_TAIL_ROWS", 6),
            memory_max_objects=_read_int("BTOOLS_MEMORY_MAX_OBJECTS", 5),
            log_level=os.getenv("BTOOLS_LOG_LEVEL", "WARNING").strip().upper(),
            log_json=_read_bool("BTOOLS_LOG_JSON", False),
        )


_settings: Optional[BtoolsSettings] = None


def get_settings() -> BtoolsSettings:
    """
    Return the process-wide settings, loading them from the environment once.

    Returns:
        Cached BtoolsSettings instance.
    """
    global _settings
    if _settings is None:
        _settings = BtoolsSettings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
