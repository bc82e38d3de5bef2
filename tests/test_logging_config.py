"""
Tests for btools/logging/config.py
"""

import pandas as pd
import pytest
import structlog
from structlog.testing import capture_logs

from btools.data.coercion import factor_to_numeric
from btools.config.settings import reset_settings
from btools.logging.config import configure_library_defaults, configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
    reset_settings()
    configure_library_defaults()


def test_get_logger_returns_usable_logger():
    logger = get_logger("btools.test")
    assert hasattr(logger, "info")
    assert hasattr(logger, "warning")


def test_configure_logging_defaults_from_settings(monkeypatch):
    monkeypatch.setenv("BTOOLS_LOG_LEVEL", "ERROR")
    configure_logging()
    assert structlog.is_configured()


def test_non_numeric_factor_labels_are_logged():
    with capture_logs() as logs:
        factor_to_numeric(pd.Categorical(["1", "one"]))

    warnings = [entry for entry in logs if entry["event"] == "non_numeric_factor_labels"]
    assert len(warnings) == 1
    assert warnings[0]["log_level"] == "warning"
    assert warnings[0]["labels"] == ["one"]


def test_configure_logging_renderer_choice():
    configure_logging(level="INFO", format_json=True, include_timestamp=False)
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.processors.JSONRenderer)
    assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)

    configure_logging(level="INFO", format_json=False)
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
    assert any(isinstance(p, structlog.processors.TimeStamper) for p in processors)


def test_library_defaults_drop_debug_events(capsys, monkeypatch):
    monkeypatch.setenv("BTOOLS_LOG_LEVEL", "WARNING")
    structlog.reset_defaults()
    configure_library_defaults()

    get_logger("btools.test").debug("hidden_event")
    assert "hidden_event" not in capsys.readouterr().out


def test_library_defaults_respect_existing_configuration():
    configure_logging(level="INFO", format_json=True)
    configure_library_defaults()
    assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)
