"""
Tests for btools/display/diagnostics.py

Memory figures depend on the machine, so these tests check structure and
ordering of the report rather than exact megabyte values.
"""

import numpy as np
import pandas as pd

from btools.display.diagnostics import BYTES_PER_MB, describe_memory, object_sizes


def make_registry():
    return {
        "big": np.zeros(1_000_000),  # 8,000,000 bytes
        "medium": pd.DataFrame({"x": np.zeros(10_000)}),
        "small": 1,
        "_private": np.zeros(5_000_000),
    }


def test_object_sizes_sorted_descending_and_skips_private():
    table = object_sizes(make_registry())

    assert list(table.columns) == ["name", "size_mb"]
    assert table["name"].tolist() == ["big", "medium", "small"]
    assert table["size_mb"].is_monotonic_decreasing
    assert np.isclose(table.loc[0, "size_mb"], 8_000_000 / BYTES_PER_MB)


def test_object_sizes_empty_registry():
    table = object_sizes({})
    assert table.empty
    assert list(table.columns) == ["name", "size_mb"]


def test_describe_memory_report_order(capsys):
    result = describe_memory(make_registry(), max_objects=2)
    lines = capsys.readouterr().out.splitlines()

    assert result is None
    assert lines[0].startswith("Memory available: ")
    assert lines[1].startswith("Memory in use before: ")
    assert lines[2] == "Memory for selected objects:"
    table_text = "\n".join(lines[3:6])
    assert "big" in table_text and "medium" in table_text
    assert "small" not in table_text
    assert "7.63" in table_text  # 8,000,000 bytes in MB, 2 decimals
    assert lines[-2].startswith("Objects collected: ")
    assert lines[-1].startswith("Memory in use after: ")


def test_describe_memory_empty_registry_skips_table(capsys):
    describe_memory({}, max_objects=5)
    out = capsys.readouterr().out

    assert "Memory for selected objects" not in out
    assert "Memory in use after: " in out


def test_object_sizes_none_registry_is_empty():
    table = object_sizes(None)
    assert table.empty
    assert list(table.columns) == ["name", "size_mb"]


def test_describe_memory_none_registry(capsys):
    assert describe_memory(None) is None
    lines = capsys.readouterr().out.splitlines()

    assert "Memory for selected objects:" not in lines
    assert lines[0].startswith("Memory available: ")
    assert lines[-1].startswith("Memory in use after: ")


def test_describe_memory_default_max_objects_from_settings(monkeypatch, capsys):
    monkeypatch.setenv("BTOOLS_MEMORY_MAX_OBJECTS", "1")
    describe_memory(make_registry())
    out = capsys.readouterr().out

    assert "big" in out
    assert "medium" not in out
