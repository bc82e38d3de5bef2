"""
Memory usage reporting.

**Conceptual**: Long interactive analysis sessions accumulate large
intermediate DataFrames. `describe_memory` shows how much memory the process
holds, which named objects are the biggest, and what a garbage collection
pass gives back, so you know what to `del`.

The objects to inspect are passed in explicitly as a name -> object mapping.
Scripts usually pass `globals()`; notebooks can pass a curated dict.
"""

import gc
import sys
from typing import Any, Mapping, Optional

import numpy as np
import pandas as pd
import psutil

from btools.config.settings import get_settings
from btools.logging.config import get_logger

logger = get_logger(__name__)

BYTES_PER_MB = 1024 * 1024


def _object_bytes(obj: Any) -> int:
    """Approximate in-memory size of `obj`, including pandas object payloads."""
    if isinstance(obj, pd.DataFrame):
        return int(obj.memory_usage(index=True, deep=True).sum())
    if isinstance(obj, (pd.Series, pd.Index)):
        return int(obj.memory_usage(deep=True))
    if isinstance(obj, np.ndarray):
        return int(obj.nbytes)
    return sys.getsizeof(obj)


def object_sizes(registry: Optional[Mapping[str, Any]]) -> pd.DataFrame:
    """
    Measure every public entry of `registry`, largest first.

    Names starting with an underscore are skipped (private helpers, dunder
    entries of `globals()`).

    Args:
        registry: Mapping of name -> object. None is treated as empty.

    Returns:
        DataFrame with columns `name` and `size_mb` (float), sorted by size
        descending; ties keep registry order.
    """
    if registry is None:
        registry = {}
    names = [name for name in registry if not name.startswith("_")]
    sizes = [_object_bytes(registry[name]) / BYTES_PER_MB for name in names]
    table = pd.DataFrame({"name": names, "size_mb": pd.Series(sizes, dtype=float)})
    logger.debug("memory_registry_scanned", objects=len(table))
    return table.sort_values("size_mb", ascending=False, kind="mergesort").reset_index(drop=True)


def _process_mb() -> float:
    return psutil.Process().memory_info().rss / BYTES_PER_MB


def describe_memory(
    registry: Optional[Mapping[str, Any]],
    max_objects: Optional[int] = None,
) -> None:
    """
    Print memory usage, the largest objects in `registry`, and collect garbage.

    Output, in order:
      1. Memory available on the machine (MB).
      2. Memory in use by this process before collection (resident set, MB).
      3. The `max_objects` largest registry entries, sizes to 2 decimals with
         thousands separators (omitted when the registry is empty).
      4. The number of objects freed by `gc.collect()`.
      5. Memory in use by this process after collection.

    Args:
        registry: Mapping of name -> object to inspect, e.g. `globals()`.
                  None is treated as empty.
        max_objects: Rows in the object table. Defaults to
                     BTOOLS_MEMORY_MAX_OBJECTS (5).
    """
    if max_objects is None:
        max_objects = get_settings().memory_max_objects

    print(f"Memory available: {psutil.virtual_memory().available / BYTES_PER_MB:,.2f} MB")
    print(f"Memory in use before: {_process_mb():,.2f} MB")

    table = object_sizes(registry)
    shown = min(len(table), max(max_objects, 0))
    if shown > 0:
        top = table.head(shown).copy()
        top["size_mb"] = top["size_mb"].map(lambda size: f"{size:,.2f}")
        print("Memory for selected objects:")
        print(top.to_string(index=False))

    collected = gc.collect()
    print(f"Objects collected: {collected}")
    print(f"Memory in use after: {_process_mb():,.2f} MB")
