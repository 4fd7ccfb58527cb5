"""
Profiling utilities for seller sales metrics.

`profile_block` measures an analysis run:
- Wall-clock time (perf_counter)
- CPU usage of the process (psutil)
- Resident memory after the block (psutil)
- Peak Python allocations inside the block (tracemalloc)

Usage:
    from sales_metrics.utils.profiler import profile_block

    with profile_block("analyze") as stats:
        reports = analyze_sales_data(data)

    print(stats.duration_seconds, stats.peak_traced_bytes)
"""

from __future__ import annotations

import contextlib
import time
import tracemalloc
from dataclasses import dataclass, field
from typing import Any, Dict, Generator, Optional

import psutil


@dataclass
class ProfileStats:
    """
    Container for profiling measurements.
    """

    label: str
    start_ts: float = field(default=0.0)
    end_ts: float = field(default=0.0)
    duration_seconds: float = field(default=0.0)
    rss_bytes: Optional[int] = field(default=None)
    peak_traced_bytes: Optional[int] = field(default=None)
    cpu_percent: Optional[float] = field(default=None)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "duration_seconds": round(self.duration_seconds, 4),
            "rss_bytes": self.rss_bytes,
            "peak_traced_bytes": self.peak_traced_bytes,
            "cpu_percent": self.cpu_percent,
        }


@contextlib.contextmanager
def profile_block(
    label: str, enable_tracemalloc: bool = True
) -> Generator[ProfileStats, None, None]:
    """
    Context manager that fills a ProfileStats for the wrapped block.

    Parameters
    ----------
    label : str
        Human-friendly label for the profiled block.
    enable_tracemalloc : bool
        Whether to track Python-level allocations. tracemalloc is stopped on
        exit only if this block started it.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()

    tracemalloc_was_running = tracemalloc.is_tracing()
    if enable_tracemalloc and not tracemalloc_was_running:
        tracemalloc.start()

    # CPU percent needs a priming call
    process.cpu_percent(interval=None)

    stats.start_ts = time.perf_counter()
    try:
        yield stats
    finally:
        stats.end_ts = time.perf_counter()
        stats.duration_seconds = stats.end_ts - stats.start_ts
        stats.rss_bytes = process.memory_info().rss
        stats.cpu_percent = process.cpu_percent(interval=None)

        if enable_tracemalloc and tracemalloc.is_tracing():
            _, peak_traced = tracemalloc.get_traced_memory()
            stats.peak_traced_bytes = peak_traced
            if not tracemalloc_was_running:
                tracemalloc.stop()


__all__ = ["ProfileStats", "profile_block"]
