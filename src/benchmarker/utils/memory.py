"""
Helpers for normalizing interpreter memory state between timed runs.

Every timed iteration starts after a full collection so that a pending
garbage collection triggered by a previous run is not charged to the next
one. Memory snapshots use the resident set size reported by psutil.
"""

from __future__ import annotations

import gc
import os

import psutil


def force_collection() -> None:
    """
    Run a full collection twice.

    The second pass reclaims objects released by finalizers (``__del__``)
    that ran during the first one.
    """
    gc.collect()
    gc.collect()


def current_memory_bytes() -> int:
    """Return the current process RSS in bytes."""
    return psutil.Process(os.getpid()).memory_info().rss


def format_bytes(num_bytes: int) -> str:
    """Format a byte count in the largest unit (B, KB, MB, GB) below 1024."""
    units = ["B", "KB", "MB", "GB"]
    sign = "-" if num_bytes < 0 else ""
    value = float(abs(num_bytes))
    order = 0
    while value >= 1024 and order < len(units) - 1:
        order += 1
        value /= 1024

    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{sign}{text} {units[order]}"
