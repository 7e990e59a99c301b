"""
Single-shot scoped measurement.

Usage:
    with PerformanceTracker("load_dataset"):
        load_dataset()

Elapsed wall time and the process memory delta are printed when the
block exits, including when it exits with an exception.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..utils.memory import current_memory_bytes, force_collection, format_bytes
from ..utils.timer import HighPrecisionTimer

Logger = Callable[[str], None]


class PerformanceTracker:
    """Context manager reporting wall time and RSS delta of its block."""

    def __init__(self, label: str = "Performance Tracker", console: Optional[Logger] = None) -> None:
        self.label = label
        self.console = console or print
        self._timer = HighPrecisionTimer()
        self.start_memory: Optional[int] = None
        self.end_memory: Optional[int] = None
        self.elapsed_ms: Optional[float] = None

    @property
    def memory_delta(self) -> Optional[int]:
        if self.start_memory is None or self.end_memory is None:
            return None
        return self.end_memory - self.start_memory

    def __enter__(self) -> "PerformanceTracker":
        force_collection()
        self.start_memory = current_memory_bytes()
        self._timer.start()
        self.console(f"{self.label} started...\n")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._timer.stop()
        self.elapsed_ms = self._timer.elapsed_ms

        force_collection()
        self.end_memory = current_memory_bytes()

        opener = f"\n--- {self.label} Summary ---"
        self.console(opener)
        self.console(f"Elapsed time    : {self.elapsed_ms:.2f} ms")
        self.console(f"Memory start    : {format_bytes(self.start_memory)}")
        self.console(f"Memory end      : {format_bytes(self.end_memory)}")
        self.console(f"Memory delta    : {format_bytes(self.memory_delta)}")
        self.console("-" * (len(opener) - 1))
