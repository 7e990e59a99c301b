import time
from typing import Callable, Optional


class HighPrecisionTimer:
    """High-precision monotonic timer for per-iteration measurements."""

    def __init__(self):
        self.start_time: Optional[float] = None
        self.elapsed: Optional[float] = None

    def start(self):
        """Start timing."""
        self.elapsed = None
        self.start_time = time.perf_counter()

    def stop(self) -> float:
        """Stop timing and return elapsed time in seconds."""
        if self.start_time is None:
            raise RuntimeError("Timer not started")
        self.elapsed = time.perf_counter() - self.start_time
        return self.elapsed

    @property
    def elapsed_ms(self) -> float:
        if self.elapsed is None:
            raise RuntimeError("Timer not stopped")
        return self.elapsed * 1000.0

    @staticmethod
    def time_call_ms(operation: Callable[[], object]) -> float:
        """Invoke operation once and return its wall time in milliseconds."""
        start = time.perf_counter()
        operation()
        return (time.perf_counter() - start) * 1000.0
