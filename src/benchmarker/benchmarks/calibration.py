"""
Adaptive iteration-count selection.

A single timed run (after warm-up) decides how many iterations the full
measurement loop gets: fast operations need many repetitions for stable
statistics, slow ones are bounded to keep the total runtime reasonable.
"""

from typing import Callable, Tuple

from ..utils.memory import force_collection
from ..utils.timer import HighPrecisionTimer

# (upper bound in ms, inclusive) -> iterations
ITERATION_TABLE: Tuple[Tuple[float, int], ...] = (
    (0.1, 10000),    # very fast
    (1.0, 1000),     # fast
    (10.0, 100),     # medium
    (100.0, 50),     # slow
    (1000.0, 20),    # very slow
    (10000.0, 5),    # extremely slow
)
SLOWEST_ITERATIONS = 1


def calculate_iterations(elapsed_ms: float) -> int:
    """Map one measured run time to a recommended iteration count."""
    for upper_bound_ms, iterations in ITERATION_TABLE:
        if elapsed_ms <= upper_bound_ms:
            return iterations
    return SLOWEST_ITERATIONS


def calibrate(operation: Callable[[], object], warmup_iterations: int = 3) -> int:
    """
    Warm the operation up, time one run and return an iteration count.

    Exceptions raised by the operation propagate to the caller.
    """
    for _ in range(warmup_iterations):
        operation()

    force_collection()

    elapsed_ms = HighPrecisionTimer.time_call_ms(operation)
    return calculate_iterations(elapsed_ms)
