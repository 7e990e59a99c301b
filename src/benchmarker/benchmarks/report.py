"""
Text rendering for benchmark runs.

The same summary block is written to the console and appended to the
optional log file.
"""

from datetime import datetime
from typing import List, Optional

from .result import BenchmarkResult

METRIC_COL_WIDTH = 14
VALUE_COL_WIDTH = 25
TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


def console_header(label: str, iterations: int) -> str:
    return f"{label} - Running {iterations} iterations...\n"


def log_header(label: str, iterations: int, now: Optional[datetime] = None) -> str:
    stamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return f"[{stamp}] {label} - Running {iterations} iterations"


def iteration_line(index: int, elapsed_ms: float) -> str:
    """Per-iteration line for verbose runs; ``index`` is 1-based."""
    return f"Iteration {index}: {elapsed_ms:.2f} ms"


def outlier_notice(removed: int, kept: int) -> str:
    return f"Removed {removed} outliers, keeping {kept} measurements"


def _row(metric: str, value: str) -> str:
    return f"  {metric:<{METRIC_COL_WIDTH}}| {value}"


def format_summary(result: BenchmarkResult) -> str:
    """
    Render the summary table::

        ------ <label> Summary ------
        > Based on <n> runs:
        ...
          Average       | 12.345 ms (± 0.678 ms)

    The block starts with a newline and has no trailing newline.
    """
    opener = f"\n------ {result.label} Summary ------"
    separator = "-" * (len(opener) - 1)

    lines: List[str] = [
        opener,
        f"> Based on {result.count} runs:",
        separator,
        f"  {'Metric':<{METRIC_COL_WIDTH}}|  Value",
        "-" * (METRIC_COL_WIDTH + 2) + "+" + "-" * (VALUE_COL_WIDTH + 2),
        _row("Average", f"{result.average:.3f} ms (± {result.standard_deviation:.3f} ms)"),
        _row("Min", f"{result.min:.3f} ms"),
        _row("Max", f"{result.max:.3f} ms"),
        _row("Median (P50)", f"{result.median:.3f} ms"),
        _row("P95", f"{result.p95:.3f} ms"),
        _row("P99", f"{result.p99:.3f} ms"),
        separator,
    ]
    return "\n".join(lines)
