"""
Calibrated benchmark runner.

Runs an operation a calibrated (or explicit) number of times, strictly
one after another, with a full garbage collection before every timed
call. Samples are collected in milliseconds, optionally trimmed of
outliers, and summarised on the console and in an append-only log file.

Usage:
    from benchmarker import benchmark

    result = benchmark(sorted, data, label="sorted()", verbose=True)
    print(result.p95)
"""

from __future__ import annotations

import functools
import time
from contextlib import nullcontext
from typing import Any, Callable, List, Optional, TextIO

from ..utils.memory import force_collection
from ..utils.outliers import outlier_trim_count, trim_outliers
from .calibration import calibrate
from .config import DEFAULT_LABEL, DEFAULT_WARMUP_ITERATIONS, BenchmarkConfig, ConfigurationError, PathLike
from .report import console_header, format_summary, iteration_line, log_header, outlier_notice
from .result import BenchmarkResult

Logger = Callable[[str], None]
Operation = Callable[[], Any]


class BenchmarkRunner:
    """Executes one configured benchmark run."""

    def __init__(self, config: BenchmarkConfig, console: Optional[Logger] = None) -> None:
        self.config = config
        self.console = console or print

    def resolve_iterations(self, operation: Operation) -> int:
        """Explicit iteration count, or one calibrated from a trial run."""
        if self.config.iterations is not None:
            return self.config.iterations
        return calibrate(operation, self.config.warmup_iterations)

    def run(self, operation: Operation, iteration_count: int) -> BenchmarkResult:
        """
        Time ``iteration_count`` calls of ``operation`` and return the result.

        Any exception from the operation aborts the run; no partial result
        is produced. Failing to open the log file raises before the first
        timed call.
        """
        if iteration_count <= 0:
            raise ConfigurationError("Iteration count must be positive.")

        label = self.config.label
        log_target = (
            open(self.config.log_file, 'a', encoding='utf-8')
            if self.config.log_file is not None
            else nullcontext()
        )

        with log_target as log:
            self.console(console_header(label, iteration_count))
            self._write_log(log, log_header(label, iteration_count))

            samples = self.measure_operation(operation, iteration_count, log)

            if self.config.remove_outliers:
                trim = outlier_trim_count(len(samples))
                if trim:
                    samples = trim_outliers(samples)
                    self._write_log(log, outlier_notice(2 * trim, len(samples)))

            result = BenchmarkResult(samples, label)
            summary = format_summary(result)
            self.console(summary)
            if log is not None:
                log.write(summary + "\n")
                log.write("\n")

        return result

    def measure_operation(self, operation: Operation, iterations: int,
                          log: Optional[TextIO] = None) -> List[float]:
        """Timed measurement loop; returns samples in execution order."""
        samples: List[float] = []

        for i in range(iterations):
            force_collection()

            start = time.perf_counter()
            operation()
            elapsed_ms = (time.perf_counter() - start) * 1000
            samples.append(elapsed_ms)

            if self.config.verbose:
                line = iteration_line(i + 1, elapsed_ms)
                self.console(line)
                self._write_log(log, line)

        return samples

    @staticmethod
    def _write_log(log: Optional[TextIO], line: str) -> None:
        if log is not None:
            log.write(line + "\n")


def run_benchmark(operation: Operation, config: BenchmarkConfig,
                  console: Optional[Logger] = None) -> BenchmarkResult:
    """Calibrate (unless ``config.iterations`` is set) and run."""
    runner = BenchmarkRunner(config, console=console)
    iterations = runner.resolve_iterations(operation)
    return runner.run(operation, iterations)


def benchmark(
    operation: Callable[..., Any],
    *args: Any,
    iterations: Optional[int] = None,
    label: str = DEFAULT_LABEL,
    verbose: bool = False,
    remove_outliers: bool = True,
    log_file: Optional[PathLike] = None,
    warmup_iterations: int = DEFAULT_WARMUP_ITERATIONS,
    console: Optional[Logger] = None,
) -> BenchmarkResult:
    """
    Benchmark ``operation(*args)``.

    Positional ``args`` are bound once, at call time. Options are
    validated before the operation is first invoked; an invalid
    ``iterations`` raises ``ConfigurationError``.
    """
    config = BenchmarkConfig(
        iterations=iterations,
        label=label,
        verbose=verbose,
        remove_outliers=remove_outliers,
        log_file=log_file,
        warmup_iterations=warmup_iterations,
    )
    target = functools.partial(operation, *args) if args else operation
    return run_benchmark(target, config, console=console)
