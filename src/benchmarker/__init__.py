"""
benchmarker: calibrated microbenchmarks for Python callables.

Provides:
- benchmark: calibrate, run and summarise an operation
- BenchmarkResult: samples plus mean/std/min/max/percentile accessors
- PerformanceTracker: context manager for ad hoc single-shot timing

Usage:
    from benchmarker import benchmark, PerformanceTracker

    result = benchmark(work, 1000, label="work(1000)", log_file="bench.log")

    with PerformanceTracker("work"):
        work(1000)
"""

from .benchmarks import (
    BenchmarkConfig,
    BenchmarkResult,
    BenchmarkRunner,
    ConfigurationError,
    PerformanceTracker,
    benchmark,
    calculate_iterations,
    calibrate,
    load_config,
    run_benchmark,
)

__all__ = [
    'BenchmarkConfig',
    'BenchmarkResult',
    'BenchmarkRunner',
    'ConfigurationError',
    'PerformanceTracker',
    'benchmark',
    'calculate_iterations',
    'calibrate',
    'load_config',
    'run_benchmark',
]

__version__ = "0.1.0"
