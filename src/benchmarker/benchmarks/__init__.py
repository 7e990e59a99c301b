from .calibration import ITERATION_TABLE, calculate_iterations, calibrate
from .config import BenchmarkConfig, ConfigurationError, config_from_dict, load_config
from .report import format_summary
from .result import BenchmarkResult
from .runner import BenchmarkRunner, benchmark, run_benchmark
from .tracker import PerformanceTracker

__all__ = [
    'ITERATION_TABLE',
    'BenchmarkConfig',
    'BenchmarkResult',
    'BenchmarkRunner',
    'ConfigurationError',
    'PerformanceTracker',
    'benchmark',
    'calculate_iterations',
    'calibrate',
    'config_from_dict',
    'format_summary',
    'load_config',
    'run_benchmark',
]
