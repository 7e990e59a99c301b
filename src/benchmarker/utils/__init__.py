from .memory import current_memory_bytes, force_collection, format_bytes
from .outliers import outlier_trim_count, trim_outliers
from .stats import StatisticsCollector
from .timer import HighPrecisionTimer

__all__ = [
    'HighPrecisionTimer',
    'StatisticsCollector',
    'current_memory_bytes',
    'force_collection',
    'format_bytes',
    'outlier_trim_count',
    'trim_outliers',
]
