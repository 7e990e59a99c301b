import math
import numpy as np
from typing import Dict, Sequence


class StatisticsCollector:
    """Compute summary statistics over a sequence of millisecond samples."""

    @staticmethod
    def mean(values: Sequence[float]) -> float:
        """Arithmetic mean. An empty sequence raises ZeroDivisionError."""
        if len(values) == 0:
            raise ZeroDivisionError("mean of an empty sample sequence")
        return float(np.mean(np.asarray(values, dtype=float)))

    @staticmethod
    def std(values: Sequence[float]) -> float:
        """Population standard deviation (divides by the sample count)."""
        if len(values) == 0:
            raise ZeroDivisionError("standard deviation of an empty sample sequence")
        return float(np.std(np.asarray(values, dtype=float), ddof=0))

    @staticmethod
    def minimum(values: Sequence[float]) -> float:
        return float(np.min(np.asarray(values, dtype=float)))

    @staticmethod
    def maximum(values: Sequence[float]) -> float:
        return float(np.max(np.asarray(values, dtype=float)))

    @staticmethod
    def percentile(values: Sequence[float], p: float) -> float:
        """
        Nearest-rank percentile: always returns an observed sample.

        index = ceil(p / 100 * count) - 1, clamped to 0.
        """
        if not 0 <= p <= 100:
            raise ValueError(f"Percentile must be within [0, 100], got {p!r}")
        arr = np.sort(np.asarray(values, dtype=float))
        if arr.size == 0:
            raise ZeroDivisionError("percentile of an empty sample sequence")
        index = math.ceil((p / 100.0) * arr.size) - 1
        return float(arr[max(0, index)])

    @classmethod
    def compute_stats(cls, values: Sequence[float]) -> Dict:
        """Compute basic statistics from a list of values."""
        return {
            'count': len(values),
            'mean': cls.mean(values),
            'median': cls.percentile(values, 50),
            'std': cls.std(values),
            'min': cls.minimum(values),
            'max': cls.maximum(values),
            'p95': cls.percentile(values, 95),
            'p99': cls.percentile(values, 99),
        }
