from typing import Dict, Iterable, Tuple

from ..utils.stats import StatisticsCollector


class BenchmarkResult:
    """
    Final (possibly outlier-trimmed) samples of one benchmark run.

    The samples are frozen on construction; every statistic is recomputed
    from them on access.
    """

    __slots__ = ('_samples', '_label')

    def __init__(self, samples: Iterable[float], label: str):
        self._samples: Tuple[float, ...] = tuple(float(s) for s in samples)
        self._label = label

    @property
    def samples(self) -> Tuple[float, ...]:
        return self._samples

    @property
    def label(self) -> str:
        return self._label

    @property
    def count(self) -> int:
        return len(self._samples)

    @property
    def average(self) -> float:
        return StatisticsCollector.mean(self._samples)

    @property
    def standard_deviation(self) -> float:
        return StatisticsCollector.std(self._samples)

    @property
    def min(self) -> float:
        return StatisticsCollector.minimum(self._samples)

    @property
    def max(self) -> float:
        return StatisticsCollector.maximum(self._samples)

    def percentile(self, p: float) -> float:
        return StatisticsCollector.percentile(self._samples, p)

    @property
    def median(self) -> float:
        return self.percentile(50)

    @property
    def p95(self) -> float:
        return self.percentile(95)

    @property
    def p99(self) -> float:
        return self.percentile(99)

    def summary(self) -> Dict:
        """All metrics as a plain dict."""
        stats = StatisticsCollector.compute_stats(self._samples)
        stats['label'] = self._label
        return stats

    def __repr__(self) -> str:
        return f"BenchmarkResult(label={self._label!r}, count={self.count})"
