"""Symmetric trimming of the most extreme samples."""

from typing import List, Sequence

MIN_SAMPLES_FOR_TRIM = 3


def outlier_trim_count(sample_count: int) -> int:
    """Number of samples dropped from each end, or 0 when too few to trim."""
    if sample_count <= MIN_SAMPLES_FOR_TRIM:
        return 0
    return max(1, sample_count // 10)


def trim_outliers(samples: Sequence[float]) -> List[float]:
    """
    Drop the lowest and highest tenth (at least one each) of the samples.

    Returns the retained middle slice in ascending order. With three or
    fewer samples an unchanged copy is returned in input order. The
    input is never mutated.
    """
    trim = outlier_trim_count(len(samples))
    if trim == 0:
        return list(samples)

    ordered = sorted(samples)
    return ordered[trim:len(ordered) - trim]
