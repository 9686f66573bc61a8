"""
Summary statistics over a timing series.

Standard deviation uses the population formula (ddof=0):

    std = sqrt(mean((t - mean(t))^2))

which is what the report's StdDev column shows.
"""

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np


@dataclass(frozen=True)
class TimingSummary:
    """Descriptive statistics for one (algorithm, CPU) timing series, in seconds."""
    mean: float
    std: float
    best: float
    worst: float
    median: float
    trials: int


def summarize(series: Union[Sequence[float], np.ndarray]) -> TimingSummary:
    """
    Compute mean, population stddev, min, max and median of *series*.

    Raises:
        ValueError: If the series is empty.
    """
    times = np.asarray(series, dtype=np.float64)
    if times.size == 0:
        raise ValueError("Cannot summarize an empty timing series")
    return TimingSummary(
        mean=float(np.mean(times)),
        std=float(np.std(times, ddof=0)),
        best=float(np.min(times)),
        worst=float(np.max(times)),
        median=float(np.median(times)),
        trials=int(times.size),
    )
