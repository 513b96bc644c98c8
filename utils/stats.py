"""
Sample Statistics Utility.

Responsibility boundaries:
- Summarizes batches of generated integers for sanity checks.
- Does not judge randomness; callers compare against their own tolerances.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(frozen=True)
class SampleSummary:
    count: int
    minimum: int
    maximum: int
    mean: float
    median: float
    value_range: int


def _as_array(values: Sequence[int]) -> np.ndarray:
    arr = np.asarray(values, dtype=np.int64)
    if arr.size == 0:
        raise ValueError("Cannot summarize an empty sample")
    return arr


def mean(values: Sequence[int]) -> float:
    """Arithmetic mean, accumulated in float64."""
    return float(np.mean(_as_array(values), dtype=np.float64))


def median(values: Sequence[int]) -> float:
    """Middle value; the average of the two middle values for even sizes."""
    return float(np.median(_as_array(values)))


def value_range(values: Sequence[int]) -> int:
    """
    Spread of the sample, max - min.

    Computed on Python ints so int64-extreme samples cannot wrap.
    """
    arr = _as_array(values)
    return int(arr.max()) - int(arr.min())


def summarize(values: Sequence[int]) -> SampleSummary:
    arr = _as_array(values)
    return SampleSummary(
        count=int(arr.size),
        minimum=int(arr.min()),
        maximum=int(arr.max()),
        mean=float(np.mean(arr, dtype=np.float64)),
        median=float(np.median(arr)),
        value_range=int(arr.max()) - int(arr.min()),
    )
