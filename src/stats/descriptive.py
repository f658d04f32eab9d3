"""Descriptive statistics over a sample of floats.

Every function takes an ordered sequence of floats and returns a float, or
``None`` when the statistic is undefined for that input.  Inputs are never
mutated.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

# sample -> value, or None if the statistic is undefined
StatFn = Callable[[Sequence[float]], float | None]


def _accumulate(values) -> float:
    # Plain left-to-right sum; builtin sum() compensates on 3.12+.
    total = 0.0
    for x in values:
        total += float(x)
    return total


def mean(sample: Sequence[float]) -> float | None:
    """Arithmetic mean.  The mean of an empty sample is 0.0."""
    if len(sample) == 0:
        return 0.0
    return _accumulate(sample) / float(len(sample))


def stddev(sample: Sequence[float]) -> float | None:
    """Population standard deviation (divides by n).

    Undefined for an empty sample; a single point has zero spread.
    """
    n = len(sample)
    if n == 0:
        return None
    if n == 1:
        return 0.0
    m = mean(sample)
    squared = [(x - m) * (x - m) for x in sample]
    return math.sqrt(mean(squared))


def median(sample: Sequence[float]) -> float | None:
    """Lower median: ties between the two middle values go to the smaller.

    Undefined for an empty sample, and for any sample containing NaN.
    """
    if len(sample) == 0:
        return None
    if any(math.isnan(x) for x in sample):
        return None
    ordered = sorted(sample)
    return float(ordered[(len(ordered) - 1) // 2])


def l2(sample: Sequence[float]) -> float | None:
    """Euclidean norm.  The norm of an empty sample is 0.0."""
    return math.sqrt(_accumulate(x * x for x in sample))
