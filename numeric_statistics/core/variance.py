"""Sample (Bessel-corrected) variance, ignoring NaN entries.

This is the naive two-pass method: one pass for the average, one for the
squared deviations from it. No compensated or online algorithm is used.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from numeric_statistics.core.average import average as _average
from numeric_statistics.core.precision import (
    Precision,
    as_samples,
    running_sum,
    valid_samples,
)


def variance(values: Sequence[float] | np.ndarray, precision: Precision) -> np.floating:
    """Variance of the non-NaN entries with divisor ``n - 1``.

    NaN for empty / all-NaN input, exactly zero for a single valid entry.
    """
    samples = as_samples(values, precision)
    if samples.size == 0:
        return precision.nan
    return variance_with_average(samples, _average(samples, precision), precision)


def variance_with_average(
    values: Sequence[float] | np.ndarray,
    average: float,
    precision: Precision,
) -> np.floating:
    """Variance of the non-NaN entries around a precomputed *average*.

    Skips the average pass. *average* is trusted as given: it is not checked
    against *values*, and a value from elsewhere yields the spread around
    that value instead. Pass ``average(values)`` to get the true variance.
    """
    valid = valid_samples(as_samples(values, precision))
    count = valid.size
    if count == 0:
        return precision.nan
    if count == 1:
        return precision.zero
    with np.errstate(over="ignore", invalid="ignore"):
        deltas = valid - precision.scalar(average)
        squares = deltas * deltas
        return running_sum(squares, precision) / precision.scalar(count - 1)
