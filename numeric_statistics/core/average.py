"""Arithmetic mean of a sample sequence, ignoring NaN entries."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from numeric_statistics.core.precision import (
    Precision,
    as_samples,
    running_sum,
    valid_samples,
)


def average(values: Sequence[float] | np.ndarray, precision: Precision) -> np.floating:
    """Sum of the non-NaN entries divided by their count.

    NaN entries add nothing to the sum and nothing to the count. Returns NaN
    when no valid entry remains (empty or all-NaN input).
    """
    valid = valid_samples(as_samples(values, precision))
    if valid.size == 0:
        return precision.nan
    with np.errstate(over="ignore", invalid="ignore"):
        return running_sum(valid, precision) / precision.scalar(valid.size)
