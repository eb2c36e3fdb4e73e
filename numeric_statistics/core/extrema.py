"""Minimum and maximum of a sample sequence, ignoring NaN entries."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from numeric_statistics.core.precision import Precision, as_samples


def minimum(values: Sequence[float] | np.ndarray, precision: Precision) -> np.floating:
    """Smallest non-NaN value, or NaN for empty / all-NaN input.

    Folds left to right from a NaN accumulator with ``np.fmin``, which is
    IEEE 754 minNum: if one operand is NaN the other wins. Between ``+0.0``
    and ``-0.0`` either may be returned.
    """
    samples = as_samples(values, precision)
    return np.fmin.reduce(samples, initial=precision.nan)


def maximum(values: Sequence[float] | np.ndarray, precision: Precision) -> np.floating:
    """Largest non-NaN value, or NaN for empty / all-NaN input.

    Same fold as :func:`minimum` using ``np.fmax`` (IEEE 754 maxNum).
    """
    samples = as_samples(values, precision)
    return np.fmax.reduce(samples, initial=precision.nan)
