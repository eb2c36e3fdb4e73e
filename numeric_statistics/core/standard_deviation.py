"""Standard deviation as the square root of the sample variance."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from numeric_statistics.core.precision import Precision
from numeric_statistics.core.variance import variance as _variance


def standard_deviation(
    values: Sequence[float] | np.ndarray, precision: Precision
) -> np.floating:
    """Square root of :func:`~numeric_statistics.core.variance.variance` of *values*."""
    return standard_deviation_with_variance(_variance(values, precision), precision)


def standard_deviation_with_variance(variance: float, precision: Precision) -> np.floating:
    """Square root of a precomputed *variance*.

    NaN stays NaN, zero stays zero, and a negative variance gives NaN.
    """
    with np.errstate(invalid="ignore"):
        return np.sqrt(precision.scalar(variance))
