"""Statistics over 32-bit float samples.

Every function works in float32 throughout and returns a numpy float32
scalar. Results are NaN when no valid (non-NaN) sample exists; test with
:func:`is_defined` where that must be told apart from zero.

Example::

    >>> import numpy as np
    >>> from numeric_statistics.f32 import All
    >>> values = np.array([1.0, 2.0, 4.0], dtype=np.float32)
    >>> print(All.from_values(values), end="")
    min: 1.0
    max: 4.0
    average: 2.3333333
    variance: 2.3333335
    standard deviation: 1.5275253
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from numeric_statistics.core import average as _average
from numeric_statistics.core import extrema as _extrema
from numeric_statistics.core import standard_deviation as _standard_deviation
from numeric_statistics.core import variance as _variance
from numeric_statistics.core.precision import FLOAT32, is_defined
from numeric_statistics.core.summary import Summary
from numeric_statistics.core.testing import assert_eq_float

__all__ = [
    "All",
    "assert_eq_f32",
    "average",
    "is_defined",
    "max",
    "min",
    "standard_deviation",
    "standard_deviation_with_variance",
    "variance",
    "variance_with_average",
]

Samples = Sequence[float] | np.ndarray


def min(values: Samples) -> np.float32:  # noqa: A001
    return _extrema.minimum(values, FLOAT32)


def max(values: Samples) -> np.float32:  # noqa: A001
    return _extrema.maximum(values, FLOAT32)


def average(values: Samples) -> np.float32:
    return _average.average(values, FLOAT32)


def variance(values: Samples) -> np.float32:
    return _variance.variance(values, FLOAT32)


def variance_with_average(values: Samples, average: float) -> np.float32:
    """Variance around a precomputed *average*, which is trusted as given."""
    return _variance.variance_with_average(values, average, FLOAT32)


def standard_deviation(values: Samples) -> np.float32:
    return _standard_deviation.standard_deviation(values, FLOAT32)


def standard_deviation_with_variance(variance: float) -> np.float32:
    return _standard_deviation.standard_deviation_with_variance(variance, FLOAT32)


class All(Summary):
    """Summary of float32 samples."""

    precision = FLOAT32


def assert_eq_f32(
    left: float,
    right: float,
    tolerance: float | None = None,
    *,
    equal_nan: bool = False,
) -> None:
    """Assert *left* and *right* agree within 2 * finfo(float32).eps."""
    assert_eq_float(left, right, FLOAT32, tolerance, equal_nan=equal_nan)
