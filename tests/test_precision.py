"""Tests for numeric_statistics.core.precision."""

import math

import numpy as np
import pytest

from numeric_statistics import f32, f64
from numeric_statistics.common.errors import NumericStatisticsError, PrecisionMismatchError
from numeric_statistics.core.precision import (
    FLOAT32,
    FLOAT64,
    as_samples,
    is_defined,
    running_sum,
    valid_samples,
)


# ---------------------------------------------------------------------------
# Precision
# ---------------------------------------------------------------------------


def test_precision_epsilons():
    assert FLOAT32.epsilon == np.finfo(np.float32).eps
    assert FLOAT64.epsilon == np.finfo(np.float64).eps


def test_precision_sentinels_have_width():
    assert isinstance(FLOAT32.nan, np.float32) and math.isnan(FLOAT32.nan)
    assert isinstance(FLOAT64.zero, np.float64) and FLOAT64.zero == 0.0


def test_precision_scalar_rounds_to_width():
    assert FLOAT32.scalar(0.1) == np.float32(0.1)
    assert FLOAT64.scalar(0.1) == 0.1


# ---------------------------------------------------------------------------
# as_samples
# ---------------------------------------------------------------------------


def test_as_samples_casts_python_sequences():
    samples = as_samples([1.0, 2.0], FLOAT32)
    assert samples.dtype == np.float32
    assert as_samples((1.0, 2.0), FLOAT64).dtype == np.float64


def test_as_samples_accepts_integer_arrays():
    samples = as_samples(np.array([1, 2, 3]), FLOAT64)
    assert samples.dtype == np.float64


def test_as_samples_rejects_other_width():
    with pytest.raises(PrecisionMismatchError, match="f64 statistics called with float32"):
        as_samples(np.array([1.0], dtype=np.float32), FLOAT64)
    with pytest.raises(PrecisionMismatchError):
        as_samples(np.array([1.0], dtype=np.float64), FLOAT32)


def test_precision_mismatch_is_a_type_error():
    with pytest.raises(TypeError):
        f32.min(np.array([1.0, 2.0]))
    with pytest.raises(NumericStatisticsError):
        f64.All.from_values(np.array([1.0], dtype=np.float16))


def test_as_samples_rejects_multi_dimensional_input():
    with pytest.raises(ValueError, match="1-D"):
        as_samples([[1.0, 2.0], [3.0, 4.0]], FLOAT64)


def test_as_samples_is_read_only_view_of_caller_array():
    values = np.array([3.0, 1.0, 2.0])
    samples = as_samples(values, FLOAT64)
    assert not samples.flags.writeable
    assert values.flags.writeable


def test_functions_do_not_modify_input(stats):
    values = np.array([3.0, np.nan, 1.0, 2.0], dtype=stats.All.precision.dtype)
    original = values.copy()
    stats.All.from_values(values)
    stats.variance(values)
    np.testing.assert_array_equal(values, original)


# ---------------------------------------------------------------------------
# valid_samples / running_sum
# ---------------------------------------------------------------------------


def test_valid_samples_drops_nans_in_order():
    samples = as_samples([np.nan, 3.0, np.nan, 1.0, 2.0], FLOAT64)
    assert valid_samples(samples).tolist() == [3.0, 1.0, 2.0]


def test_running_sum_empty_is_zero():
    assert running_sum(as_samples([], FLOAT32), FLOAT32) == 0.0


def test_running_sum_is_sequential():
    # ((1e16 + 1) + 1) loses both ones; a pairwise sum would keep them
    samples = as_samples([1e16, 1.0, 1.0], FLOAT64)
    assert running_sum(samples, FLOAT64) == 1e16


def test_running_sum_stays_in_width():
    result = running_sum(as_samples([0.1, 0.2], FLOAT32), FLOAT32)
    assert isinstance(result, np.float32)
    assert result == np.float32(0.1) + np.float32(0.2)


# ---------------------------------------------------------------------------
# is_defined
# ---------------------------------------------------------------------------


def test_is_defined(stats):
    assert stats.is_defined(stats.average([1.0]))
    assert stats.is_defined(stats.variance([1.0]))
    assert not stats.is_defined(stats.average([]))
    assert not stats.is_defined(stats.standard_deviation([math.nan]))


def test_is_defined_accepts_infinity():
    assert is_defined(math.inf)
