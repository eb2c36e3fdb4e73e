"""Tests for average in both precision modules."""

import math

import numpy as np

from numeric_statistics import f32, f64

NAN = float("nan")


def test_average_empty_is_nan(stats):
    assert math.isnan(stats.average([]))


def test_average_all_nan_is_nan(stats):
    assert math.isnan(stats.average([NAN]))
    assert math.isnan(stats.average([NAN, NAN, NAN]))


def test_average_single_value(stats):
    assert stats.average([1.0]) == 1.0


# ---------------------------------------------------------------------------
# f64
# ---------------------------------------------------------------------------


def test_f64_average_ascending():
    assert f64.average([1.0, 2.0, 4.0]) == 2.3333333333333335


def test_f64_average_ascending_with_nans():
    assert f64.average([1.0, NAN, 2.0, NAN, 4.0]) == 2.3333333333333335


def test_f64_average_descending():
    assert f64.average([4.0, 2.0, 1.0]) == 2.3333333333333335


def test_f64_average_descending_with_nans():
    assert f64.average([4.0, NAN, 2.0, NAN, 1.0]) == 2.3333333333333335


def test_f64_average_divides_by_valid_count_not_length():
    # 3 valid entries out of 6
    assert f64.average([NAN, 3.0, NAN, 6.0, NAN, 9.0]) == 6.0


# ---------------------------------------------------------------------------
# f32
# ---------------------------------------------------------------------------


def test_f32_average_ascending():
    f32.assert_eq_f32(f32.average([1.0, 2.0, 4.0]), 2.3333333)


def test_f32_average_ascending_with_nans():
    f32.assert_eq_f32(f32.average([1.0, NAN, 2.0, NAN, 4.0]), 2.3333333)


def test_f32_average_descending_with_nans():
    f32.assert_eq_f32(f32.average([4.0, NAN, 2.0, NAN, 1.0]), 2.3333333)


def test_f32_average_stays_in_32_bits():
    result = f32.average([1.0, 2.0, 4.0])
    assert isinstance(result, np.float32)
    assert result == np.float32(7.0) / np.float32(3.0)


def test_f32_average_accepts_float32_array():
    values = np.array([1.0, np.nan, 2.0, 4.0], dtype=np.float32)
    f32.assert_eq_f32(f32.average(values), 2.3333333)
