"""Approximate float comparison for test suites."""

from __future__ import annotations

import numpy as np

from numeric_statistics.common.constants import EPSILON_FACTOR
from numeric_statistics.core.precision import Precision


def assert_eq_float(
    left: float,
    right: float,
    precision: Precision,
    tolerance: float | None = None,
    *,
    equal_nan: bool = False,
) -> None:
    """Raise ``AssertionError`` unless *left* and *right* agree within *tolerance*.

    Both values are compared at *precision*'s width. The default tolerance
    is ``EPSILON_FACTOR`` times that width's machine epsilon. NaN never
    matches anything unless *equal_nan* is set, in which case two NaNs match.
    """
    a = precision.scalar(left)
    b = precision.scalar(right)
    if a == b:
        return
    if equal_nan and np.isnan(a) and np.isnan(b):
        return
    epsilon = precision.epsilon * precision.scalar(EPSILON_FACTOR)
    if tolerance is not None:
        epsilon = precision.scalar(tolerance)
    with np.errstate(over="ignore", invalid="ignore"):
        abs_diff = abs(a - b)
    if not abs_diff <= epsilon:
        raise AssertionError(
            f"assertion failed: `assert_eq_{precision.name}`\n"
            f" left: {a},\n"
            f" right: {b},\n"
            f" abs_diff: {abs_diff},\n"
            f" ε: {epsilon}"
        )
