"""Immutable snapshot of all five statistics for one sample sequence."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, fields
from typing import ClassVar

import numpy as np

from numeric_statistics.common.formatting import format_lines
from numeric_statistics.common.logging import get_logger
from numeric_statistics.core.average import average
from numeric_statistics.core.extrema import maximum, minimum
from numeric_statistics.core.precision import Precision, as_samples
from numeric_statistics.core.standard_deviation import standard_deviation_with_variance
from numeric_statistics.core.variance import variance_with_average

log = get_logger("summary")


@dataclass(frozen=True)
class Summary:
    """min, max, average, variance and standard deviation of one sequence.

    Subclasses bind a width through the ``precision`` class attribute
    (see ``numeric_statistics.f32.All`` and ``numeric_statistics.f64.All``).
    :meth:`from_values` is the only supported way to build a record from
    samples; calling the class directly just stores the five given values,
    cast to the width. The record keeps no reference to the samples it came
    from.
    """

    min: np.floating
    max: np.floating
    average: np.floating
    variance: np.floating
    standard_deviation: np.floating

    precision: ClassVar[Precision]

    def __post_init__(self) -> None:
        for f in fields(self):
            # frozen: bypass __setattr__
            object.__setattr__(self, f.name, self.precision.scalar(getattr(self, f.name)))

    @classmethod
    def from_values(cls, values: Sequence[float] | np.ndarray) -> Summary:
        """Compute every statistic of *values*.

        The average is computed once and reused for the variance, and that
        variance is reused for the standard deviation, so the fields always
        agree with each other.
        """
        precision = cls.precision
        samples = as_samples(values, precision)

        lo = minimum(samples, precision)
        hi = maximum(samples, precision)
        mean = average(samples, precision)
        var = variance_with_average(samples, mean, precision)
        std = standard_deviation_with_variance(var, precision)
        summary = cls(lo, hi, mean, var, std)

        if log.isEnabledFor(logging.DEBUG):
            log.debug(
                "summary_computed",
                precision=precision.name,
                samples=int(samples.size),
                valid=int(np.count_nonzero(~np.isnan(samples))),
                **summary.to_dict(),
            )
        return summary

    def to_dict(self) -> dict[str, float]:
        """Fields as plain Python floats (NaN kept as ``float('nan')``)."""
        return {f.name: float(getattr(self, f.name)) for f in fields(self)}

    def render(self) -> str:
        """Five ``label: value`` lines; for display only, not a stable format."""
        return format_lines({f.name: getattr(self, f.name) for f in fields(self)})

    def __str__(self) -> str:
        return self.render()
