"""Floating-point widths and the shared sample-sequence policy.

Every reduction in ``numeric_statistics.core`` is written once against a
:class:`Precision` and instantiated for 32 and 64 bits by the public
``f32`` / ``f64`` modules. Arithmetic always happens in the width's own
numpy scalar type, so the 32-bit results keep 32-bit rounding.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from numeric_statistics.common.errors import PrecisionMismatchError


@dataclass(frozen=True)
class Precision:
    """One floating-point width: its numpy dtype and machine epsilon."""

    name: str
    dtype: np.dtype

    @property
    def epsilon(self) -> np.floating:
        return np.finfo(self.dtype).eps

    @property
    def nan(self) -> np.floating:
        return self.dtype.type(np.nan)

    @property
    def zero(self) -> np.floating:
        return self.dtype.type(0.0)

    def scalar(self, value: float) -> np.floating:
        """Cast a single value to this width."""
        return self.dtype.type(value)


FLOAT32 = Precision("f32", np.dtype(np.float32))
FLOAT64 = Precision("f64", np.dtype(np.float64))


def as_samples(values: Sequence[float] | np.ndarray, precision: Precision) -> np.ndarray:
    """Return *values* as a read-only 1-D array of *precision*'s dtype.

    Plain Python sequences carry no width and are cast. A numpy floating
    array of a different width raises :class:`PrecisionMismatchError`.
    """
    if (
        isinstance(values, np.ndarray)
        and values.dtype.kind == "f"
        and values.dtype != precision.dtype
    ):
        raise PrecisionMismatchError(
            f"{precision.name} statistics called with {values.dtype} samples"
        )
    samples = np.asarray(values, dtype=precision.dtype)
    if samples.ndim != 1:
        raise ValueError(f"sample sequence must be 1-D, got {samples.ndim} dimensions")
    # Caller owns the data; never write through the view.
    samples = samples.view()
    samples.flags.writeable = False
    return samples


def valid_samples(samples: np.ndarray) -> np.ndarray:
    """The non-NaN entries of *samples*, in order."""
    return samples[~np.isnan(samples)]


def running_sum(samples: np.ndarray, precision: Precision) -> np.floating:
    """Left-to-right sum of *samples* in *precision* (zero when empty).

    ``np.add.accumulate`` is a strict sequential fold, unlike ``np.sum``
    which reassociates into pairwise blocks.
    """
    if samples.size == 0:
        return precision.zero
    return np.add.accumulate(samples, dtype=precision.dtype)[-1]


def is_defined(value: float) -> bool:
    """``False`` exactly when *value* is the NaN "undefined" sentinel.

    Check this before using a result where zero and "no valid data" must
    be told apart.
    """
    return not np.isnan(value)
