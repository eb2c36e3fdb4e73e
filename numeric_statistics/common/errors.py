"""Numeric-statistics-specific exceptions."""


class NumericStatisticsError(Exception):
    """Base class for errors raised by numeric_statistics."""


class PrecisionMismatchError(NumericStatisticsError, TypeError):
    """Raised when a numpy array's float width does not match the variant called.

    Values are never converted between widths behind the caller's back: pass
    float32 data to ``numeric_statistics.f32`` and float64 data to
    ``numeric_statistics.f64``, or cast explicitly with ``ndarray.astype``.
    """
