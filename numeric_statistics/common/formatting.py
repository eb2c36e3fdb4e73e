"""Text rendering helpers for statistic values."""

from __future__ import annotations

import numpy as np

from numeric_statistics.common.constants import NAN_TEXT, SUMMARY_LABELS


def format_scalar(value: np.floating) -> str:
    """Shortest round-trip decimal of *value* at its own width (``NaN`` if undefined)."""
    if np.isnan(value):
        return NAN_TEXT
    return str(value)


def format_lines(stats: dict[str, np.floating]) -> str:
    """Render ``label: value`` lines, one per summary field, each ending in a newline."""
    return "".join(
        f"{label}: {format_scalar(stats[key])}\n" for key, label in SUMMARY_LABELS.items()
    )
