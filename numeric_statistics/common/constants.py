"""Shared constants for numeric statistics."""

import logging

# Approximate-equality tolerance = EPSILON_FACTOR * machine epsilon of the width
EPSILON_FACTOR = 2.0

# ── Rendering ────────────────────────────────────────────────────────────────

NAN_TEXT = "NaN"

# Summary field -> label, in render order
SUMMARY_LABELS: dict[str, str] = {
    "min": "min",
    "max": "max",
    "average": "average",
    "variance": "variance",
    "standard_deviation": "standard deviation",
}

# ── Logging ──────────────────────────────────────────────────────────────────

LOGGER_NAME = "numeric_statistics"
DEFAULT_LOG_LEVEL = logging.INFO
