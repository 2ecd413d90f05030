"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .thresholds import (
    OrientationTuning,
    PORTRAIT_TUNING,
    LANDSCAPE_TUNING,
)

__all__ = [
    "OrientationTuning",
    "PORTRAIT_TUNING",
    "LANDSCAPE_TUNING",
]
