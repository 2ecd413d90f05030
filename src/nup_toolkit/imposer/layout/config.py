"""
Module: imposer.layout.config

Purpose:
    Canvas geometry, orientation and grid table for the layout engine.

Key Classes:
    - Orientation: Sheet orientation enum
    - CanvasSize: Immutable output page size in PDF points

Key Functions:
    - canvas_for(): Canvas for an orientation (A4, swapped for landscape)
    - tuning_for(): Layout ratios for an orientation

Dependencies:
    - reportlab.lib.pagesizes: A4 dimensions
    - nup_toolkit.common.thresholds: Orientation tuning ratios

Used By:
    - imposer.layout.grid: Grid table lookup
    - imposer.layout.compositor: Cell metrics
    - imposer.config: RunRequest
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from reportlab.lib.pagesizes import A4

from nup_toolkit.common.thresholds import (
    LANDSCAPE_TUNING,
    PORTRAIT_TUNING,
    OrientationTuning,
)


class Orientation(Enum):
    """
    Output sheet orientation.

    PORTRAIT keeps the nominal A4 canvas and fills column-major;
    LANDSCAPE swaps width and height and fills row-major.

    Example:
        >>> Orientation.parse("Landscape")
        <Orientation.LANDSCAPE: 'landscape'>
    """

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"

    @classmethod
    def parse(cls, value: "Orientation | str") -> "Orientation":
        """Coerce a string (case-insensitive) or Orientation to Orientation."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"orientation must be 'portrait' or 'landscape': {value!r}"
            ) from None


@dataclass(frozen=True)
class CanvasSize:
    """
    Output page size in PDF points (immutable).

    Attributes:
        width: Page width in points
        height: Page height in points

    Example:
        >>> CanvasSize(100, 200).landscape()
        CanvasSize(width=200, height=100)
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.width <= 0:
            raise ValueError(f"width must be positive: {self.width}")
        if self.height <= 0:
            raise ValueError(f"height must be positive: {self.height}")

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height

    def landscape(self) -> CanvasSize:
        """Return the 90°-swapped canvas."""
        return CanvasSize(width=self.height, height=self.width)


A4_WIDTH_PT, A4_HEIGHT_PT = A4
A4_CANVAS = CanvasSize(width=A4_WIDTH_PT, height=A4_HEIGHT_PT)

DEFAULT_CAPACITY = 4

# (capacity, orientation) -> (columns, rows)
GRID_TABLE: Dict[Tuple[int, Orientation], Tuple[int, int]] = {
    (2, Orientation.LANDSCAPE): (2, 1),
    (4, Orientation.LANDSCAPE): (2, 2),
    (6, Orientation.LANDSCAPE): (3, 2),
    (8, Orientation.LANDSCAPE): (4, 2),
    (10, Orientation.LANDSCAPE): (5, 2),
    (2, Orientation.PORTRAIT): (1, 2),
    (4, Orientation.PORTRAIT): (2, 2),
    (6, Orientation.PORTRAIT): (2, 3),
    (8, Orientation.PORTRAIT): (2, 4),
    (10, Orientation.PORTRAIT): (2, 5),
}

SUPPORTED_CAPACITIES: Tuple[int, ...] = tuple(
    sorted({capacity for capacity, _ in GRID_TABLE})
)


def canvas_for(orientation: Orientation) -> CanvasSize:
    """Return the A4 canvas for ``orientation`` (landscape swaps width/height)."""
    if orientation is Orientation.LANDSCAPE:
        return A4_CANVAS.landscape()
    return A4_CANVAS


def tuning_for(orientation: Orientation) -> OrientationTuning:
    """Return the layout ratios for ``orientation``."""
    if orientation is Orientation.LANDSCAPE:
        return LANDSCAPE_TUNING
    return PORTRAIT_TUNING
