"""Centralized tuning constants for sheet layout.

These ratios were tuned by eye against printed output of invoices and
receipts. They are kept verbatim so layouts stay identical between
releases; do not replace them with "cleaner" values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class OrientationTuning:
    """
    Layout ratios for one sheet orientation.

    Attributes:
        margin_x_ratio: Horizontal page margin as a fraction of canvas width
        margin_y_ratio: Vertical page margin as a fraction of canvas height
        spacing_x_ratio: Horizontal cell padding as a fraction of cell width
        spacing_y_ratio: Vertical cell padding as a fraction of cell height
        row_compaction: (min_rows, factor) pairs checked in order; the first
            match divides the row allotment by ``rows * factor``
        row_offset_factor: Per-row upward shift (fraction of cell height)
        row_offset_min_rows: Row count from which the upward shift applies
        scale_fill_bias_y: Multiplier on the vertical fit before taking min
        scale_safety: Final shrink applied to the fitted scale
        column_major: Fill down each column before moving right
    """

    margin_x_ratio: float = 0.02
    margin_y_ratio: float = 0.01
    spacing_x_ratio: float = 0.01
    spacing_y_ratio: float = 0.01
    row_compaction: Tuple[Tuple[int, float], ...] = ()
    row_offset_factor: float = 0.0
    row_offset_min_rows: int = 3
    scale_fill_bias_y: float = 1.0
    scale_safety: float = 0.98
    column_major: bool = False

    def row_compaction_factor(self, rows: int) -> float | None:
        """Return the compaction factor for ``rows``, or None when rows are not compacted."""
        for min_rows, factor in self.row_compaction:
            if rows >= min_rows:
                return factor
        return None


# Portrait stacks are compacted vertically: denser stacks overlap their
# row allotment slightly to reduce whitespace between receipts.
PORTRAIT_TUNING = OrientationTuning(
    spacing_y_ratio=0.005,
    row_compaction=((4, 0.95), (3, 0.97)),
    row_offset_factor=0.05,
    row_offset_min_rows=3,
    scale_fill_bias_y=1.02,
    scale_safety=0.99,
    column_major=True,
)

LANDSCAPE_TUNING = OrientationTuning(
    spacing_y_ratio=0.01,
    scale_fill_bias_y=1.0,
    scale_safety=0.98,
    column_major=False,
)
