"""
Module: imposer.layout.paginator

Purpose:
    Slice sources into consecutive batches of ``capacity`` and compose
    one sheet per batch.

Key Functions:
    - batch_sources(): Consecutive slices of at most ``capacity``
    - paginate(): Main pagination function

Algorithm:
    1. Plan the grid once for (capacity, orientation)
    2. Slice sources in input order into batches of ``capacity``
    3. Compose one SheetPlan per batch with the shared grid
    The last batch may be short; it keeps the same grid and leaves
    trailing cells blank.

Used By:
    - imposer.controller: Main pipeline
"""

from __future__ import annotations

import logging
from typing import List, Sequence, TypeVar

from nup_toolkit.imposer.errors import ImposeWarning

from .compositor import compose_sheet
from .config import Orientation, canvas_for
from .grid import plan_grid
from .models import LayoutResult, SheetPlan, SourcePage

logger = logging.getLogger(__name__)

T = TypeVar("T")


def batch_sources(items: Sequence[T], capacity: int) -> List[List[T]]:
    """
    Split ``items`` into consecutive batches of at most ``capacity``.

    Example:
        >>> batch_sources([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
    """
    if capacity < 1:
        raise ValueError(f"capacity must be positive: {capacity}")
    return [list(items[i:i + capacity]) for i in range(0, len(items), capacity)]


def paginate(
    sources: Sequence[SourcePage],
    capacity: int,
    orientation: Orientation,
) -> LayoutResult:
    """
    Arrange sources onto N-up sheets.

    Args:
        sources: Valid sources in output order
        capacity: Sources per sheet
        orientation: Sheet orientation

    Returns:
        LayoutResult with one SheetPlan per batch
    """
    canvas = canvas_for(orientation)
    grid = plan_grid(capacity, orientation, canvas)

    if not sources:
        return LayoutResult(sheets=(), grid=grid)

    sheets: List[SheetPlan] = []
    warnings: List[ImposeWarning] = []

    for index, batch in enumerate(batch_sources(sources, capacity)):
        sheets.append(compose_sheet(
            index,
            batch,
            grid,
            canvas,
            orientation,
            first_source_index=index * capacity,
            warnings=warnings,
        ))

    logger.info(
        f"Paginated {len(sources)} sources onto {len(sheets)} "
        f"{capacity}-up {orientation.value} sheets ({grid.columns}x{grid.rows})"
    )

    return LayoutResult(sheets=tuple(sheets), grid=grid, warnings=warnings)
