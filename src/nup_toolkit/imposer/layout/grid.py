"""
Module: imposer.layout.grid

Purpose:
    Decide how many columns and rows a sheet has for a given capacity.
    Common capacities come from GRID_TABLE; anything else uses
    fallback_grid().

Key Functions:
    - plan_grid(): Grid for (capacity, orientation)
    - fallback_grid(): Formula for capacities outside the table

Used By:
    - imposer.layout.paginator: Once per run
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from .config import GRID_TABLE, CanvasSize, Orientation, canvas_for
from .models import GridPlan

logger = logging.getLogger(__name__)


def plan_grid(
    capacity: int,
    orientation: Orientation,
    canvas: Optional[CanvasSize] = None,
) -> GridPlan:
    """
    Plan the grid shape for a sheet holding ``capacity`` sources.

    Args:
        capacity: Sources per sheet (positive)
        orientation: Sheet orientation
        canvas: Canvas used for the landscape aspect ratio.
            Defaults to the orientation's A4 canvas.

    Returns:
        GridPlan with columns * rows >= capacity

    Raises:
        ValueError: If capacity is not positive

    Example:
        >>> plan_grid(6, Orientation.PORTRAIT)
        GridPlan(columns=2, rows=3)
    """
    if capacity < 1:
        raise ValueError(f"capacity must be positive: {capacity}")

    shape = GRID_TABLE.get((capacity, orientation))
    if shape is not None:
        columns, rows = shape
        return GridPlan(columns=columns, rows=rows)

    grid = fallback_grid(capacity, orientation, canvas or canvas_for(orientation))
    logger.debug(
        f"No table entry for {capacity}-up {orientation.value}, "
        f"using {grid.columns}x{grid.rows}"
    )
    return grid


def fallback_grid(capacity: int, orientation: Orientation, canvas: CanvasSize) -> GridPlan:
    """
    Formula grid for capacities without a table entry.

    Landscape favours columns (scaled by the canvas aspect ratio),
    portrait favours rows.
    """
    if orientation is Orientation.LANDSCAPE:
        columns = math.ceil(math.sqrt(capacity * canvas.aspect_ratio))
        rows = math.ceil(capacity / columns)
    else:
        rows = math.ceil(math.sqrt(capacity))
        columns = math.ceil(capacity / rows)
    return GridPlan(columns=columns, rows=rows)
