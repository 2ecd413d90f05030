"""
Module: imposer.layout.placement

Purpose:
    Geometry of a single source on a sheet: which cell it goes to,
    how much it is scaled and where the scaled page sits in its cell.

Key Functions:
    - traverse(): Batch-local index -> (row, column)
    - fit_scale(): Aspect-preserving scale for a source in a cell
    - cell_origin(): Bottom-left corner of a cell
    - compute_placement(): Full Placement for one source

Algorithm:
    Landscape fills row-major (left to right, then down).
    Portrait fills column-major (top to bottom, then right).
    The scaled page is centred in its cell. Portrait allows a slight
    vertical overfill (scale_fill_bias_y) before the safety shrink, and
    shifts lower rows up to compact dense stacks.

Used By:
    - imposer.layout.compositor: One call per source in a batch
"""

from __future__ import annotations

from typing import Tuple

from nup_toolkit.common.thresholds import OrientationTuning

from .config import CanvasSize, Orientation, tuning_for
from .models import CellMetrics, GridPlan, Placement


def traverse(slot: int, grid: GridPlan, tuning: OrientationTuning) -> Tuple[int, int]:
    """
    Map a batch-local index to (row, column).

    Example:
        >>> traverse(3, GridPlan(columns=2, rows=3), PORTRAIT_TUNING)
        (0, 1)
        >>> traverse(3, GridPlan(columns=3, rows=2), LANDSCAPE_TUNING)
        (1, 0)
    """
    if slot < 0 or slot >= grid.slots:
        raise ValueError(f"slot {slot} outside {grid.columns}x{grid.rows} grid")
    if tuning.column_major:
        return slot % grid.rows, slot // grid.rows
    return slot // grid.columns, slot % grid.columns


def fit_scale(
    source_width: float,
    source_height: float,
    metrics: CellMetrics,
    tuning: OrientationTuning,
) -> float:
    """Uniform scale fitting the source into the inner cell."""
    if source_width <= 0 or source_height <= 0:
        raise ValueError(f"source page has no area: {source_width}x{source_height}")
    scale_x = metrics.inner_width / source_width
    scale_y = metrics.inner_height / source_height
    return min(scale_x, scale_y * tuning.scale_fill_bias_y) * tuning.scale_safety


def cell_origin(
    row: int,
    column: int,
    grid: GridPlan,
    metrics: CellMetrics,
    canvas: CanvasSize,
    tuning: OrientationTuning,
) -> Tuple[float, float]:
    """Bottom-left corner of cell (row, column); row 0 is at the top."""
    cell_x = metrics.margin_x + column * metrics.cell_width
    cell_y = canvas.height - metrics.margin_y - (row + 1) * metrics.cell_height

    row_spacing = (
        grid.rows * tuning.row_offset_factor
        if grid.rows >= tuning.row_offset_min_rows
        else 0
    )
    if row_spacing:
        cell_y += row_spacing * metrics.cell_height * row / grid.rows
    return cell_x, cell_y


def compute_placement(
    source_index: int,
    slot: int,
    source_width: float,
    source_height: float,
    grid: GridPlan,
    metrics: CellMetrics,
    canvas: CanvasSize,
    orientation: Orientation,
) -> Placement:
    """
    Compute where one source is drawn on its sheet.

    Args:
        source_index: Index of the source in the run
        slot: Batch-local index (0-based)
        source_width: Intrinsic source width in points
        source_height: Intrinsic source height in points
        grid: Sheet grid
        metrics: Sheet cell metrics
        canvas: Sheet size
        orientation: Sheet orientation

    Returns:
        Placement centred in its cell

    Raises:
        ValueError: If the source has no area or slot is outside the grid
    """
    tuning = tuning_for(orientation)
    row, column = traverse(slot, grid, tuning)
    scale = fit_scale(source_width, source_height, metrics, tuning)

    width = source_width * scale
    height = source_height * scale
    cell_x, cell_y = cell_origin(row, column, grid, metrics, canvas, tuning)

    return Placement(
        source_index=source_index,
        slot=slot,
        row=row,
        column=column,
        x=cell_x + (metrics.cell_width - width) / 2,
        y=cell_y + (metrics.cell_height - height) / 2,
        width=width,
        height=height,
        scale=scale,
    )
