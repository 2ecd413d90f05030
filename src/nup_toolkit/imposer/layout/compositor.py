"""
Module: imposer.layout.compositor

Purpose:
    Compose one output sheet: derive margins and cell metrics from the
    canvas and grid, then place every source of the batch.

Key Functions:
    - compute_cell_metrics(): Margins, cell size and spacing
    - compose_sheet(): SheetPlan for one batch

Dependencies:
    - imposer.layout.placement: Per-source geometry

Used By:
    - imposer.layout.paginator: Once per batch
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from nup_toolkit.imposer.errors import ImposeWarning, WarningKind

from .config import CanvasSize, Orientation, tuning_for
from .models import CellMetrics, GridPlan, Placement, SheetPlan, SourcePage
from .placement import compute_placement

logger = logging.getLogger(__name__)


def compute_cell_metrics(
    canvas: CanvasSize,
    grid: GridPlan,
    orientation: Orientation,
) -> CellMetrics:
    """
    Derive cell geometry for a sheet.

    Portrait sheets with three or more rows get a taller row allotment
    than the available height strictly allows; cell_origin() pulls the
    lower rows back up.

    Example:
        >>> m = compute_cell_metrics(CanvasSize(1000, 1000), GridPlan(2, 2), Orientation.LANDSCAPE)
        >>> m.cell_width, m.cell_height
        (480.0, 490.0)
    """
    tuning = tuning_for(orientation)

    margin_x = canvas.width * tuning.margin_x_ratio
    margin_y = canvas.height * tuning.margin_y_ratio
    available_width = canvas.width - margin_x * 2
    available_height = canvas.height - margin_y * 2

    cell_width = available_width / grid.columns
    factor = tuning.row_compaction_factor(grid.rows)
    if factor is not None:
        cell_height = available_height / (grid.rows * factor)
    else:
        cell_height = available_height / grid.rows

    return CellMetrics(
        cell_width=cell_width,
        cell_height=cell_height,
        spacing_x=cell_width * tuning.spacing_x_ratio,
        spacing_y=cell_height * tuning.spacing_y_ratio,
        margin_x=margin_x,
        margin_y=margin_y,
    )


def compose_sheet(
    index: int,
    batch: Sequence[SourcePage],
    grid: GridPlan,
    canvas: CanvasSize,
    orientation: Orientation,
    *,
    first_source_index: int = 0,
    warnings: List[ImposeWarning] | None = None,
) -> SheetPlan:
    """
    Lay out one batch of sources on a sheet.

    A source whose geometry cannot be computed is skipped and its cell
    left blank; a warning is appended to ``warnings`` when given.

    Args:
        index: Sheet number (0-indexed)
        batch: Sources for this sheet, at most grid.slots
        grid: Grid shared by all sheets of the run
        canvas: Sheet size
        orientation: Sheet orientation
        first_source_index: Run-wide index of batch[0]
        warnings: Collector for skipped placements

    Returns:
        SheetPlan for the batch
    """
    if len(batch) > grid.slots:
        raise ValueError(
            f"batch of {len(batch)} does not fit {grid.columns}x{grid.rows} grid"
        )

    metrics = compute_cell_metrics(canvas, grid, orientation)
    placements: List[Placement] = []

    for slot, source in enumerate(batch):
        try:
            placement = compute_placement(
                source_index=first_source_index + slot,
                slot=slot,
                source_width=source.width,
                source_height=source.height,
                grid=grid,
                metrics=metrics,
                canvas=canvas,
                orientation=orientation,
            )
        except ValueError as e:
            message = (
                f"Sheet {index + 1}, cell {slot + 1}: cannot place input "
                f"{source.position + 1} ({source.path}): {e}"
            )
            logger.warning(message)
            if warnings is not None:
                warnings.append(ImposeWarning(
                    kind=WarningKind.PLACEMENT_FAILED,
                    message=message,
                    path=source.path,
                    sheet_index=index,
                    slot=slot,
                ))
            continue

        logger.debug(
            f"Sheet {index + 1} slot {slot} (input {source.position + 1}) -> "
            f"row {placement.row}, col {placement.column} "
            f"at ({placement.x:.2f}, {placement.y:.2f}) "
            f"{placement.width:.2f}x{placement.height:.2f}"
        )
        placements.append(placement)

    return SheetPlan(
        index=index,
        canvas=canvas,
        grid=grid,
        metrics=metrics,
        placements=tuple(placements),
        batch_size=len(batch),
    )
