"""
Module: imposer.layout

Purpose:
    Sheet layout for N-up imposition.
    Converts loaded sources into positioned sheet plans.

Key Functions:
    - plan_grid(): Columns and rows for a capacity
    - compute_cell_metrics(): Cell geometry of a sheet
    - compute_placement(): Draw rectangle of one source
    - paginate(): Arrange sources onto sheets

Key Classes:
    - Orientation: Sheet orientation
    - CanvasSize: Output page size
    - SheetPlan: Single sheet layout plan

Used By:
    - imposer.controller: Main pipeline
"""

from .config import (
    A4_CANVAS,
    DEFAULT_CAPACITY,
    GRID_TABLE,
    SUPPORTED_CAPACITIES,
    CanvasSize,
    Orientation,
    canvas_for,
    tuning_for,
)
from .models import (
    CellMetrics,
    GridPlan,
    LayoutResult,
    Placement,
    SheetPlan,
    SourcePage,
)
from .grid import plan_grid, fallback_grid
from .compositor import compute_cell_metrics, compose_sheet
from .placement import compute_placement, traverse
from .paginator import batch_sources, paginate

__all__ = [
    # Config
    "A4_CANVAS",
    "DEFAULT_CAPACITY",
    "GRID_TABLE",
    "SUPPORTED_CAPACITIES",
    "CanvasSize",
    "Orientation",
    "canvas_for",
    "tuning_for",
    # Models
    "CellMetrics",
    "GridPlan",
    "LayoutResult",
    "Placement",
    "SheetPlan",
    "SourcePage",
    # Functions
    "plan_grid",
    "fallback_grid",
    "compute_cell_metrics",
    "compose_sheet",
    "compute_placement",
    "traverse",
    "batch_sources",
    "paginate",
]
