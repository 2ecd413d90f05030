"""
Module: imposer.layout.models

Purpose:
    Data models for N-up layout.
    Immutable dataclasses representing sources, grids, cells and sheets.

Key Classes:
    - SourcePage: First page of one loaded source document
    - GridPlan: Columns and rows of a sheet
    - CellMetrics: Margins, cell size and spacing for a sheet
    - Placement: Draw rectangle of one source on a sheet
    - SheetPlan: Complete layout of one output page
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)

Used By:
    - imposer.loading.collector: Creates SourcePages
    - imposer.layout.paginator: Creates SheetPlans
    - imposer.output.renderer: Draws Placements
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from .config import CanvasSize

if TYPE_CHECKING:
    from nup_toolkit.imposer.errors import ImposeWarning


@dataclass(frozen=True)
class SourcePage:
    """
    One loaded source page (immutable).

    Only the first page of each source document is imposed.

    Attributes:
        path: File the document was read from
        position: Index of the path in the run's input list
        width: Intrinsic page width in points
        height: Intrinsic page height in points
        document: Backend document handle (opaque to layout)
        page_index: Page within the document (always 0)
    """

    path: Path
    position: int
    width: float
    height: float
    document: Any = field(default=None, compare=False, repr=False)
    page_index: int = 0


@dataclass(frozen=True)
class GridPlan:
    """
    Grid shape of every sheet in a run.

    Example:
        >>> GridPlan(columns=2, rows=3).slots
        6
    """

    columns: int
    rows: int

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError(
                f"grid needs at least one column and row: {self.columns}x{self.rows}"
            )

    @property
    def slots(self) -> int:
        """Number of cells on a sheet."""
        return self.columns * self.rows


@dataclass(frozen=True)
class CellMetrics:
    """
    Cell geometry shared by every placement on one sheet.

    Attributes:
        cell_width: Width of each grid cell
        cell_height: Height of each grid cell (may be compacted)
        spacing_x: Horizontal padding on each side inside a cell
        spacing_y: Vertical padding on each side inside a cell
        margin_x: Left/right page margin
        margin_y: Top/bottom page margin
    """

    cell_width: float
    cell_height: float
    spacing_x: float
    spacing_y: float
    margin_x: float
    margin_y: float

    @property
    def inner_width(self) -> float:
        """Cell width minus horizontal padding."""
        return self.cell_width - 2 * self.spacing_x

    @property
    def inner_height(self) -> float:
        """Cell height minus vertical padding."""
        return self.cell_height - 2 * self.spacing_y


@dataclass(frozen=True)
class Placement:
    """
    Final draw rectangle of one source on a sheet.

    Coordinates use a bottom-left origin (PDF user space).

    Attributes:
        source_index: Index of the source in the run's valid source list
        slot: Batch-local index of the source (0-based)
        row: Grid row, 0 is the top visual row
        column: Grid column, 0 is the leftmost column
        x: Left edge
        y: Bottom edge
        width: Scaled width
        height: Scaled height
        scale: Uniform scale applied to the source page
    """

    source_index: int
    slot: int
    row: int
    column: int
    x: float
    y: float
    width: float
    height: float
    scale: float

    @property
    def right(self) -> float:
        """Right edge (x + width)."""
        return self.x + self.width

    @property
    def top(self) -> float:
        """Top edge (y + height)."""
        return self.y + self.height


@dataclass(frozen=True)
class SheetPlan:
    """
    Complete layout plan for a single output page.

    Attributes:
        index: Sheet number (0-indexed)
        canvas: Output page size
        grid: Grid shape
        metrics: Cell geometry
        placements: Placements in batch order
        batch_size: Number of sources assigned to this sheet
    """

    index: int
    canvas: CanvasSize
    grid: GridPlan
    metrics: CellMetrics
    placements: tuple[Placement, ...]
    batch_size: int

    @property
    def placement_count(self) -> int:
        """Number of placed sources on this sheet."""
        return len(self.placements)

    @property
    def blank_slots(self) -> int:
        """Grid cells left empty on this sheet."""
        return self.grid.slots - self.placement_count


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Example:
        >>> result = LayoutResult(sheets=(sheet1, sheet2))
        >>> result.page_count
        2
    """

    sheets: tuple[SheetPlan, ...]
    grid: Optional[GridPlan] = None
    warnings: list["ImposeWarning"] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        """Number of output pages."""
        return len(self.sheets)

    @property
    def total_placements(self) -> int:
        """Total number of placements across all sheets."""
        return sum(sheet.placement_count for sheet in self.sheets)
