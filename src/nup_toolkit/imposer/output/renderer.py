"""
Module: imposer.output.renderer

Purpose:
    Draw a LayoutResult into the output document. Each SheetPlan
    becomes one output page with source pages drawn at their
    placements.

Key Functions:
    - render_layout(): Main rendering function

Dependencies:
    - imposer.documents: DocumentBackend (embed/draw)
    - imposer.output.assembler: OutputAssembler

Used By:
    - imposer.controller: Pipeline orchestration
"""

from __future__ import annotations

import logging
from typing import Any, List, Sequence

from nup_toolkit.imposer.documents import DocumentBackend, EmbedError
from nup_toolkit.imposer.errors import ImposeWarning, WarningKind
from nup_toolkit.imposer.layout.models import LayoutResult, Placement, SheetPlan, SourcePage

from .assembler import OutputAssembler

logger = logging.getLogger(__name__)


def render_layout(
    layout: LayoutResult,
    sources: Sequence[SourcePage],
    assembler: OutputAssembler,
    backend: DocumentBackend,
) -> List[ImposeWarning]:
    """
    Render every sheet of ``layout`` into ``assembler``.

    Sheets are rendered strictly in order. A placement that fails to
    embed or draw is skipped (its cell stays blank) and reported.

    Args:
        layout: Sheet plans from the paginator
        sources: Sources indexed by Placement.source_index
        assembler: Output document builder
        backend: Document backend used for embedding and drawing

    Returns:
        Warnings for skipped placements
    """
    warnings: List[ImposeWarning] = []

    for sheet in layout.sheets:
        page = assembler.add_page(sheet.canvas)
        _render_sheet(page, sheet, sources, assembler, backend, warnings)

    logger.info(
        f"Rendered {layout.total_placements - len(warnings)} placements "
        f"on {layout.page_count} pages"
    )
    return warnings


def _render_sheet(
    page: Any,
    sheet: SheetPlan,
    sources: Sequence[SourcePage],
    assembler: OutputAssembler,
    backend: DocumentBackend,
    warnings: List[ImposeWarning],
) -> None:
    for placement in sheet.placements:
        source = sources[placement.source_index]
        try:
            _draw_placement(page, placement, source, assembler, backend)
        except EmbedError as e:
            message = (
                f"Sheet {sheet.index + 1}, cell {placement.slot + 1}: "
                f"failed to draw input {source.position + 1} ({source.path}): {e}"
            )
            logger.warning(message)
            warnings.append(ImposeWarning(
                kind=WarningKind.PLACEMENT_FAILED,
                message=message,
                path=source.path,
                sheet_index=sheet.index,
                slot=placement.slot,
            ))


def _draw_placement(
    page: Any,
    placement: Placement,
    source: SourcePage,
    assembler: OutputAssembler,
    backend: DocumentBackend,
) -> None:
    embedded = backend.embed_page(assembler.output, source.document, source.page_index)
    backend.draw_embedded_page(
        page,
        embedded,
        placement.x,
        placement.y,
        placement.width,
        placement.height,
    )
