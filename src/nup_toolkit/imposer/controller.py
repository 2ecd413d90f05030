"""
Module: imposer.controller

Purpose:
    Orchestrate a complete imposition run.
    Collect → Plan grid → Compose sheets → Render placements → Serialize

Key Functions:
    - impose(): Main entry point

Key Classes:
    - ImposeResult: Output bytes, layout and warnings

Dependencies:
    - imposer.loading: Source collection
    - imposer.layout: Pagination and geometry
    - imposer.output: Rendering and serialization
    - imposer.documents: PyMuPDF backend (default)

Used By:
    - nup_toolkit.cli: Command-line interface
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from .config import RunRequest
from .documents import DocumentBackend, PyMuPDFBackend
from .errors import ImposeWarning
from .layout import LayoutResult, paginate
from .loading import collect_sources, release_sources
from .output import OutputAssembler, render_layout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImposeResult:
    """
    Complete imposition result (immutable).

    Attributes:
        pdf_bytes: Serialized output document
        layout: Sheet plans that were rendered
        source_count: Valid sources placed into the layout
        warnings: Skipped inputs and placements, in the order they occurred

    Example:
        >>> result = impose(RunRequest(input_paths=paths, capacity=4))
        >>> print(f"{result.source_count} PDFs on {result.page_count} pages")
    """

    pdf_bytes: bytes
    layout: LayoutResult
    source_count: int
    warnings: tuple[ImposeWarning, ...]

    @property
    def page_count(self) -> int:
        """Number of output pages."""
        return self.layout.page_count


def impose(
    request: RunRequest,
    *,
    backend: Optional[DocumentBackend] = None,
) -> ImposeResult:
    """
    Impose the first page of every input PDF onto N-up sheets.

    Pipeline:
    1. Load inputs, skipping unreadable or empty files
    2. Plan the grid and compose one sheet per batch of ``capacity``
    3. Draw every placement onto a new output page
    4. Serialize the output document

    Args:
        request: Run configuration
        backend: Document backend. Defaults to PyMuPDFBackend.

    Returns:
        ImposeResult with output bytes and warnings

    Raises:
        NoInputProvidedError: If request.input_paths is empty
        NoValidSourcesError: If no input could be loaded
        SerializationError: If the output cannot be encoded

    Example:
        >>> request = RunRequest(
        ...     input_paths=(Path("r1.pdf"), Path("r2.pdf"), Path("r3.pdf")),
        ...     capacity=2,
        ...     orientation=Orientation.LANDSCAPE,
        ... )
        >>> impose(request).page_count
        2
    """
    backend = backend or PyMuPDFBackend()
    start_time = time.perf_counter()

    logger.info(
        f"Starting {request.capacity}-up {request.orientation.value} imposition "
        f"of {len(request.input_paths)} files"
    )

    collection = collect_sources(
        request.input_paths,
        backend,
        max_workers=request.max_workers,
    )
    warnings = list(collection.warnings)

    assembler: Optional[OutputAssembler] = None
    try:
        layout = paginate(collection.sources, request.capacity, request.orientation)
        warnings.extend(layout.warnings)

        assembler = OutputAssembler(backend)
        warnings.extend(render_layout(layout, collection.sources, assembler, backend))
        pdf_bytes = assembler.serialize()
    finally:
        if assembler is not None:
            assembler.close()
        release_sources(collection.sources, backend)

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Imposed {collection.source_count} PDFs onto {layout.page_count} pages "
        f"in {elapsed:.2f}s"
        + (f" with {len(warnings)} warnings" if warnings else "")
    )

    return ImposeResult(
        pdf_bytes=pdf_bytes,
        layout=layout,
        source_count=collection.source_count,
        warnings=tuple(warnings),
    )
