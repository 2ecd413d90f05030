"""
Module: imposer.loading.collector

Purpose:
    Load input PDFs into SourcePages. Unreadable and empty files are
    skipped with a warning; the run only fails when nothing is left.

Key Functions:
    - collect_sources(): Load all inputs, preserving input order

Key Classes:
    - CollectionResult: Valid sources plus skip warnings

Dependencies:
    - concurrent.futures (std): Parallel file reads
    - imposer.documents: DocumentBackend

Used By:
    - imposer.controller: First pipeline stage
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from nup_toolkit.imposer.documents import DocumentBackend, DocumentLoadError
from nup_toolkit.imposer.errors import (
    ImposeWarning,
    NoInputProvidedError,
    NoValidSourcesError,
    WarningKind,
)
from nup_toolkit.imposer.layout.models import SourcePage

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# (data, error message)
_ReadOutcome = Tuple[Optional[bytes], Optional[str]]


@dataclass
class CollectionResult:
    """
    Output of the source collector.

    Attributes:
        sources: Valid sources in input order
        warnings: One entry per skipped input
    """

    sources: List[SourcePage] = field(default_factory=list)
    warnings: List[ImposeWarning] = field(default_factory=list)

    @property
    def source_count(self) -> int:
        return len(self.sources)


def collect_sources(
    paths: Sequence[PathLike],
    backend: DocumentBackend,
    *,
    max_workers: int = 4,
) -> CollectionResult:
    """
    Load each input path and keep the first page of every non-empty PDF.

    File reads run on a thread pool; parsing happens on the calling
    thread. Result order always matches ``paths``.

    Args:
        paths: Input files in the order they should appear on sheets
        backend: Document backend used for parsing
        max_workers: Threads for file reads (1 disables the pool)

    Returns:
        CollectionResult with valid sources and skip warnings

    Raises:
        NoInputProvidedError: If ``paths`` is empty
        NoValidSourcesError: If no input yielded a page

    Example:
        >>> result = collect_sources(["a.pdf", "broken.pdf"], PyMuPDFBackend())
        >>> result.source_count
        1
    """
    if not paths:
        raise NoInputProvidedError()

    resolved = [Path(p) for p in paths]
    outcomes = _read_all(resolved, max_workers)

    result = CollectionResult()
    document = None
    try:
        for position, (path, (data, read_error)) in enumerate(zip(resolved, outcomes)):
            label = f"input {position + 1} ({path})"
            if read_error is not None:
                _skip(result, WarningKind.SOURCE_LOAD_FAILED, path, f"Cannot read {label}: {read_error}")
                continue

            try:
                document = backend.load_document(data)
            except DocumentLoadError as e:
                document = None
                _skip(result, WarningKind.SOURCE_LOAD_FAILED, path, f"Cannot load {label}: {e}")
                continue

            try:
                page_count = backend.page_count(document)
                if page_count > 0:
                    width, height = backend.page_size(document, 0)
            except DocumentLoadError as e:
                backend.close_document(document)
                document = None
                _skip(result, WarningKind.SOURCE_LOAD_FAILED, path, f"Cannot load {label}: {e}")
                continue

            if page_count <= 0:
                backend.close_document(document)
                document = None
                _skip(result, WarningKind.EMPTY_SOURCE, path, f"PDF {label} has no pages, skipped")
                continue

            result.sources.append(SourcePage(
                path=path,
                position=position,
                width=width,
                height=height,
                document=document,
            ))
            document = None
    except Exception:
        # Sources are not handed to the caller on failure; release them here
        if document is not None:
            backend.close_document(document)
        release_sources(result.sources, backend)
        raise

    if not result.sources:
        raise NoValidSourcesError(result.warnings)

    logger.info(
        f"Loaded {result.source_count} of {len(resolved)} source PDFs"
        + (f" ({len(result.warnings)} skipped)" if result.warnings else "")
    )
    return result


def release_sources(sources: Sequence[SourcePage], backend: DocumentBackend) -> None:
    """Close every loaded source document."""
    for source in sources:
        if source.document is not None:
            backend.close_document(source.document)


def _read_all(paths: List[Path], max_workers: int) -> List[_ReadOutcome]:
    """Read file bytes for all paths, keeping input order."""
    if max_workers <= 1 or len(paths) == 1:
        return [_read_bytes(p) for p in paths]
    with ThreadPoolExecutor(max_workers=min(max_workers, len(paths))) as pool:
        return list(pool.map(_read_bytes, paths))


def _read_bytes(path: Path) -> _ReadOutcome:
    try:
        return path.read_bytes(), None
    except OSError as e:
        return None, e.strerror or str(e)


def _skip(result: CollectionResult, kind: WarningKind, path: Path, message: str) -> None:
    logger.warning(message)
    result.warnings.append(ImposeWarning(kind=kind, message=message, path=path))
