"""
Module: imposer.documents.provider

Purpose:
    Abstract interface over the PDF library used to read sources and
    write the imposed output. Layout code never touches the library
    directly; it only sees opaque handles and page sizes.

Key Classes:
    - DocumentBackend: Abstract base class for document access
    - EmbeddedPage: Source page prepared for drawing into the output
    - DocumentLoadError: Exception for unreadable documents
    - EmbedError: Exception for pages that cannot be embedded or drawn

Used By:
    - imposer.loading.collector: Loading sources
    - imposer.output.assembler: Creating and serializing output
    - imposer.output.renderer: Drawing placements
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Tuple


class DocumentLoadError(Exception):
    """Document bytes could not be parsed."""
    pass


class EmbedError(Exception):
    """Source page could not be embedded or drawn."""
    pass


@dataclass(frozen=True)
class EmbeddedPage:
    """
    A source page ready to be drawn onto an output page.

    Attributes:
        document: Backend handle of the source document
        page_index: Page number within the source
        width: Intrinsic width in points
        height: Intrinsic height in points
    """

    document: Any
    page_index: int
    width: float
    height: float


class DocumentBackend(ABC):
    """
    Abstract interface for reading and writing PDF documents.

    Coordinates passed to draw_embedded_page() use a bottom-left origin;
    implementations convert to their library's convention.
    """

    @abstractmethod
    def load_document(self, data: bytes) -> Any:
        """
        Parse document bytes.

        Raises:
            DocumentLoadError: If the bytes are not a readable document
        """

    @abstractmethod
    def page_count(self, document: Any) -> int:
        """
        Number of pages in a loaded document.

        Raises:
            DocumentLoadError: If the document cannot be read
        """

    @abstractmethod
    def page_size(self, document: Any, page_index: int) -> Tuple[float, float]:
        """
        (width, height) of a page in points.

        Raises:
            DocumentLoadError: If the page cannot be read
        """

    @abstractmethod
    def close_document(self, document: Any) -> None:
        """Release a loaded source document or an output document."""

    @abstractmethod
    def new_output(self) -> Any:
        """Create an empty output document."""

    @abstractmethod
    def create_page(self, output: Any, width: float, height: float) -> Any:
        """Append a blank page of the given size to the output."""

    @abstractmethod
    def embed_page(self, output: Any, document: Any, page_index: int) -> EmbeddedPage:
        """
        Prepare a source page for drawing into ``output``.

        Raises:
            EmbedError: If the page cannot be embedded
        """

    @abstractmethod
    def draw_embedded_page(
        self,
        page: Any,
        embedded: EmbeddedPage,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> None:
        """
        Draw an embedded page with its bottom-left corner at (x, y).

        Raises:
            EmbedError: If drawing fails
        """

    @abstractmethod
    def serialize(self, output: Any) -> bytes:
        """Encode the output document."""
