"""
Module: imposer.documents.pymupdf_backend

Purpose:
    DocumentBackend implementation on PyMuPDF. Source pages are placed
    as vector XObjects via Page.show_pdf_page(), so text and graphics
    stay sharp in the imposed output.

Key Classes:
    - PyMuPDFBackend: Default backend

Dependencies:
    - fitz (PyMuPDF): PDF parsing, page embedding and serialization

Used By:
    - imposer.controller: Default backend for impose()
"""

from __future__ import annotations

import logging
from typing import Tuple

import fitz

from .provider import DocumentBackend, DocumentLoadError, EmbedError, EmbeddedPage

logger = logging.getLogger(__name__)


class PyMuPDFBackend(DocumentBackend):
    """
    PyMuPDF-backed document access.

    Example:
        >>> backend = PyMuPDFBackend()
        >>> doc = backend.load_document(Path("invoice.pdf").read_bytes())
        >>> backend.page_size(doc, 0)
        (595.0, 842.0)
    """

    def __init__(self, *, garbage: int = 3, deflate: bool = True) -> None:
        """
        Initialize backend.

        Args:
            garbage: Garbage collection level passed to Document.tobytes()
            deflate: Compress streams on serialization
        """
        self._garbage = garbage
        self._deflate = deflate

    def load_document(self, data: bytes) -> fitz.Document:
        try:
            document = fitz.open(stream=data, filetype="pdf")
        except (RuntimeError, ValueError) as e:
            raise DocumentLoadError(str(e) or type(e).__name__) from e
        if document.needs_pass:
            document.close()
            raise DocumentLoadError("document is password protected")
        return document

    def page_count(self, document: fitz.Document) -> int:
        try:
            return document.page_count
        except (RuntimeError, ValueError) as e:
            raise DocumentLoadError(str(e) or type(e).__name__) from e

    def page_size(self, document: fitz.Document, page_index: int) -> Tuple[float, float]:
        try:
            rect = document[page_index].rect
        except (RuntimeError, ValueError, IndexError) as e:
            raise DocumentLoadError(f"Cannot read page {page_index}: {e}") from e
        return rect.width, rect.height

    def close_document(self, document: fitz.Document) -> None:
        document.close()

    def new_output(self) -> fitz.Document:
        return fitz.open()

    def create_page(self, output: fitz.Document, width: float, height: float) -> fitz.Page:
        return output.new_page(width=width, height=height)

    def embed_page(
        self,
        output: fitz.Document,
        document: fitz.Document,
        page_index: int,
    ) -> EmbeddedPage:
        try:
            page = document.load_page(page_index)
        except (RuntimeError, ValueError, IndexError) as e:
            raise EmbedError(f"Cannot load page {page_index}: {e}") from e
        rect = page.rect
        if rect.is_empty:
            raise EmbedError(f"Page {page_index} has an empty page box")
        return EmbeddedPage(
            document=document,
            page_index=page_index,
            width=rect.width,
            height=rect.height,
        )

    def draw_embedded_page(
        self,
        page: fitz.Page,
        embedded: EmbeddedPage,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> None:
        # PyMuPDF uses a top-left origin
        page_height = page.rect.height
        target = fitz.Rect(x, page_height - y - height, x + width, page_height - y)
        try:
            page.show_pdf_page(
                target,
                embedded.document,
                embedded.page_index,
                keep_proportion=True,
            )
        except (RuntimeError, ValueError) as e:
            raise EmbedError(str(e) or type(e).__name__) from e

    def serialize(self, output: fitz.Document) -> bytes:
        data = output.tobytes(garbage=self._garbage, deflate=self._deflate)
        logger.debug(f"Serialized {output.page_count} pages ({len(data)} bytes)")
        return data
