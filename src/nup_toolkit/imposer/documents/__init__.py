"""
Module: imposer.documents

Purpose:
    PDF library abstraction for reading sources and writing output.

Key Classes:
    - DocumentBackend: Abstract document access
    - PyMuPDFBackend: Default implementation on PyMuPDF
    - EmbeddedPage: Source page prepared for drawing
"""

from .provider import DocumentBackend, DocumentLoadError, EmbedError, EmbeddedPage
from .pymupdf_backend import PyMuPDFBackend

__all__ = [
    "DocumentBackend",
    "DocumentLoadError",
    "EmbedError",
    "EmbeddedPage",
    "PyMuPDFBackend",
]
