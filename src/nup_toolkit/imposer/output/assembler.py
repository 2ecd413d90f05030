"""
Module: imposer.output.assembler

Purpose:
    Accumulate output pages in sheet order and serialize the finished
    document. Also owns writing the bytes to disk.

Key Classes:
    - OutputAssembler: Output document builder

Key Functions:
    - default_output_name(): Timestamped default file name
    - save_pdf(): Write PDF bytes to a path

Dependencies:
    - imposer.documents: DocumentBackend

Used By:
    - imposer.output.renderer: Adds one page per sheet
    - imposer.controller: Serialization
    - nup_toolkit.cli: Saving output
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from nup_toolkit.imposer.documents import DocumentBackend
from nup_toolkit.imposer.errors import SerializationError
from nup_toolkit.imposer.layout.config import CanvasSize

logger = logging.getLogger(__name__)


class OutputAssembler:
    """
    Builds the imposed output document.

    Example:
        >>> assembler = OutputAssembler(PyMuPDFBackend())
        >>> page = assembler.add_page(A4_CANVAS)
        >>> data = assembler.serialize()
        >>> assembler.close()
    """

    def __init__(self, backend: DocumentBackend) -> None:
        self._backend = backend
        self._output: Any = backend.new_output()
        self._page_count = 0
        self._closed = False

    @property
    def page_count(self) -> int:
        """Pages added so far."""
        return self._page_count

    def add_page(self, canvas: CanvasSize) -> Any:
        """Append a blank page of ``canvas`` size and return its handle."""
        page = self._backend.create_page(self._output, canvas.width, canvas.height)
        self._page_count += 1
        return page

    def serialize(self) -> bytes:
        """
        Encode the output document.

        Raises:
            SerializationError: If the backend fails to encode the document
        """
        try:
            data = self._backend.serialize(self._output)
        except Exception as e:
            raise SerializationError(f"Failed to serialize output PDF: {e}") from e
        logger.info(f"Serialized {self._page_count} output pages ({len(data)} bytes)")
        return data

    @property
    def output(self) -> Any:
        """Backend handle of the output document."""
        return self._output

    def close(self) -> None:
        """Release the output document. Safe to call more than once."""
        if self._closed:
            return
        self._backend.close_document(self._output)
        self._closed = True


def default_output_name(now: Optional[datetime] = None) -> str:
    """
    Default output file name with date and time.

    Example:
        >>> default_output_name(datetime(2025, 3, 7, 9, 5, 1))
        'merged_2025_03_07_09_05_01.pdf'
    """
    now = now or datetime.now()
    return now.strftime("merged_%Y_%m_%d_%H_%M_%S.pdf")


def save_pdf(pdf_bytes: bytes, output_path: Path) -> Path:
    """
    Write PDF bytes to ``output_path``, creating parent directories.

    If ``output_path`` is an existing directory the default output name
    is used inside it.

    Returns:
        Path actually written

    Raises:
        OSError: If the file cannot be written
    """
    output_path = Path(output_path)
    if output_path.is_dir():
        output_path = output_path / default_output_name()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(pdf_bytes)
    logger.info(f"Wrote {output_path}")
    return output_path
