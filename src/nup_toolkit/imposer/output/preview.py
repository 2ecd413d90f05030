"""
Module: imposer.output.preview

Purpose:
    Rasterize imposed sheets to PIL images for a quick visual check of
    the layout before printing.

Key Functions:
    - render_previews(): Render every output page to an image
    - save_previews(): Write page_001.png, page_002.png, ...

Dependencies:
    - fitz (PyMuPDF): Page rendering
    - PIL.Image: Image handling

Used By:
    - nup_toolkit.cli: --preview-dir option
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import fitz
from PIL import Image

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_DPI = 72


def render_previews(
    pdf_bytes: bytes,
    dpi: int = DEFAULT_PREVIEW_DPI,
    *,
    grayscale: bool = False,
) -> List[Image.Image]:
    """
    Render each page of an imposed PDF to an image.

    Args:
        pdf_bytes: Serialized output document
        dpi: Rendering resolution. Defaults to 72 (1 px per point).
        grayscale: Render in grayscale ("L") instead of RGB

    Returns:
        One PIL image per page, in page order

    Raises:
        ValueError: If dpi is not positive

    Example:
        >>> images = render_previews(result.pdf_bytes, dpi=36)
        >>> images[0].size
        (298, 421)
    """
    if dpi <= 0:
        raise ValueError(f"dpi must be positive: {dpi}")

    matrix = fitz.Matrix(dpi / 72.0, dpi / 72.0)
    colorspace = fitz.csGRAY if grayscale else fitz.csRGB
    mode = "L" if grayscale else "RGB"

    images: List[Image.Image] = []
    with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
        for page in doc:
            pix = page.get_pixmap(matrix=matrix, alpha=False, colorspace=colorspace)
            images.append(Image.frombytes(mode, (pix.width, pix.height), pix.samples))
    return images


def save_previews(
    pdf_bytes: bytes,
    directory: Path,
    dpi: int = DEFAULT_PREVIEW_DPI,
) -> List[Path]:
    """
    Write a PNG preview for each output page.

    Returns:
        Paths written, in page order
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for number, image in enumerate(render_previews(pdf_bytes, dpi), start=1):
        path = directory / f"page_{number:03d}.png"
        image.save(path, format="PNG")
        written.append(path)

    logger.info(f"Saved {len(written)} preview images to {directory}")
    return written
