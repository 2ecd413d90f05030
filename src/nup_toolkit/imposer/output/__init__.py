"""Output assembly, rendering and previews for the imposer."""

from .assembler import OutputAssembler, default_output_name, save_pdf
from .renderer import render_layout
from .preview import render_previews, save_previews

__all__ = [
    "OutputAssembler",
    "default_output_name",
    "save_pdf",
    "render_layout",
    "render_previews",
    "save_previews",
]
