"""
Module: imposer

Purpose:
    N-up imposition pipeline. Loads single-page PDFs, arranges each
    group of N first pages into a grid on an A4 sheet, and returns the
    merged document as bytes.

Key Functions:
    - impose(): Main entry point
    - collect_sources(): Load input PDFs
    - paginate(): Arrange sources onto sheets

Key Classes:
    - RunRequest: Run configuration
    - ImposeResult: Output bytes, layout and warnings
    - Orientation: Sheet orientation
    - ImposeError: Base class of fatal run errors

Dependencies:
    - fitz (PyMuPDF): PDF reading, embedding and writing
    - reportlab: A4 page size
    - PIL: Preview images

Used By:
    - nup_toolkit.cli: Command-line interface
"""

from .config import RunRequest
from .controller import impose, ImposeResult
from .errors import (
    ImposeError,
    ImposeWarning,
    NoInputProvidedError,
    NoValidSourcesError,
    SerializationError,
    WarningKind,
)
from .layout import Orientation, paginate, plan_grid
from .loading import collect_sources

__all__ = [
    # Config
    "RunRequest",
    "Orientation",
    # Controller
    "impose",
    "ImposeResult",
    # Pipeline stages
    "collect_sources",
    "paginate",
    "plan_grid",
    # Errors
    "ImposeError",
    "ImposeWarning",
    "NoInputProvidedError",
    "NoValidSourcesError",
    "SerializationError",
    "WarningKind",
]
