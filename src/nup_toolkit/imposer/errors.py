"""
Module: imposer.errors

Purpose:
    Fatal errors and recoverable warnings of an imposition run.

    Only ImposeError subclasses abort a run. Per-source and per-placement
    problems are recorded as ImposeWarning entries and returned with the
    result, so callers can report partial failures.

Key Classes:
    - ImposeError: Base class for fatal run errors
    - NoInputProvidedError: Empty input path list
    - NoValidSourcesError: Every input failed to load or was empty
    - SerializationError: Output document could not be encoded
    - WarningKind: Category of a recovered failure
    - ImposeWarning: One recovered failure

Used By:
    - imposer.loading.collector
    - imposer.layout.compositor
    - imposer.output.renderer
    - imposer.output.assembler
    - imposer.controller
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Sequence


class WarningKind(Enum):
    """Category of a recovered per-item failure."""

    SOURCE_LOAD_FAILED = "source_load_failed"
    EMPTY_SOURCE = "empty_source"
    PLACEMENT_FAILED = "placement_failed"


@dataclass(frozen=True)
class ImposeWarning:
    """
    A per-item failure that was skipped (immutable).

    Attributes:
        kind: Failure category
        message: Human-readable description
        path: Source file involved, if any
        sheet_index: Output page involved, if any
        slot: Batch-local cell index involved, if any
    """

    kind: WarningKind
    message: str
    path: Optional[Path] = None
    sheet_index: Optional[int] = None
    slot: Optional[int] = None

    def __str__(self) -> str:
        return self.message


class ImposeError(Exception):
    """Fatal error during an imposition run."""
    pass


class NoInputProvidedError(ImposeError):
    """No input paths were given."""

    def __init__(self, message: str = "No input files provided") -> None:
        super().__init__(message)


class NoValidSourcesError(ImposeError):
    """All inputs failed to load or had no pages."""

    def __init__(self, warnings: Sequence[ImposeWarning] = ()) -> None:
        self.warnings: tuple[ImposeWarning, ...] = tuple(warnings)
        super().__init__(
            f"No valid PDF files to process ({len(self.warnings)} inputs skipped)"
        )


class SerializationError(ImposeError):
    """Output document could not be serialized."""
    pass
