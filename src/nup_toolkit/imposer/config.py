"""
Module: imposer.config

Purpose:
    Immutable request describing one imposition run, validated on
    construction.

Key Classes:
    - RunRequest: Inputs of impose()

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - imposer.controller: impose()
    - nup_toolkit.cli: Argument mapping
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from nup_toolkit.imposer.layout.config import DEFAULT_CAPACITY, Orientation


@dataclass(frozen=True)
class RunRequest:
    """
    Configuration for one imposition run (immutable).

    An empty ``input_paths`` is accepted here; impose() reports it as
    NoInputProvidedError so callers see the same error path as other
    fatal run failures.

    Attributes:
        input_paths: Source PDFs in sheet order
        capacity: Sources per output sheet
        orientation: Output sheet orientation
        max_workers: Threads used to read input files

    Example:
        >>> request = RunRequest(
        ...     input_paths=(Path("a.pdf"), Path("b.pdf")),
        ...     capacity=6,
        ...     orientation=Orientation.LANDSCAPE,
        ... )
    """

    input_paths: Tuple[Path, ...]
    capacity: int = DEFAULT_CAPACITY
    orientation: Orientation = Orientation.PORTRAIT
    max_workers: int = 4

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int):
            raise ValueError(f"capacity must be an integer: {self.capacity!r}")
        if self.capacity < 1:
            raise ValueError(f"capacity must be positive: {self.capacity}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be positive: {self.max_workers}")
        if not isinstance(self.orientation, Orientation):
            raise ValueError(f"orientation must be an Orientation: {self.orientation!r}")
