"""
Unit tests for batching and pagination.
"""

import math
from pathlib import Path

import pytest

from nup_toolkit.imposer.errors import WarningKind
from nup_toolkit.imposer.layout import (
    A4_CANVAS,
    GridPlan,
    Orientation,
    SourcePage,
    batch_sources,
    paginate,
)


class TestBatchSources:
    """Tests for batch_sources()."""

    def test_batch_sources_when_uneven_then_last_batch_short(self):
        assert batch_sources([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]

    def test_batch_sources_when_empty_then_no_batches(self):
        assert batch_sources([], 4) == []

    def test_batch_sources_when_capacity_zero_then_raises(self):
        with pytest.raises(ValueError):
            batch_sources([1], 0)


class TestPaginate:
    """Tests for paginate()."""

    @pytest.mark.parametrize("orientation", list(Orientation))
    @pytest.mark.parametrize("capacity", [2, 4, 6, 8, 10])
    @pytest.mark.parametrize("count", [1, 5, 10, 11, 23])
    def test_paginate_when_sources_then_ceil_pages_and_each_source_once(
        self, source_factory, count, capacity, orientation,
    ):
        """page_count == ceil(n / capacity); each source placed exactly once."""
        # Act
        result = paginate(source_factory(count), capacity, orientation)

        # Assert
        assert result.page_count == math.ceil(count / capacity)
        placed = [p.source_index for sheet in result.sheets for p in sheet.placements]
        assert placed == list(range(count))
        assert all(sheet.grid == result.grid for sheet in result.sheets)

    def test_paginate_when_five_squares_four_up_portrait_then_two_pages(self, source_factory):
        """5 sources of 100x100, capacity 4, portrait: 4 on page 1 column-major, 1 on page 2."""
        # Act
        result = paginate(source_factory(5), 4, Orientation.PORTRAIT)

        # Assert
        assert result.page_count == 2
        first, second = result.sheets
        assert result.grid == GridPlan(columns=2, rows=2)
        assert [(p.row, p.column) for p in first.placements] == [(0, 0), (1, 0), (0, 1), (1, 1)]
        assert [(p.row, p.column) for p in second.placements] == [(0, 0)]
        assert second.blank_slots == 3
        assert first.canvas == A4_CANVAS

    def test_paginate_when_landscape_then_canvas_swapped(self, source_factory):
        result = paginate(source_factory(3), 2, Orientation.LANDSCAPE)

        canvas = result.sheets[0].canvas
        assert canvas.width == pytest.approx(A4_CANVAS.height)
        assert canvas.height == pytest.approx(A4_CANVAS.width)

    def test_paginate_when_run_twice_then_identical_geometry(self, source_factory):
        """Layout is deterministic for the same inputs."""
        sources = source_factory(7, width=210, height=297)

        first = paginate(sources, 6, Orientation.LANDSCAPE)
        second = paginate(sources, 6, Orientation.LANDSCAPE)

        assert first.sheets == second.sheets

    def test_paginate_when_source_unplaceable_then_warning_and_others_placed(self, source_factory):
        # Arrange
        sources = source_factory(3)
        sources[1] = SourcePage(path=Path("bad.pdf"), position=1, width=-5, height=100)

        # Act
        result = paginate(sources, 4, Orientation.PORTRAIT)

        # Assert
        assert result.page_count == 1
        assert [p.source_index for p in result.sheets[0].placements] == [0, 2]
        assert [w.kind for w in result.warnings] == [WarningKind.PLACEMENT_FAILED]

    def test_paginate_when_no_sources_then_empty_layout(self):
        result = paginate([], 4, Orientation.PORTRAIT)

        assert result.page_count == 0
        assert result.total_placements == 0
