"""
Unit tests for per-source placement geometry.
"""

import pytest

from nup_toolkit.common.thresholds import LANDSCAPE_TUNING, PORTRAIT_TUNING
from nup_toolkit.imposer.layout import (
    SUPPORTED_CAPACITIES,
    CanvasSize,
    GridPlan,
    Orientation,
    canvas_for,
    compute_cell_metrics,
    compute_placement,
    plan_grid,
    traverse,
)
from nup_toolkit.imposer.layout.placement import cell_origin, fit_scale

SQUARE = CanvasSize(1000, 1000)
EPS = 1e-6

# Source shapes: square, A4, till receipt, wide label
SOURCE_SIZES = [(100, 100), (595.28, 841.89), (226.77, 566.93), (300, 100)]


class TestTraverse:
    """Tests for traversal order."""

    def test_traverse_when_portrait_six_then_column_major(self):
        """Portrait 2x3: j=3 is the top of the second column."""
        assert traverse(3, GridPlan(columns=2, rows=3), PORTRAIT_TUNING) == (0, 1)

    def test_traverse_when_landscape_six_then_row_major(self):
        """Landscape 3x2: j=3 starts the second row."""
        assert traverse(3, GridPlan(columns=3, rows=2), LANDSCAPE_TUNING) == (1, 0)

    def test_traverse_when_portrait_two_by_two_then_down_then_right(self):
        grid = GridPlan(columns=2, rows=2)

        order = [traverse(j, grid, PORTRAIT_TUNING) for j in range(4)]

        assert order == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_traverse_when_landscape_two_by_two_then_right_then_down(self):
        grid = GridPlan(columns=2, rows=2)

        order = [traverse(j, grid, LANDSCAPE_TUNING) for j in range(4)]

        assert order == [(0, 0), (0, 1), (1, 0), (1, 1)]

    def test_traverse_when_slot_outside_grid_then_raises(self):
        with pytest.raises(ValueError, match="outside"):
            traverse(4, GridPlan(columns=2, rows=2), PORTRAIT_TUNING)


class TestFitScale:
    """Tests for fit_scale()."""

    def test_fit_scale_when_landscape_then_min_times_098(self):
        m = compute_cell_metrics(SQUARE, GridPlan(2, 2), Orientation.LANDSCAPE)

        scale = fit_scale(100, 100, m, LANDSCAPE_TUNING)

        assert scale == pytest.approx(min(470.4 / 100, 480.2 / 100) * 0.98)

    def test_fit_scale_when_portrait_height_bound_then_vertical_bias_applied(self):
        """Portrait multiplies the vertical fit by 1.02 before the 0.99 shrink."""
        m = compute_cell_metrics(SQUARE, GridPlan(2, 2), Orientation.PORTRAIT)

        scale = fit_scale(100, 400, m, PORTRAIT_TUNING)

        assert scale == pytest.approx(m.inner_height / 400 * 1.02 * 0.99)

    def test_fit_scale_when_source_has_no_area_then_raises(self):
        m = compute_cell_metrics(SQUARE, GridPlan(2, 2), Orientation.PORTRAIT)

        with pytest.raises(ValueError, match="no area"):
            fit_scale(0, 100, m, PORTRAIT_TUNING)


class TestCellOrigin:
    """Tests for cell_origin()."""

    def test_cell_origin_when_portrait_two_rows_then_no_row_shift(self):
        grid = GridPlan(2, 2)
        m = compute_cell_metrics(SQUARE, grid, Orientation.PORTRAIT)

        assert cell_origin(1, 1, grid, m, SQUARE, PORTRAIT_TUNING) == pytest.approx((500, 10))

    def test_cell_origin_when_portrait_four_rows_then_lower_rows_shift_up(self):
        """rows > 2 adds rows * 0.05 * cell_height * row / rows."""
        grid = GridPlan(2, 4)
        m = compute_cell_metrics(SQUARE, grid, Orientation.PORTRAIT)
        unshifted = 1000 - 10 - 3 * m.cell_height

        _, y = cell_origin(2, 0, grid, m, SQUARE, PORTRAIT_TUNING)

        assert y == pytest.approx(unshifted + 4 * 0.05 * m.cell_height * 2 / 4)

    def test_cell_origin_when_landscape_many_rows_then_no_row_shift(self):
        grid = GridPlan(2, 4)
        m = compute_cell_metrics(SQUARE, grid, Orientation.LANDSCAPE)

        _, y = cell_origin(2, 0, grid, m, SQUARE, LANDSCAPE_TUNING)

        assert y == pytest.approx(1000 - 10 - 3 * m.cell_height)


class TestComputePlacement:
    """Tests for compute_placement()."""

    def test_compute_placement_when_landscape_square_then_centred_in_cell(self):
        """Worked example on a 1000x1000 canvas, 2x2 grid, 100x100 source."""
        # Arrange
        grid = GridPlan(2, 2)
        m = compute_cell_metrics(SQUARE, grid, Orientation.LANDSCAPE)

        # Act
        first = compute_placement(0, 0, 100, 100, grid, m, SQUARE, Orientation.LANDSCAPE)
        last = compute_placement(3, 3, 100, 100, grid, m, SQUARE, Orientation.LANDSCAPE)

        # Assert
        # scale = min(4.704, 4.802) * 0.98 = 4.60992
        assert first.scale == pytest.approx(4.60992)
        assert first.width == pytest.approx(460.992)
        assert first.height == pytest.approx(460.992)
        assert (first.x, first.y) == pytest.approx((29.504, 514.504))
        assert (last.row, last.column) == (1, 1)
        assert (last.x, last.y) == pytest.approx((509.504, 24.504))

    def test_compute_placement_when_called_twice_then_identical(self):
        grid = plan_grid(6, Orientation.PORTRAIT)
        canvas = canvas_for(Orientation.PORTRAIT)
        m = compute_cell_metrics(canvas, grid, Orientation.PORTRAIT)

        a = compute_placement(0, 5, 595.28, 841.89, grid, m, canvas, Orientation.PORTRAIT)
        b = compute_placement(0, 5, 595.28, 841.89, grid, m, canvas, Orientation.PORTRAIT)

        assert a == b

    @pytest.mark.parametrize("orientation", list(Orientation))
    @pytest.mark.parametrize("capacity", list(SUPPORTED_CAPACITIES) + [3, 7, 12])
    @pytest.mark.parametrize("size", SOURCE_SIZES)
    def test_compute_placement_when_any_layout_then_inside_cell_and_scale_bounded(
        self, orientation, capacity, size,
    ):
        """Every placement stays inside its cell; scale <= fit * 1.02."""
        # Arrange
        canvas = canvas_for(orientation)
        grid = plan_grid(capacity, orientation, canvas)
        m = compute_cell_metrics(canvas, grid, orientation)
        tuning = PORTRAIT_TUNING if orientation is Orientation.PORTRAIT else LANDSCAPE_TUNING
        src_w, src_h = size
        max_scale = min(m.inner_width / src_w, m.inner_height / src_h) * 1.02

        for slot in range(capacity):
            # Act
            p = compute_placement(slot, slot, src_w, src_h, grid, m, canvas, orientation)
            cell_x, cell_y = cell_origin(p.row, p.column, grid, m, canvas, tuning)

            # Assert
            assert p.scale <= max_scale + EPS
            assert p.x >= cell_x - EPS
            assert p.right <= cell_x + m.cell_width + EPS
            assert p.y >= cell_y - EPS
            assert p.top <= cell_y + m.cell_height + EPS
            assert p.width / p.height == pytest.approx(src_w / src_h)
