from __future__ import annotations

import pytest

from graphcalc.grid import compute_grid, grid_lines, grid_spacing
from graphcalc.viewport import MAX_SPAN, MIN_SPAN, Viewport


@pytest.mark.parametrize("x_range, expected", [
    ((-10, 10), 1.0),
    ((0, 2.5), 0.1),
    ((1, 201), 10.0),
    ((0, 100), 10.0),
    ((0, 99), 1.0),
])
def test_spacing_is_a_power_of_ten(x_range, expected) -> None:
    assert grid_spacing(Viewport(x_range[0], x_range[1], -1, 1)) == pytest.approx(expected)


def test_default_viewport_grid() -> None:
    grid = compute_grid(Viewport())
    assert grid.spacing == 1.0
    assert grid.vertical == pytest.approx(tuple(float(v) for v in range(-10, 11)))
    assert grid.horizontal == pytest.approx(tuple(float(v) for v in range(-10, 11)))
    assert grid.show_x_axis and grid.show_y_axis


def test_lines_start_at_first_multiple_inside_range() -> None:
    assert grid_lines(-2.5, 2.5, 1.0) == pytest.approx((-2, -1, 0, 1, 2))
    assert grid_lines(0.25, 0.75, 1.0) == ()


def test_horizontal_lines_reuse_x_spacing() -> None:
    grid = compute_grid(Viewport(1, 201, 5, 50))
    assert grid.spacing == 10.0
    assert grid.vertical[0] == pytest.approx(10)
    assert grid.vertical[-1] == pytest.approx(200)
    assert grid.horizontal == pytest.approx((10, 20, 30, 40, 50))


def test_axes_only_when_zero_is_in_range() -> None:
    grid = compute_grid(Viewport(1, 201, 5, 50))
    assert not grid.show_x_axis
    assert not grid.show_y_axis

    # Boundaries count as inside
    grid = compute_grid(Viewport(0, 20, -20, 0))
    assert grid.show_x_axis
    assert grid.show_y_axis


@pytest.mark.parametrize("span", [MIN_SPAN, 1e-150, 1e150, MAX_SPAN])
def test_grid_at_extreme_spans(span) -> None:
    grid = compute_grid(Viewport(-span / 2, span / 2, -span / 2, span / 2))
    assert grid.spacing > 0
    assert 10 <= len(grid.vertical) <= 101
    assert grid.vertical == grid.horizontal
    assert grid.show_x_axis and grid.show_y_axis


def test_grid_far_from_origin() -> None:
    grid = compute_grid(Viewport(1e300, 1e300 + 1e290, 1e300, 1e300 + 1e290))
    assert 10 <= len(grid.vertical) <= 101
    assert all(x == pytest.approx(1e300, rel=1e-9) for x in grid.vertical)
    assert list(grid.vertical) == sorted(grid.vertical)
