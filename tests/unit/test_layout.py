import math

import pytest
from typing import List

from bead_pattern.grid import tally_colors
from bead_pattern.layout import (
    CELL_SIZE,
    LEGEND_PADDING,
    axis_label_indices,
    legend_columns,
    plan_layout,
    title_bar_scale,
)
from bead_pattern.options import RenderOptions
from tests.test_utils import make_grid

NO_EXTRAS = RenderOptions(show_coordinates=False, include_stats=False)


def _tally_of(n_colors: int):
    return tally_colors(make_grid([[f"#0000{i:02X}" for i in range(n_colors)]]))


@pytest.mark.parametrize(
    "count, interval, expected",
    [
        (12, 5, [0, 4, 9, 11]),
        (10, 5, [0, 4, 9]),
        (1, 5, [0]),
        (4, 1, [0, 1, 2, 3]),
        (3, 10, [0, 2]),
        (0, 5, []),
    ],
)
def test_axis_label_indices(count: int, interval: int, expected: List[int]) -> None:
    assert axis_label_indices(count, interval) == expected


@pytest.mark.parametrize(
    "width, expected",
    [(900, 3), (100, 1), (-10, 1), (250, 1), (500, 2), (1000, 4), (5000, 4)],
)
def test_legend_columns(width: int, expected: int) -> None:
    assert legend_columns(width) == expected


@pytest.mark.parametrize(
    "width, expected", [(300, 1.0), (1000, 1.0), (1500, 1.5), (2000, 2.0), (9000, 2.0)]
)
def test_title_bar_scale(width: int, expected: float) -> None:
    assert title_bar_scale(width) == pytest.approx(expected)


def test_cell_size_is_independent_of_content() -> None:
    small = plan_layout(3, 3, RenderOptions(), _tally_of(1))
    large = plan_layout(120, 80, RenderOptions(), _tally_of(20))
    assert small.cell_size == large.cell_size == CELL_SIZE


def test_no_coordinates_means_no_bands_or_margins() -> None:
    plan = plan_layout(10, 8, NO_EXTRAS)
    assert plan.axis_band == 0
    assert (plan.margin_left, plan.margin_right, plan.margin_top, plan.margin_bottom) == (0, 0, 0, 0)
    assert plan.width == 10 * CELL_SIZE
    assert plan.height == plan.title_height + 8 * CELL_SIZE
    assert plan.legend is None
    assert (plan.grid_left, plan.grid_top) == (0, plan.title_height)


def test_coordinates_add_bands_on_all_sides() -> None:
    plan = plan_layout(10, 8, RenderOptions(include_stats=False))
    assert plan.axis_band == 30
    assert plan.margin_left == plan.margin_right == 26  # 2 * legend font 13
    assert plan.margin_top == plan.margin_bottom == 15
    assert plan.width == 300 + 2 * 30 + 2 * 26
    assert plan.height == plan.title_height + 240 + 2 * 30 + 2 * 15
    assert plan.grid_left == 26 + 30
    assert plan.grid_top == plan.title_height + 15 + 30


def test_legend_geometry_for_wide_pattern() -> None:
    plan = plan_layout(30, 30, RenderOptions(), _tally_of(7))
    legend = plan.legend
    assert legend is not None
    assert plan.width == 900 + 60 + 2 * 44
    assert legend.available_width == plan.width - 2 * LEGEND_PADDING
    assert legend.columns == 4
    assert legend.rows == 2
    assert legend.font_size == 22
    assert legend.swatch_size == math.floor(18 + (legend.available_width - 350) / 600 * 20)
    assert legend.row_height == legend.swatch_size + 8
    assert legend.height == 24 + 30 + 2 * legend.row_height + 30 + 40
    assert plan.height == plan.title_height + 2 * 22 + 900 + 60 + legend.height
    assert legend.top == plan.grid_top + plan.grid_height + plan.axis_band + 20 + 24


def test_legend_floor_sizes_below_threshold() -> None:
    plan = plan_layout(5, 5, RenderOptions(show_coordinates=False), _tally_of(3))
    legend = plan.legend
    assert legend is not None
    assert legend.columns == 1
    assert legend.rows == 3
    assert legend.swatch_size == 18
    assert legend.font_size == 13
    assert legend.row_height == 26


def test_empty_tally_gives_zero_legend_rows() -> None:
    plan = plan_layout(5, 5, RenderOptions(), _tally_of(0))
    assert plan.legend is not None and plan.legend.rows == 0


def test_title_bar_scales_with_width() -> None:
    compact = plan_layout(10, 10, RenderOptions())
    wide = plan_layout(100, 10, RenderOptions())
    assert compact.title_scale == 1.0
    assert compact.title_height == 80
    assert compact.title_font_size == 28
    assert wide.title_scale == 2.0
    assert wide.title_height == 160
    assert wide.title_font_size == 56
    assert wide.main_title_font_size == 44
    assert wide.subtitle_font_size == 25
    assert wide.hint_font_size == 15


def test_planner_clamps_degenerate_input() -> None:
    plan = plan_layout(0, -4, RenderOptions(grid_interval=0), _tally_of(2))
    assert (plan.columns, plan.rows) == (1, 1)
    assert plan.width > 0 and plan.height > 0
