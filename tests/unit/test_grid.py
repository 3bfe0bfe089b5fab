import pytest
from pyrsistent import pvector

from bead_pattern.errors import InputInvalid
from bead_pattern.grid import Cell, ColorCount, Grid, tally_colors, total_count
from bead_pattern.options import RenderOptions
from tests.test_utils import BLUE, RED, make_checker_grid, make_grid


def test_external_cell_is_canonical() -> None:
    cell = Cell.external()
    assert (cell.key, cell.color, cell.is_external) == ("TRANSPARENT", "#FFFFFF", True)


@pytest.mark.parametrize(
    "key, color, is_external",
    [
        ("TRANSPARENT", "#000000", True),
        ("A1", "#FFFFFF", True),
        ("A1", "#fff", False),
        ("A1", "#ff0000", False),
        ("", "#FF0000", False),
    ],
)
def test_cell_invariant_violations(key: str, color: str, is_external: bool) -> None:
    with pytest.raises(InputInvalid):
        Cell(key=key, color=color, is_external=is_external)


def test_from_hex_uppercases() -> None:
    assert Cell.from_hex("#a0b1c2") == Cell(key="#A0B1C2", color="#A0B1C2")


def test_grid_dimensions_from_rows() -> None:
    grid = make_grid([[RED, BLUE, None], [None, None, RED]])
    assert grid.dimensions == (3, 2)
    assert grid.cell(2, 1).color == RED


def test_grid_rejects_ragged_rows() -> None:
    with pytest.raises(InputInvalid):
        make_grid([[RED, BLUE], [RED]])


def test_grid_rejects_wrong_declared_height() -> None:
    row = pvector([Cell.from_hex(RED)])
    with pytest.raises(InputInvalid):
        Grid(rows=pvector([row]), width=1, height=2)


def test_empty_grid_is_representable() -> None:
    assert Grid.from_rows([]).dimensions == (0, 0)


def test_tally_counts_internal_cells_only() -> None:
    grid = make_checker_grid(3, 3, external=[(0, 0), (1, 1)])
    tally = tally_colors(grid)
    assert tally == {
        RED: ColorCount(count=3, color=RED),
        BLUE: ColorCount(count=4, color=BLUE),
    }
    assert total_count(tally) == 7


def test_render_options_from_mapping_accepts_camel_case() -> None:
    options = RenderOptions.from_mapping(
        {
            "showGrid": False,
            "gridInterval": 5,
            "showCoordinates": False,
            "gridLineColor": "#ff00ff",
            "includeStats": False,
            "unknown": 1,
        }
    )
    assert options == RenderOptions(
        show_grid=False,
        grid_interval=5,
        show_coordinates=False,
        grid_line_color="#FF00FF",
        include_stats=False,
    )


@pytest.mark.parametrize("interval, expected", [(0, 1), (-3, 1), (7, 7)])
def test_render_options_clamps_interval(interval: int, expected: int) -> None:
    assert RenderOptions(grid_interval=interval).grid_interval == expected


def test_render_options_rejects_bad_line_color() -> None:
    with pytest.raises(InputInvalid):
        RenderOptions(grid_line_color="grey")
