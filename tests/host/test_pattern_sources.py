import pytest

from app.config.sources.base import pattern_sources, source_for
from app.config.sources.csv_source import CsvConfig, load_csv_grid
from app.config.sources.sample_source import (
    SampleConfig,
    default_sample_config,
    generate_sample,
)
from bead_pattern.errors import CsvReadError, EmptyInput, RowLengthMismatch
from bead_pattern.grid import tally_colors


def test_each_config_type_maps_to_its_source() -> None:
    assert source_for(CsvConfig()).load_grid is load_csv_grid
    assert source_for(default_sample_config()).load_grid is generate_sample
    assert source_for(object()) is None
    assert {s.config_type for s in pattern_sources()} == {CsvConfig, SampleConfig}


def test_default_configs_match_their_source() -> None:
    for source in pattern_sources():
        assert isinstance(source.default_config(), source.config_type)


def test_generated_sample_keeps_corners_external() -> None:
    grid = generate_sample(SampleConfig(width=9, height=7, num_colors=3, seed=1))
    assert grid.dimensions == (9, 7)
    assert grid.cell(0, 0).is_external
    assert grid.cell(8, 6).is_external
    assert not grid.cell(4, 3).is_external
    assert 1 <= len(tally_colors(grid)) <= 3


def test_generated_sample_is_deterministic() -> None:
    cfg = SampleConfig(width=5, height=5, num_colors=4, seed=7)
    assert generate_sample(cfg) == generate_sample(cfg)


def test_uploaded_csv_with_byte_order_mark() -> None:
    content = "#FF0000,TRANSPARENT\n#00FF00,#00FF00".encode("utf-8-sig")
    grid = load_csv_grid(CsvConfig(filename="excel.csv", content=content))
    assert grid.dimensions == (2, 2)
    assert grid.cell(0, 0).color == "#FF0000"


@pytest.mark.parametrize(
    "content, error",
    [
        (None, EmptyInput),
        (b"\xff\xfe\x00", CsvReadError),
        (b"#FF0000,#FF0000\n#FF0000", RowLengthMismatch),
    ],
)
def test_uploaded_csv_errors(content, error) -> None:
    with pytest.raises(error):
        load_csv_grid(CsvConfig(filename="bad.csv", content=content))
