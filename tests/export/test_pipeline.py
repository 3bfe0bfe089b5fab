import io
from pathlib import Path

import pytest
from PIL import Image

from bead_pattern.csv_codec import encode
from bead_pattern.errors import InputInvalid
from bead_pattern.export.delivery import FileDownloadPort
from bead_pattern.export.pipeline import (
    csv_filename,
    export_csv,
    export_image,
    image_filename,
    render_png,
)
from bead_pattern.grid import Grid, tally_colors
from bead_pattern.layout import plan_layout
from bead_pattern.options import RenderOptions
from bead_pattern.palette import HexResolver
from tests.test_utils import make_checker_grid


def test_filenames() -> None:
    assert image_filename(30, 20, "MARD") == "bead-grid-30x20-MARD.png"
    assert csv_filename(30, 20, "hex") == "bead-pattern-30x20-hex.csv"


@pytest.mark.parametrize("grid", [None, Grid.from_rows([])])
def test_export_image_rejects_missing_or_empty_grid(grid, tmp_path: Path) -> None:
    tally = tally_colors(grid) if grid is not None else None
    with pytest.raises(InputInvalid):
        export_image(
            grid, tally, RenderOptions(), "hex", HexResolver(), FileDownloadPort(tmp_path)
        )
    assert list(tmp_path.iterdir()) == []


def test_export_image_requires_tally(tmp_path: Path) -> None:
    with pytest.raises(InputInvalid):
        export_image(
            make_checker_grid(3, 2),
            None,
            RenderOptions(),
            "hex",
            HexResolver(),
            FileDownloadPort(tmp_path),
        )
    assert list(tmp_path.iterdir()) == []


def test_export_image_writes_planned_png(tmp_path: Path) -> None:
    grid = make_checker_grid(3, 2)
    tally = tally_colors(grid)
    options = RenderOptions()
    result = export_image(
        grid, tally, options, "hex", HexResolver(), FileDownloadPort(tmp_path)
    )
    saved = tmp_path / "bead-grid-3x2-hex.png"
    assert result.location == str(saved)
    plan = plan_layout(3, 2, options, tally)
    with Image.open(saved) as img:
        assert img.size == (plan.width, plan.height)
        assert img.format == "PNG"


def test_render_png_uses_explicit_total() -> None:
    grid = make_checker_grid(2, 2)
    artifact = render_png(
        grid, tally_colors(grid), RenderOptions(), "hex", HexResolver(), total=99
    )
    assert artifact.filename == "bead-grid-2x2-hex.png"
    with Image.open(io.BytesIO(artifact.data)) as img:
        img.verify()


def test_export_csv_writes_encoded_grid(tmp_path: Path) -> None:
    grid = make_checker_grid(3, 2, external=[(1, 1)])
    export_csv(grid, "hex", FileDownloadPort(tmp_path))
    saved = tmp_path / "bead-pattern-3x2-hex.csv"
    assert saved.read_text(encoding="utf-8") == encode(grid)


def test_export_csv_rejects_missing_grid(tmp_path: Path) -> None:
    with pytest.raises(InputInvalid):
        export_csv(None, "hex", FileDownloadPort(tmp_path))
    assert list(tmp_path.iterdir()) == []
