"""Export entry points.

``export_image``: validate -> plan -> render -> encode -> deliver.
``export_csv``: encode -> deliver, always synchronous and local.

Each call either delivers exactly one complete artifact or raises an
:class:`~bead_pattern.errors.ExportError` and delivers nothing.
"""

import logging
from typing import Optional

from bead_pattern.csv_codec import encode
from bead_pattern.errors import InputInvalid
from bead_pattern.export.artifact import CSV_MIME, Artifact, encode_png
from bead_pattern.export.delivery import DeliveryPort, DeliveryResult
from bead_pattern.grid import ColorTally, Grid, total_count
from bead_pattern.layout import plan_layout
from bead_pattern.options import RenderOptions
from bead_pattern.renderer.pattern import render
from bead_pattern.types import ColorSystem, ColorSystemResolver

logger = logging.getLogger(__name__)


def image_filename(width: int, height: int, color_system: ColorSystem) -> str:
    return f"bead-grid-{width}x{height}-{color_system}.png"


def csv_filename(width: int, height: int, color_system: ColorSystem) -> str:
    return f"bead-pattern-{width}x{height}-{color_system}.csv"


def validate_grid(grid: Optional[Grid]) -> Grid:
    if grid is None:
        raise InputInvalid("No pattern has been generated yet.")
    if grid.width <= 0 or grid.height <= 0:
        raise InputInvalid(
            f"Pattern dimensions must be positive, got {grid.width}x{grid.height}."
        )
    return grid


def render_png(
    grid: Optional[Grid],
    tally: Optional[ColorTally],
    options: RenderOptions,
    color_system: ColorSystem,
    resolver: ColorSystemResolver,
    total: Optional[int] = None,
) -> Artifact:
    """Render and encode the pattern sheet without delivering it.

    Raises:
        InputInvalid: Missing grid or tally, or zero dimensions.
        SurfaceCreationFailure: The surface could not be allocated.
        SerializationFailure: PNG encoding produced unusable output.
    """
    grid = validate_grid(grid)
    if tally is None:
        raise InputInvalid("Color usage statistics are missing.")
    if total is None:
        total = total_count(tally)

    plan = plan_layout(grid.width, grid.height, options, tally)
    image = render(grid, tally, total, options, color_system, resolver, plan=plan)
    try:
        return encode_png(image, image_filename(grid.width, grid.height, color_system))
    finally:
        image.close()


def export_image(
    grid: Optional[Grid],
    tally: Optional[ColorTally],
    options: RenderOptions,
    color_system: ColorSystem,
    resolver: ColorSystemResolver,
    delivery: DeliveryPort,
    total: Optional[int] = None,
) -> DeliveryResult:
    """Render the annotated sheet and hand it to ``delivery``."""
    artifact = render_png(grid, tally, options, color_system, resolver, total=total)
    result = delivery.deliver(artifact)
    logger.info(
        "Exported %s via %s: %s", artifact.filename, result.strategy, result.location
    )
    return result


def build_csv_artifact(grid: Optional[Grid], color_system: ColorSystem) -> Artifact:
    grid = validate_grid(grid)
    return Artifact(
        filename=csv_filename(grid.width, grid.height, color_system),
        mime_type=CSV_MIME,
        data=encode(grid).encode("utf-8"),
    )


def export_csv(
    grid: Optional[Grid], color_system: ColorSystem, port: DeliveryPort
) -> DeliveryResult:
    """Write the grid's CSV encoding through ``port``."""
    artifact = build_csv_artifact(grid, color_system)
    result = port.deliver(artifact)
    logger.info("CSV export complete: %s", result.location)
    return result
