"""Raster geometry planning.

:func:`plan_layout` computes every coordinate and size the renderer needs,
including the legend, before any pixel is drawn. The renderer therefore
allocates the surface exactly once at its final size.

Sizing model (all values in pixels):

* Cells are a fixed ``CELL_SIZE`` square regardless of content.
* Axis bands exist only when coordinates are shown; extra side margins keep
    multi-digit labels inside the surface.
* The title bar scales with the total width, clamped to ``[1, 2]`` times its
    base size, so large sheets keep legible headers and small ones stay compact.
* The legend lays colors out in 1 to 4 columns of ``LEGEND_COLUMN_WIDTH``;
    swatch size grows linearly once the available width passes a threshold.

The legend font size feeds the coordinate margins, which feed the surface
width, which feeds the legend columns. The cycle is broken by sizing the font
from the content width (grid plus one axis band) and the columns and swatches
from the final surface width.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from bead_pattern.grid import ColorTally
from bead_pattern.options import RenderOptions

CELL_SIZE = 30
MIN_AXIS_BAND = 30
AXIS_FONT_SIZE = 14
MIN_CELL_FONT_SIZE = 8

BASE_TITLE_BAR_HEIGHT = 80
TITLE_REFERENCE_WIDTH = 1000
MIN_TITLE_SCALE = 1.0
MAX_TITLE_SCALE = 2.0
BASE_TITLE_FONT_SIZE = 28

LEGEND_PADDING = 20
LEGEND_TOP_MARGIN = 24
LEGEND_HEADER_HEIGHT = 30
LEGEND_FOOTER_HEIGHT = 30
LEGEND_COLUMN_WIDTH = 250
LEGEND_MAX_COLUMNS = 4
LEGEND_MIN_ROW_HEIGHT = 25
LEGEND_SCALE_THRESHOLD = 350
LEGEND_SCALE_SPAN = 600
BASE_LEGEND_FONT_SIZE = 13
BASE_SWATCH_SIZE = 18


@dataclass(frozen=True)
class LegendLayout:
    top: int
    available_width: int
    columns: int
    rows: int
    item_width: int
    swatch_size: int
    font_size: int
    header_font_size: int
    row_height: int
    height: int


@dataclass(frozen=True)
class LayoutPlan:
    """Geometry for one export. Never persisted or shared."""

    columns: int
    rows: int
    cell_size: int
    cell_font_size: int
    axis_band: int
    axis_font_size: int
    margin_left: int
    margin_right: int
    margin_top: int
    margin_bottom: int
    title_scale: float
    title_height: int
    title_font_size: int
    main_title_font_size: int
    subtitle_font_size: int
    hint_font_size: int
    grid_left: int
    grid_top: int
    grid_width: int
    grid_height: int
    legend: Optional[LegendLayout]
    width: int
    height: int

    @property
    def brand_block_width(self) -> int:
        return int(self.title_height * 0.8)

    @property
    def logo_size(self) -> float:
        return self.title_height * 0.4

    def cell_origin(self, x: int, y: int) -> tuple[int, int]:
        return (
            self.grid_left + x * self.cell_size,
            self.grid_top + y * self.cell_size,
        )


def title_bar_scale(width: float) -> float:
    return max(MIN_TITLE_SCALE, min(MAX_TITLE_SCALE, width / TITLE_REFERENCE_WIDTH))


def legend_columns(available_width: float) -> int:
    return max(1, min(LEGEND_MAX_COLUMNS, math.floor(available_width / LEGEND_COLUMN_WIDTH)))


def legend_width_factor(available_width: float) -> float:
    """0 up to the threshold, then +1 per ``LEGEND_SCALE_SPAN`` pixels."""
    return max(0.0, available_width - LEGEND_SCALE_THRESHOLD) / LEGEND_SCALE_SPAN


def axis_label_indices(count: int, interval: int) -> List[int]:
    """0-based indices that receive an axis label.

    Every ``interval``-th position plus the first and last, so boundary
    labels always appear.
    """
    interval = max(1, interval)
    last = count - 1
    return [
        i for i in range(count) if (i + 1) % interval == 0 or i == 0 or i == last
    ]


def plan_layout(
    columns: int,
    rows: int,
    options: RenderOptions,
    tally: Optional[ColorTally] = None,
) -> LayoutPlan:
    """Compute the full surface geometry for an ``columns`` x ``rows`` grid."""
    columns = max(1, columns)
    rows = max(1, rows)
    cell = CELL_SIZE
    grid_width = columns * cell
    grid_height = rows * cell

    axis_band = max(MIN_AXIS_BAND, cell) if options.show_coordinates else 0

    content_available = grid_width + axis_band - LEGEND_PADDING * 2
    legend_font = math.floor(
        BASE_LEGEND_FONT_SIZE + legend_width_factor(content_available) * 10
    )

    if options.show_coordinates:
        margin_side = max(20, legend_font * 2)
        margin_vertical = max(15, legend_font)
    else:
        margin_side = margin_vertical = 0

    scale = title_bar_scale(grid_width + axis_band + margin_side)
    title_height = math.floor(BASE_TITLE_BAR_HEIGHT * scale)
    title_font = max(BASE_TITLE_FONT_SIZE, math.floor(BASE_TITLE_FONT_SIZE * scale))
    subtitle_font = max(12, math.floor(title_font * 0.45))

    width = grid_width + axis_band * 2 + margin_side * 2
    grid_left = margin_side + axis_band
    grid_top = title_height + margin_vertical + axis_band

    legend: Optional[LegendLayout] = None
    if options.include_stats and tally is not None:
        available = width - LEGEND_PADDING * 2
        n_columns = legend_columns(available)
        swatch = math.floor(BASE_SWATCH_SIZE + legend_width_factor(available) * 20)
        row_height = max(swatch + 8, LEGEND_MIN_ROW_HEIGHT)
        n_rows = math.ceil(len(tally) / n_columns)
        legend = LegendLayout(
            top=grid_top + grid_height + axis_band + LEGEND_PADDING + LEGEND_TOP_MARGIN,
            available_width=available,
            columns=n_columns,
            rows=n_rows,
            item_width=math.floor(available / n_columns),
            swatch_size=swatch,
            font_size=legend_font,
            header_font_size=max(16, legend_font),
            row_height=row_height,
            height=(
                LEGEND_TOP_MARGIN
                + LEGEND_HEADER_HEIGHT
                + n_rows * row_height
                + LEGEND_FOOTER_HEIGHT
                + LEGEND_PADDING * 2
            ),
        )

    height = (
        title_height
        + margin_vertical * 2
        + grid_height
        + axis_band * 2
        + (legend.height if legend else 0)
    )

    return LayoutPlan(
        columns=columns,
        rows=rows,
        cell_size=cell,
        cell_font_size=max(MIN_CELL_FONT_SIZE, math.floor(cell * 0.4)),
        axis_band=axis_band,
        axis_font_size=AXIS_FONT_SIZE,
        margin_left=margin_side,
        margin_right=margin_side,
        margin_top=margin_vertical,
        margin_bottom=margin_vertical,
        title_scale=scale,
        title_height=title_height,
        title_font_size=title_font,
        main_title_font_size=max(20, math.floor(title_font * 0.8)),
        subtitle_font_size=subtitle_font,
        hint_font_size=max(12, math.floor(subtitle_font * 0.6)),
        grid_left=grid_left,
        grid_top=grid_top,
        grid_width=grid_width,
        grid_height=grid_height,
        legend=legend,
        width=width,
        height=height,
    )
