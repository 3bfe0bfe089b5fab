import logging
from typing import Optional, Tuple

from PIL import Image, ImageDraw

from bead_pattern.errors import SurfaceCreationFailure
from bead_pattern.grid import ColorTally, Grid
from bead_pattern.layout import (
    LEGEND_HEADER_HEIGHT,
    LEGEND_PADDING,
    LayoutPlan,
    axis_label_indices,
    plan_layout,
)
from bead_pattern.options import RenderOptions
from bead_pattern.palette import HexResolver
from bead_pattern.types import ColorSystem, ColorSystemResolver
from bead_pattern.utils.color import get_contrast_color, hex_to_rgb, sort_color_keys
from bead_pattern.utils.image import (
    draw_bead_glyphs,
    draw_text,
    linear_gradient,
    load_font,
)

logger = logging.getLogger(__name__)

# Largest side most raster backends (and browsers) accept.
MAX_SURFACE_SIDE = 32767

BACKGROUND = "#FFFFFF"
TITLE_BAR_BACKGROUND = "#1F2937"
BRAND_GRADIENT: Tuple[Tuple[int, int, int], Tuple[int, int, int]] = (
    (0x63, 0x66, 0xF1),
    (0x8B, 0x5C, 0xF6),
)
AXIS_BACKGROUND = "#F5F5F5"
AXIS_TEXT = "#333333"
AXIS_EDGE = "#AAAAAA"
CELL_BORDER = "#DDDDDD"
OUTER_BORDER = "#000000"
LEGEND_TEXT = "#333333"
LEGEND_RULE = "#DDDDDD"
SWATCH_BORDER = "#CCCCCC"
SEPARATOR_WIDTH = 2
OUTER_BORDER_WIDTH = 2
HINT_RIGHT_PADDING = 20


def create_surface(plan: LayoutPlan) -> Image.Image:
    """Allocate the white RGB surface for ``plan``."""
    size = (plan.width, plan.height)
    if min(size) <= 0 or max(size) > MAX_SURFACE_SIDE:
        raise SurfaceCreationFailure(
            f"Surface size {plan.width}x{plan.height} is outside the supported range"
        )
    try:
        return Image.new("RGB", size, BACKGROUND)
    except (ValueError, MemoryError) as e:
        raise SurfaceCreationFailure(
            f"Cannot allocate a {plan.width}x{plan.height} surface: {e}"
        ) from e


def draw_title_bar(
    img: Image.Image,
    draw: ImageDraw.ImageDraw,
    plan: LayoutPlan,
    options: RenderOptions,
) -> None:
    h = plan.title_height
    draw.rectangle([0, 0, plan.width - 1, h - 1], fill=TITLE_BAR_BACKGROUND)

    brand_w = plan.brand_block_width
    img.paste(linear_gradient(brand_w, h, *BRAND_GRADIENT), (0, 0))
    draw_bead_glyphs(draw, (brand_w / 2, h / 2), plan.logo_size)

    text_x = brand_w + h * 0.3
    subtitle_y = h * 0.65
    draw_text(
        draw,
        (text_x, h * 0.4),
        options.title,
        load_font(plan.main_title_font_size, bold=True),
        fill=(255, 255, 255, 255),
    )
    draw_text(
        draw,
        (text_x, subtitle_y),
        options.subtitle,
        load_font(plan.subtitle_font_size),
        fill=(255, 255, 255, 204),
    )
    if options.usage_hint:
        draw_text(
            draw,
            (plan.width - HINT_RIGHT_PADDING, subtitle_y),
            options.usage_hint,
            load_font(plan.hint_font_size),
            fill=(255, 255, 255, 191),
            align="right",
        )
    draw.line([(0, h - 1), (plan.width, h - 1)], fill=(255, 255, 255, 26), width=1)


def draw_axes(draw: ImageDraw.ImageDraw, plan: LayoutPlan, interval: int) -> None:
    """Label bands on all four sides with 1-based indices."""
    band = plan.axis_band
    left, top = plan.grid_left, plan.grid_top
    right, bottom = left + plan.grid_width, top + plan.grid_height

    # top, bottom, left, right
    draw.rectangle([left, top - band, right - 1, top - 1], fill=AXIS_BACKGROUND)
    draw.rectangle([left, bottom, right - 1, bottom + band - 1], fill=AXIS_BACKGROUND)
    draw.rectangle([left - band, top, left - 1, bottom - 1], fill=AXIS_BACKGROUND)
    draw.rectangle([right, top, right + band - 1, bottom - 1], fill=AXIS_BACKGROUND)

    font = load_font(plan.axis_font_size)
    half_cell = plan.cell_size / 2
    for i in axis_label_indices(plan.columns, interval):
        x = left + i * plan.cell_size + half_cell
        draw_text(draw, (x, top - band / 2), str(i + 1), font, AXIS_TEXT, "center")
        draw_text(draw, (x, bottom + band / 2), str(i + 1), font, AXIS_TEXT, "center")
    for j in axis_label_indices(plan.rows, interval):
        y = top + j * plan.cell_size + half_cell
        draw_text(draw, (left - band / 2, y), str(j + 1), font, AXIS_TEXT, "center")
        draw_text(draw, (right + band / 2, y), str(j + 1), font, AXIS_TEXT, "center")

    draw.line([(left, top), (right, top)], fill=AXIS_EDGE, width=1)
    draw.line([(left, bottom), (right, bottom)], fill=AXIS_EDGE, width=1)
    draw.line([(left, top), (left, bottom)], fill=AXIS_EDGE, width=1)
    draw.line([(right, top), (right, bottom)], fill=AXIS_EDGE, width=1)


def draw_cells(
    draw: ImageDraw.ImageDraw,
    grid: Grid,
    plan: LayoutPlan,
    color_system: ColorSystem,
    resolver: ColorSystemResolver,
) -> None:
    font = load_font(plan.cell_font_size, bold=True)
    size = plan.cell_size
    for x, y, cell in grid.cells():
        x0, y0 = plan.cell_origin(x, y)
        box = [x0, y0, x0 + size - 1, y0 + size - 1]
        if cell.is_external:
            draw.rectangle(box, fill=BACKGROUND)
        else:
            draw.rectangle(box, fill=cell.color)
            label = resolver.display_key(cell.color, color_system)
            draw_text(
                draw,
                (x0 + size / 2, y0 + size / 2),
                label,
                font,
                get_contrast_color(cell.color),
                "center",
            )
        draw.rectangle(box, outline=CELL_BORDER, width=1)


def draw_separators(
    draw: ImageDraw.ImageDraw, plan: LayoutPlan, interval: int, color: str
) -> None:
    """Lines between cell groups; never on the outer border."""
    left, top = plan.grid_left, plan.grid_top
    right, bottom = left + plan.grid_width, top + plan.grid_height
    half = SEPARATOR_WIDTH // 2
    for i in range(interval, plan.columns, interval):
        x = left + i * plan.cell_size
        draw.rectangle([x - half, top, x + half - 1, bottom - 1], fill=color)
    for j in range(interval, plan.rows, interval):
        y = top + j * plan.cell_size
        draw.rectangle([left, y - half, right - 1, y + half - 1], fill=color)


def draw_outer_border(draw: ImageDraw.ImageDraw, plan: LayoutPlan) -> None:
    """Border inset over the outermost cell pixels, like the cell boxes."""
    draw.rectangle(
        [
            plan.grid_left,
            plan.grid_top,
            plan.grid_left + plan.grid_width - 1,
            plan.grid_top + plan.grid_height - 1,
        ],
        outline=OUTER_BORDER,
        width=OUTER_BORDER_WIDTH,
    )


def draw_legend(
    draw: ImageDraw.ImageDraw,
    plan: LayoutPlan,
    tally: ColorTally,
    total: int,
    color_system: ColorSystem,
    resolver: ColorSystemResolver,
) -> None:
    legend = plan.legend
    if legend is None:
        return

    header_font = load_font(legend.header_font_size, bold=True)
    font = load_font(legend.font_size)
    bold_font = load_font(legend.font_size, bold=True)
    right_edge = plan.width - LEGEND_PADDING

    draw_text(
        draw,
        (LEGEND_PADDING, legend.top + 6),
        f"Color usage ({len(tally)} colors)",
        header_font,
        LEGEND_TEXT,
    )
    draw.line(
        [(LEGEND_PADDING, legend.top + 20), (right_edge, legend.top + 20)],
        fill=LEGEND_RULE,
        width=1,
    )

    swatch = legend.swatch_size
    for index, key in enumerate(sort_color_keys(tally.keys())):
        entry = tally[key]
        row, col = divmod(index, legend.columns)
        item_x = LEGEND_PADDING + col * legend.item_width
        row_y = legend.top + LEGEND_HEADER_HEIGHT + row * legend.row_height + swatch / 2
        sy = round(row_y - swatch / 2)

        draw.rectangle(
            [item_x, sy, item_x + swatch - 1, sy + swatch - 1],
            fill=hex_to_rgb(entry.color) or (255, 255, 255),
            outline=SWATCH_BORDER,
        )
        draw_text(
            draw,
            (item_x + swatch + 5, row_y),
            resolver.key_for_hex(entry.color, color_system),
            font,
            LEGEND_TEXT,
        )
        count_x = (
            right_edge if legend.columns == 1 else item_x + legend.item_width - 10
        )
        draw_text(
            draw, (count_x, row_y), f"{entry.count} beads", font, LEGEND_TEXT, "right"
        )

    total_y = legend.top + LEGEND_HEADER_HEIGHT + legend.rows * legend.row_height + 10
    draw_text(
        draw, (right_edge, total_y), f"Total: {total} beads", bold_font, LEGEND_TEXT, "right"
    )


def render(
    grid: Grid,
    tally: ColorTally,
    total: int,
    options: RenderOptions,
    color_system: ColorSystem,
    resolver: ColorSystemResolver,
    plan: Optional[LayoutPlan] = None,
) -> Image.Image:
    """
    Paint the annotated pattern sheet for ``grid`` as a PIL Image.

    Layers, in order: background, title bar, axis bands, cells, group
    separators, outer border, legend. The surface is allocated once at the
    planned size; the caller owns the returned image.
    """
    if plan is None:
        plan = plan_layout(grid.width, grid.height, options, tally)

    img = create_surface(plan)
    logger.info("Generating pattern image %dx%d", plan.width, plan.height)
    draw = ImageDraw.Draw(img, "RGBA")

    draw_title_bar(img, draw, plan, options)
    if options.show_coordinates:
        draw_axes(draw, plan, options.grid_interval)
    draw_cells(draw, grid, plan, color_system, resolver)
    if options.show_grid:
        draw_separators(draw, plan, options.grid_interval, options.grid_line_color)
    draw_outer_border(draw, plan)
    if options.include_stats:
        draw_legend(draw, plan, tally, total, color_system, resolver)
    return img


class PatternRenderer:
    options: RenderOptions
    color_system: ColorSystem
    resolver: ColorSystemResolver

    def __init__(
        self,
        options: Optional[RenderOptions] = None,
        color_system: ColorSystem = "hex",
        resolver: Optional[ColorSystemResolver] = None,
    ):
        self.options = options or RenderOptions()
        self.color_system = color_system
        self.resolver = resolver or HexResolver()

    def render(self, grid: Grid, tally: ColorTally, total: int) -> Image.Image:
        return render(
            grid,
            tally,
            total,
            options=self.options,
            color_system=self.color_system,
            resolver=self.resolver,
        )
