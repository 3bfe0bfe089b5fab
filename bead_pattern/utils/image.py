import numpy as np
import numpy.typing as npt
from functools import lru_cache
from PIL import Image, ImageDraw, ImageFont
from typing import Tuple, Union

from bead_pattern.types import RGB

# Type aliases for clarity
FloatArray = npt.NDArray[np.float32 | np.float64]
UInt8Array = npt.NDArray[np.uint8]
Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

_REGULAR_FONT_CANDIDATES: Tuple[str, ...] = (
    "DejaVuSans.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/System/Library/Fonts/Helvetica.ttc",
    "arial.ttf",
)
_BOLD_FONT_CANDIDATES: Tuple[str, ...] = (
    "DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/System/Library/Fonts/Helvetica.ttc",
    "arialbd.ttf",
)


@lru_cache(maxsize=64)
def load_font(size: int, bold: bool = False) -> Font:
    """
    Load a sans-serif TrueType font at ``size``, falling back to Pillow's
    bundled default font when no system font is available.
    """
    candidates = _BOLD_FONT_CANDIDATES if bold else _REGULAR_FONT_CANDIDATES
    for path in candidates:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            continue
    return ImageFont.load_default(size)


def draw_text(
    draw: ImageDraw.ImageDraw,
    xy: Tuple[float, float],
    text: str,
    font: Font,
    fill: Union[str, Tuple[int, ...]],
    align: str = "left",
) -> None:
    """
    Draw single-line ``text`` vertically centered on ``xy[1]``.

    ``align`` picks which edge of the text box sits on ``xy[0]``: "left",
    "center" or "right". Offsets come from the measured text box so the result
    is the same for TrueType and bitmap fonts.
    """
    if not text:
        return
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    x, y = xy
    if align == "center":
        x -= (left + right) / 2
    elif align == "right":
        x -= right
    else:
        x -= left
    y -= (top + bottom) / 2
    draw.text((round(x), round(y)), text, fill=fill, font=font)


def linear_gradient(
    width: int, height: int, start: RGB, end: RGB
) -> Image.Image:
    """
    Diagonal gradient from ``start`` (top-left) to ``end`` (bottom-right).

    Each pixel's blend weight is its projection onto the diagonal, normalized
    to [0, 1].
    """
    width, height = max(1, width), max(1, height)
    ys, xs = np.mgrid[0:height, 0:width].astype(np.float32)
    denom = np.float32(width * width + height * height)
    t: FloatArray = np.clip((xs * width + ys * height) / denom, 0.0, 1.0)

    start_arr = np.array(start, dtype=np.float32)
    end_arr = np.array(end, dtype=np.float32)
    rgb = start_arr + (end_arr - start_arr) * t[..., None]
    out: UInt8Array = np.rint(rgb).astype(np.uint8)
    return Image.fromarray(out)


def draw_bead_glyphs(
    draw: ImageDraw.ImageDraw,
    center: Tuple[float, float],
    logo_size: float,
    glyph_fill: Tuple[int, int, int, int] = (255, 255, 255, 255),
    dot_fill: Tuple[int, int, int, int] = (99, 102, 241, 77),
) -> None:
    """
    Draw a 3x3 arrangement of rounded squares, each with a small center dot.

    The arrangement's top-left glyph starts at ``center - logo_size / 2``;
    glyphs are ``logo_size / 4`` wide with 1.2x spacing.
    """
    cx, cy = center
    bead = logo_size / 4
    spacing = bead * 1.2
    radius = max(1, int(round(bead * 0.2)))
    dot_r = bead * 0.15

    for row in range(3):
        for col in range(3):
            x0 = cx - logo_size / 2 + col * spacing
            y0 = cy - logo_size / 2 + row * spacing
            draw.rounded_rectangle(
                [round(x0), round(y0), round(x0 + bead), round(y0 + bead)],
                radius=radius,
                fill=glyph_fill,
            )
            dx, dy = x0 + bead / 2, y0 + bead / 2
            draw.ellipse(
                [dx - dot_r, dy - dot_r, dx + dot_r, dy + dot_r], fill=dot_fill
            )
