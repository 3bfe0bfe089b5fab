"""Color helpers shared by the renderer and the legend.

Functions here are pure and operate on ``#RRGGBB`` strings (shorthand
``#RGB`` is accepted by :func:`hex_to_rgb`).
"""

import re
from functools import cmp_to_key
from typing import Iterable, List, Optional

from bead_pattern.types import RGB, HexColor

_SHORTHAND_RE = re.compile(r"^#?([a-f\d])([a-f\d])([a-f\d])$", re.IGNORECASE)
_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)
_COLOR_KEY_RE = re.compile(r"^([A-Z]+)(\d+)$")

BLACK: HexColor = "#000000"
WHITE: HexColor = "#FFFFFF"


def hex_to_rgb(hex_color: str) -> Optional[RGB]:
    """Parse ``#RRGGBB`` / ``#RGB`` (``#`` optional). ``None`` if malformed."""
    short = _SHORTHAND_RE.match(hex_color)
    if short:
        hex_color = "".join(c * 2 for c in short.groups())
    match = _HEX_RE.match(hex_color)
    if match is None:
        return None
    r, g, b = (int(part, 16) for part in match.groups())
    return r, g, b


def relative_luma(rgb: RGB) -> float:
    """Rec. 709 luma in [0, 1]."""
    r, g, b = rgb
    return (0.2126 * r + 0.7152 * g + 0.0722 * b) / 255


def get_contrast_color(hex_color: str) -> HexColor:
    """Black text on light colors, white text on dark ones.

    Unparseable input yields black.
    """
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        return BLACK
    return BLACK if relative_luma(rgb) > 0.5 else WHITE


def compare_color_keys(a: str, b: str) -> int:
    """Order keys like ``A2 < A10 < B1``.

    Keys of the form ``<LETTERS><DIGITS>`` compare by prefix, then by the
    numeric suffix. Any other pair compares lexicographically.
    """
    match_a = _COLOR_KEY_RE.match(a)
    match_b = _COLOR_KEY_RE.match(b)
    if match_a and match_b:
        prefix_a, num_a = match_a.group(1), int(match_a.group(2))
        prefix_b, num_b = match_b.group(1), int(match_b.group(2))
        if prefix_a != prefix_b:
            return -1 if prefix_a < prefix_b else 1
        return num_a - num_b
    if a == b:
        return 0
    return -1 if a < b else 1


def sort_color_keys(keys: Iterable[str]) -> List[str]:
    return sorted(keys, key=cmp_to_key(compare_color_keys))
