"""Render options for pattern export.

``RenderOptions`` is a frozen value object; hosts build it from their own
widgets or from a plain mapping (``from_mapping``) which accepts both the
snake_case field names and the camelCase keys used by web hosts.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping

from bead_pattern.errors import InputInvalid
from bead_pattern.grid import HEX_COLOR_RE

DEFAULT_GRID_INTERVAL = 10
DEFAULT_GRID_LINE_COLOR = "#555555"
DEFAULT_TITLE = "Bead Pattern"
DEFAULT_SUBTITLE = "Bead pattern sheet"
DEFAULT_USAGE_HINT = "Tip: long-press the sheet to save it to your photos"

_CAMEL_TO_FIELD: Dict[str, str] = {
    "showGrid": "show_grid",
    "gridInterval": "grid_interval",
    "showCoordinates": "show_coordinates",
    "gridLineColor": "grid_line_color",
    "includeStats": "include_stats",
    "usageHint": "usage_hint",
}


@dataclass(frozen=True)
class RenderOptions:
    """Options controlling the annotated raster.

    Attributes:
        show_grid: Draw separator lines every ``grid_interval`` cells.
        grid_interval: Separator / axis label spacing, clamped to >= 1.
        show_coordinates: Draw axis label bands on all four sides.
        grid_line_color: ``#RRGGBB`` color of the separator lines.
        include_stats: Append the color usage legend.
        title: Title bar primary line.
        subtitle: Title bar secondary line.
        usage_hint: Right-aligned hint in the title bar.
    """

    show_grid: bool = True
    grid_interval: int = DEFAULT_GRID_INTERVAL
    show_coordinates: bool = True
    grid_line_color: str = DEFAULT_GRID_LINE_COLOR
    include_stats: bool = True
    title: str = DEFAULT_TITLE
    subtitle: str = DEFAULT_SUBTITLE
    usage_hint: str = DEFAULT_USAGE_HINT

    def __post_init__(self) -> None:
        # Clamp rather than reject: the planner never fails on options.
        object.__setattr__(self, "grid_interval", max(1, int(self.grid_interval)))
        color = self.grid_line_color.upper()
        if not HEX_COLOR_RE.match(color):
            raise InputInvalid(f"Invalid grid line color: {self.grid_line_color!r}")
        object.__setattr__(self, "grid_line_color", color)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "RenderOptions":
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in mapping.items():
            name = _CAMEL_TO_FIELD.get(key, key)
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)
