"""Common type aliases and the color system resolver contract.

``ColorSystemResolver`` is the seam to the (external) color numbering tables:
the renderer asks it for the label stamped on each cell and for the legend
labels, and never looks at palette data directly.
"""

from enum import StrEnum, auto
from typing import Callable, Protocol, Tuple

ColorSystem = str
HexColor = str
RGB = Tuple[int, int, int]

# Returns True when a new browsing context can be opened reliably.
CapabilityFn = Callable[[], bool]

TRANSPARENT_KEY = "TRANSPARENT"
EXTERNAL_COLOR: HexColor = "#FFFFFF"


class ColorSystemResolver(Protocol):
    """Resolves hex colors to identifiers under a naming scheme."""

    def display_key(self, hex_color: HexColor, color_system: ColorSystem) -> str:
        """Label stamped on a cell of this color."""
        ...

    def key_for_hex(self, hex_color: HexColor, color_system: ColorSystem) -> str:
        """Label shown in the legend for this color."""
        ...


class DeliveryStrategy(StrEnum):
    """How a finished artifact reached the user."""

    PREVIEW = auto()
    DOWNLOAD = auto()
