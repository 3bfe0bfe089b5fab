"""Adapters implementing :class:`~bead_pattern.types.ColorSystemResolver`.

The actual vendor lookup tables live outside this package; hosts inject them
through :class:`PaletteResolver`. :class:`HexResolver` needs no tables and
labels each color with its own hex digits.
"""

from typing import Dict, Mapping

from bead_pattern.types import ColorSystem, HexColor

HEX_COLOR_SYSTEM: ColorSystem = "hex"


class HexResolver:
    """Labels a color by its hex digits, without the leading ``#``."""

    def display_key(self, hex_color: HexColor, color_system: ColorSystem) -> str:
        return hex_color.lstrip("#").upper()

    def key_for_hex(self, hex_color: HexColor, color_system: ColorSystem) -> str:
        return hex_color.upper()


class PaletteResolver:
    """Looks colors up in per-system tables of ``#RRGGBB -> key``.

    Colors missing from the table (or systems without a table) resolve to
    ``fallback``.
    """

    tables: Dict[ColorSystem, Dict[HexColor, str]]
    fallback: str

    def __init__(
        self,
        tables: Mapping[ColorSystem, Mapping[HexColor, str]],
        fallback: str = "?",
    ):
        self.tables = {
            system: {hex_color.upper(): key for hex_color, key in table.items()}
            for system, table in tables.items()
        }
        self.fallback = fallback

    def display_key(self, hex_color: HexColor, color_system: ColorSystem) -> str:
        return self.tables.get(color_system, {}).get(hex_color.upper(), self.fallback)

    def key_for_hex(self, hex_color: HexColor, color_system: ColorSystem) -> str:
        return self.display_key(hex_color, color_system)
