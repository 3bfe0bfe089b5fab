from __future__ import annotations
from typing import Dict
import streamlit as st
from bead_pattern.options import RenderOptions
from bead_pattern.palette import HEX_COLOR_SYSTEM, HexResolver
from bead_pattern.types import ColorSystem, ColorSystemResolver

# Hosts with vendor tables register PaletteResolver instances here.
RESOLVER_REGISTRY: Dict[ColorSystem, ColorSystemResolver] = {
    HEX_COLOR_SYSTEM: HexResolver(),
}


def seed_section(key: str) -> int:
    st.subheader("Random seed")
    return st.number_input("Random seed", min_value=0, value=0, key=key)


def color_system_section(current: ColorSystem) -> ColorSystem:
    st.subheader("Color System")
    names = list(RESOLVER_REGISTRY.keys())
    # Fallback to first if current system missing (hot reload)
    index = names.index(current) if current in names else 0
    return st.selectbox("Color System", names, index=index, key="color_system")


def render_options_section(current: RenderOptions) -> RenderOptions:
    st.subheader("Grid")
    show_grid = st.checkbox("Group separators", value=current.show_grid, key="show_grid")
    grid_interval = st.number_input(
        "Separator interval",
        min_value=1,
        max_value=50,
        value=current.grid_interval,
        key="grid_interval",
    )
    grid_line_color = st.color_picker(
        "Separator color", value=current.grid_line_color, key="grid_line_color"
    )
    show_coordinates = st.checkbox(
        "Axis labels", value=current.show_coordinates, key="show_coordinates"
    )
    st.subheader("Legend")
    include_stats = st.checkbox(
        "Color usage legend", value=current.include_stats, key="include_stats"
    )
    return RenderOptions(
        show_grid=show_grid,
        grid_interval=int(grid_interval),
        show_coordinates=show_coordinates,
        grid_line_color=grid_line_color,
        include_stats=include_stats,
        title=current.title,
        subtitle=current.subtitle,
        usage_hint=current.usage_hint,
    )


__all__ = [
    "RESOLVER_REGISTRY",
    "color_system_section",
    "render_options_section",
    "seed_section",
]
