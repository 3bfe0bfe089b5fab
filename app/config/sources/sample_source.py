from __future__ import annotations

import colorsys
import random
from dataclasses import dataclass
from typing import List

import streamlit as st

from bead_pattern.grid import Cell, Grid
from .base import PatternSource, register_pattern_source
from ..shared_ui import seed_section


@dataclass(frozen=True)
class SampleConfig:
    width: int
    height: int
    num_colors: int
    seed: int


def _palette(num_colors: int, seed: int) -> List[str]:
    rng = random.Random(seed)
    colors: List[str] = []
    for _ in range(num_colors):
        r, g, b = colorsys.hsv_to_rgb(rng.random(), 0.5 + 0.4 * rng.random(), 0.6 + 0.4 * rng.random())
        colors.append(f"#{int(r * 255):02X}{int(g * 255):02X}{int(b * 255):02X}")
    return colors


def generate_sample(cfg: SampleConfig) -> Grid:
    """Concentric color bands inside an ellipse; the corners stay transparent."""
    colors = _palette(max(1, cfg.num_colors), cfg.seed)
    cx, cy = (cfg.width - 1) / 2, (cfg.height - 1) / 2
    rx, ry = max(cx, 0.5), max(cy, 0.5)
    rows: List[List[Cell]] = []
    for y in range(cfg.height):
        row: List[Cell] = []
        for x in range(cfg.width):
            d = ((x - cx) / rx) ** 2 + ((y - cy) / ry) ** 2
            if d > 1.0:
                row.append(Cell.external())
            else:
                band = min(len(colors) - 1, int(d * len(colors)))
                row.append(Cell.from_hex(colors[band]))
        rows.append(row)
    return Grid.from_rows(rows)


def build_sample_config(current: SampleConfig) -> SampleConfig:
    st.caption("Generate a synthetic pattern to try the exporter.")
    width_col, height_col = st.columns(2)
    with width_col:
        width = st.number_input("Width", min_value=1, max_value=200, value=current.width, key="sample_width")
    with height_col:
        height = st.number_input("Height", min_value=1, max_value=200, value=current.height, key="sample_height")
    num_colors = st.slider("Colors", min_value=1, max_value=24, value=current.num_colors, key="sample_colors")
    seed = seed_section(key="sample_seed")
    return SampleConfig(width=int(width), height=int(height), num_colors=num_colors, seed=int(seed))


def default_sample_config() -> SampleConfig:
    return SampleConfig(width=29, height=29, num_colors=6, seed=0)


register_pattern_source(
    PatternSource(
        label="Generated sample",
        config_type=SampleConfig,
        default_config=default_sample_config,
        build_config=build_sample_config,
        load_grid=generate_sample,
    )
)
