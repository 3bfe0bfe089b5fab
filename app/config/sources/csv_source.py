from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from bead_pattern.csv_codec import decode_bytes
from bead_pattern.errors import EmptyInput
from bead_pattern.grid import Grid
from .base import PatternSource, register_pattern_source


@dataclass(frozen=True)
class CsvConfig:
    filename: Optional[str] = None
    content: Optional[bytes] = None


def build_csv_config(current: CsvConfig) -> CsvConfig:
    st.caption("Import a pattern previously exported as CSV.")
    uploaded = st.file_uploader("Pattern CSV", type=["csv"], key="csv_upload")
    if uploaded is None:
        return current
    return CsvConfig(filename=uploaded.name, content=uploaded.getvalue())


def load_csv_grid(cfg: CsvConfig) -> Grid:
    # uploads are already in memory, so this skips the file read of import_csv
    if cfg.content is None:
        raise EmptyInput("Upload a CSV file to load a pattern.")
    return decode_bytes(cfg.content, source=cfg.filename or "upload").grid


register_pattern_source(
    PatternSource(
        label="CSV import",
        config_type=CsvConfig,
        default_config=CsvConfig,
        build_config=build_csv_config,
        load_grid=load_csv_grid,
    )
)
