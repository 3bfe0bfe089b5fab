import streamlit as st

from .session import load_pattern_and_reset
from .sources import csv_source  # noqa: F401  (registers sources)
from .sources.sample_source import default_sample_config
from .sources.base import PatternSource, pattern_sources, source_for
from .shared_ui import RESOLVER_REGISTRY, color_system_section, render_options_section
from .types import AppConfig, ExportConfig

__all__ = [
    "AppConfig",
    "ExportConfig",
    "PatternSource",
    "RESOLVER_REGISTRY",
    "load_pattern_and_reset",
    "set_default_config",
    "get_config_from_widgets",
    "get_export_config_from_widgets",
]


def set_default_config() -> None:
    st.session_state.setdefault("config", default_sample_config())
    st.session_state.setdefault("export_config", ExportConfig())


def get_config_from_widgets() -> AppConfig:
    current: AppConfig = st.session_state["config"]
    sources = pattern_sources()
    active = source_for(current) or sources[0]
    chosen: PatternSource = st.radio(
        "Pattern source",
        sources,
        index=sources.index(active),
        format_func=lambda s: s.label,
        horizontal=True,
        key="pattern_source",
    )
    # switching sources starts from that source's defaults
    base = current if chosen is active else chosen.default_config()
    return chosen.build_config(base)


def get_export_config_from_widgets() -> ExportConfig:
    current: ExportConfig = st.session_state["export_config"]
    return ExportConfig(
        options=render_options_section(current.options),
        color_system=color_system_section(current.color_system),
    )
