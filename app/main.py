import logging
import streamlit as st

from config import (
    AppConfig,
    ExportConfig,
    RESOLVER_REGISTRY,
    set_default_config,
    get_config_from_widgets,
    get_export_config_from_widgets,
    load_pattern_and_reset,
)
from delivery import StreamlitDownloadPort, StreamlitPreviewPort
from bead_pattern.errors import ExportError
from bead_pattern.export import ImageDelivery, build_csv_artifact, export_image

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s"
)

st.set_page_config(layout="wide", page_title="Bead Pattern")


# --------- Main App ---------

set_default_config()
tab_pattern, tab_source, tab_export = st.tabs(["Pattern", "Source", "Export"])

with tab_source:
    config: AppConfig = get_config_from_widgets()
    st.session_state["config"] = config

    if st.button("Load", key="load_pattern_btn", use_container_width=True):
        load_pattern_and_reset(config)
    st.divider()

with tab_export:
    export_config: ExportConfig = get_export_config_from_widgets()
    st.session_state["export_config"] = export_config
    st.divider()

with tab_pattern:
    if "grid" not in st.session_state:
        load_pattern_and_reset(st.session_state["config"])

    grid = st.session_state.get("grid")
    tally = st.session_state.get("tally")
    total = st.session_state.get("total")
    current: ExportConfig = st.session_state["export_config"]

    left_col, right_col = st.columns([0.75, 0.25])

    with right_col:
        if grid is not None:
            st.info(f"**Size:** {grid.width} x {grid.height}", icon="📐")
            st.info(f"**Colors:** {len(tally)}", icon="🎨")
            st.info(f"**Beads:** {total}", icon="🧮")
        show_preview = st.toggle("Inline preview", value=True, key="inline_preview")
        st.divider()
        try:
            csv_artifact = build_csv_artifact(grid, current.color_system)
        except ExportError as e:
            st.error(e.user_message)
        else:
            StreamlitDownloadPort(key="csv_download_btn").deliver(csv_artifact)

    with left_col:
        delivery = ImageDelivery(
            preview=StreamlitPreviewPort(),
            download=StreamlitDownloadPort(key="png_download_btn"),
            can_open_context=lambda: show_preview,
        )
        try:
            export_image(
                grid,
                tally,
                current.options,
                current.color_system,
                RESOLVER_REGISTRY[current.color_system],
                delivery,
                total=total,
            )
        except ExportError as e:
            st.error(e.user_message)
