from __future__ import annotations

import logging

import streamlit as st

from bead_pattern.errors import ExportError
from bead_pattern.grid import tally_colors, total_count

from .types import AppConfig
from .sources.base import source_for

logger = logging.getLogger(__name__)


def load_pattern_and_reset(config: AppConfig) -> None:
    """Load the grid for ``config`` and store it with its tally and total.

    On an ``ExportError`` the previous pattern stays in the session.
    """
    source = source_for(config)
    if source is None:
        raise ValueError(
            f"No registered pattern source for config type: {type(config).__name__}"
        )
    try:
        grid = source.load_grid(config)
    except ExportError as e:
        st.error(e.user_message)
        logger.warning("Pattern load failed: %s", e)
        return
    tally = tally_colors(grid)
    st.session_state["grid"] = grid
    st.session_state["tally"] = tally
    st.session_state["total"] = total_count(tally)
