from __future__ import annotations

import streamlit as st

from bead_pattern.export import Artifact, DeliveryResult
from bead_pattern.types import DeliveryStrategy


class StreamlitPreviewPort:
    """Shows the sheet inline with a download button underneath."""

    def deliver(self, artifact: Artifact) -> DeliveryResult:
        st.image(artifact.data, use_container_width=True)
        st.caption("Right-click or long-press the sheet to save it.")
        _download_button(artifact, key="preview_download_btn")
        return DeliveryResult(strategy=DeliveryStrategy.PREVIEW, location=artifact.filename)


class StreamlitDownloadPort:
    """Offers the artifact as a download button only."""

    key: str

    def __init__(self, key: str = "download_btn"):
        self.key = key

    def deliver(self, artifact: Artifact) -> DeliveryResult:
        _download_button(artifact, key=self.key)
        return DeliveryResult(strategy=DeliveryStrategy.DOWNLOAD, location=artifact.filename)


def _download_button(artifact: Artifact, key: str) -> None:
    st.download_button(
        f"⬇️ {artifact.filename}",
        data=artifact.data,
        file_name=artifact.filename,
        mime=artifact.mime_type,
        key=key,
        use_container_width=True,
    )
