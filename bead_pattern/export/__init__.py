"""Artifact serialization and delivery.

The raster path encodes a rendered sheet as an embedded-data PNG and hands it
to a delivery port; the CSV path writes the text encoding locally.
"""

from .artifact import Artifact, build_preview_document, encode_png
from .delivery import (
    BrowserPreviewPort,
    DeliveryPort,
    DeliveryResult,
    FileDownloadPort,
    ImageDelivery,
    browser_available,
)
from .pipeline import (
    build_csv_artifact,
    csv_filename,
    export_csv,
    export_image,
    image_filename,
    render_png,
)

__all__ = [
    "Artifact",
    "BrowserPreviewPort",
    "DeliveryPort",
    "DeliveryResult",
    "FileDownloadPort",
    "ImageDelivery",
    "browser_available",
    "build_csv_artifact",
    "build_preview_document",
    "csv_filename",
    "encode_png",
    "export_csv",
    "export_image",
    "image_filename",
    "render_png",
]
