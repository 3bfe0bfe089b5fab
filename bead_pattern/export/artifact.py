"""Self-contained export artifacts.

An :class:`Artifact` is the unit handed to delivery ports: a file name, a
MIME type and the encoded bytes. Raster artifacts can be embedded anywhere as
a ``data:`` URL.
"""

import base64
import html
import io
import logging
from dataclasses import dataclass

from PIL import Image

from bead_pattern.errors import SerializationFailure

logger = logging.getLogger(__name__)

PNG_MIME = "image/png"
CSV_MIME = "text/csv;charset=utf-8"
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@dataclass(frozen=True)
class Artifact:
    filename: str
    mime_type: str
    data: bytes

    def data_url(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


def encode_png(image: Image.Image, filename: str) -> Artifact:
    """Encode ``image`` as PNG.

    Raises:
        SerializationFailure: Pillow failed or produced empty / non-PNG output.
    """
    buffer = io.BytesIO()
    try:
        image.save(buffer, format="PNG")
    except (OSError, ValueError) as e:
        raise SerializationFailure(f"PNG encoding failed: {e}") from e
    data = buffer.getvalue()
    if not data.startswith(PNG_SIGNATURE):
        raise SerializationFailure("PNG encoder produced empty or invalid output")
    logger.debug("Encoded %s (%d bytes)", filename, len(data))
    return Artifact(filename=filename, mime_type=PNG_MIME, data=data)


_PREVIEW_TEMPLATE = """<!doctype html><meta charset="utf-8"><meta name="viewport" content="width=device-width,initial-scale=1">
<title>{title}</title>
<style>
  html,body{{height:100%;margin:0;font-family:system-ui,-apple-system,sans-serif;background:#f5f5f5}}
  .wrap{{display:flex;flex-direction:column;align-items:center;padding:20px;box-sizing:border-box;min-height:100%}}
  img{{max-width:100%;height:auto;box-shadow:0 4px 18px rgba(0,0,0,0.1);border-radius:8px;background:#fff}}
  .tip{{color:#666;margin-top:16px;font-size:14px;text-align:center}}
  .btn{{display:inline-block;margin-top:12px;padding:12px 24px;background:#3b82f6;color:#fff;border-radius:8px;text-decoration:none;font-size:14px}}
  .btn:active{{background:#2563eb}}
</style>
<div class="wrap">
  <img src="{src}" alt="{title}" />
  <p class="tip">Long-press or right-click the image to save it.</p>
  <a class="btn" href="{src}" download="{filename}">Download image</a>
</div>
"""


def build_preview_document(artifact: Artifact, title: str = "Bead Pattern") -> str:
    """Minimal HTML page embedding the image with a save hint and download link."""
    return _PREVIEW_TEMPLATE.format(
        title=html.escape(title),
        src=artifact.data_url(),
        filename=html.escape(artifact.filename, quote=True),
    )
