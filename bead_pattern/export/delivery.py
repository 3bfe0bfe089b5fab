"""Artifact delivery ports.

Delivery is split into a small port interface with two implementations:

* :class:`BrowserPreviewPort` opens a preview document in a new browsing
    context (a browser tab). Openers that refuse raise ``DeliveryBlocked``.
* :class:`FileDownloadPort` writes the artifact straight into a directory.

:class:`ImageDelivery` picks between them with an injected capability
predicate, falling back to the download port whenever the preview is
unsupported or blocked. The embedding host decides which ports and which
predicate to wire in; nothing here sniffs the environment on its own.
"""

from __future__ import annotations

import logging
import os
import tempfile
import webbrowser
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Protocol, Union

from bead_pattern.errors import DeliveryBlocked, DeliveryFailure
from bead_pattern.export.artifact import Artifact, build_preview_document
from bead_pattern.types import CapabilityFn, DeliveryStrategy

logger = logging.getLogger(__name__)

# Opens a URL in a new browsing context; returns False when refused.
OpenerFn = Callable[[str], bool]

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class DeliveryResult:
    strategy: DeliveryStrategy
    location: str


class DeliveryPort(Protocol):
    """Hands a finished artifact to the user."""

    def deliver(self, artifact: Artifact) -> DeliveryResult:
        """Deliver ``artifact``.

        Raises ``DeliveryBlocked`` if refused and ``DeliveryFailure`` if the
        artifact could not be written.
        """
        ...


def write_atomic(directory: PathLike, filename: str, data: bytes) -> Path:
    """Write ``data`` to ``directory/filename`` via a temp file and rename.

    The temp file never outlives the call.

    Raises:
        DeliveryFailure: The directory or file could not be written.
    """
    target_dir = Path(directory)
    target = target_dir / filename
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=target_dir, prefix=".", suffix=".part")
    except OSError as e:
        raise DeliveryFailure(f"Cannot write to {target_dir}: {e}") from e
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp_name, target)
    except OSError as e:
        raise DeliveryFailure(f"Cannot write {target}: {e}") from e
    finally:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
    return target


class FileDownloadPort:
    """Writes artifacts into ``directory`` under their own file names."""

    directory: Path

    def __init__(self, directory: PathLike):
        self.directory = Path(directory)

    def deliver(self, artifact: Artifact) -> DeliveryResult:
        path = write_atomic(self.directory, artifact.filename, artifact.data)
        logger.info("Saved %s", path)
        return DeliveryResult(strategy=DeliveryStrategy.DOWNLOAD, location=str(path))


class BrowserPreviewPort:
    """Writes a preview page next to the artifact and opens it.

    Attributes:
        directory: Where the preview page is written.
        opener: Callable opening a URL in a new context, ``webbrowser.open_new_tab``
            by default.
        title: Page title.
    """

    directory: Path
    opener: OpenerFn
    title: str

    def __init__(
        self,
        directory: PathLike,
        opener: Optional[OpenerFn] = None,
        title: str = "Bead Pattern",
    ):
        self.directory = Path(directory)
        self.opener = opener or webbrowser.open_new_tab
        self.title = title

    def deliver(self, artifact: Artifact) -> DeliveryResult:
        document = build_preview_document(artifact, title=self.title)
        page = write_atomic(
            self.directory,
            f"{Path(artifact.filename).stem}.html",
            document.encode("utf-8"),
        )
        url = page.resolve().as_uri()
        if not self.opener(url):
            # a refused preview leaves nothing behind
            page.unlink(missing_ok=True)
            raise DeliveryBlocked(f"Could not open a browser tab for {url}")
        logger.info("Opened preview %s", url)
        return DeliveryResult(strategy=DeliveryStrategy.PREVIEW, location=url)


def browser_available() -> bool:
    """Default capability predicate: is a web browser registered?"""
    try:
        webbrowser.get()
    except webbrowser.Error:
        return False
    return True


class ImageDelivery:
    """Chooses preview or download for a finished artifact."""

    preview: DeliveryPort
    download: DeliveryPort
    can_open_context: CapabilityFn

    def __init__(
        self,
        preview: DeliveryPort,
        download: DeliveryPort,
        can_open_context: CapabilityFn = browser_available,
    ):
        self.preview = preview
        self.download = download
        self.can_open_context = can_open_context

    def deliver(self, artifact: Artifact) -> DeliveryResult:
        if self.can_open_context():
            try:
                return self.preview.deliver(artifact)
            except DeliveryBlocked as e:
                logger.warning("Preview blocked, falling back to download: %s", e)
        else:
            logger.debug("Preview unsupported, delivering %s directly", artifact.filename)
        return self.download.deliver(artifact)
