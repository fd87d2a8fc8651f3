"""Share / download / clipboard fallback chain for extraction results."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from textlens.delivery.base import BaseClipboard, BaseDownloadTarget, BaseShareTarget
from textlens.delivery.exceptions import DeliveryError, ShareCancelledError
from textlens.export.models import ExportArtifact
from textlens.logging.logger import Log


class ShareOutcome(str, Enum):
    SHARED = "shared"
    DOWNLOADED = "downloaded"
    COPIED = "copied"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class ShareReport:
    outcome: ShareOutcome
    path: Path | None = None


class Sharer:
    """Delivers text and export files through the best channel available.

    Files: share sheet if it accepts files, else download. A failing share
    sheet falls back to download; a cancelled one does nothing.
    Text: share sheet if it accepts text, else the clipboard.
    """

    FILE_SHARE_TITLE = "Extracted Data"
    FILE_SHARE_TEXT = "Here is the extracted data."
    TEXT_SHARE_TITLE = "Extracted Text"

    def __init__(
        self,
        share_target: BaseShareTarget,
        download_target: BaseDownloadTarget,
        clipboard: BaseClipboard,
    ) -> None:
        self._share_target = share_target
        self._download_target = download_target
        self._clipboard = clipboard

    def copy(self, text: str) -> None:
        """Copy text to the clipboard.

        Raises:
            ClipboardError: if the clipboard is unavailable.
        """
        self._clipboard.copy(text)
        Log.info(f"Copied {len(text)} chars to clipboard")

    def share_file(self, artifact: ExportArtifact) -> ShareReport:
        if not self._share_target.can_share_files():
            return self.download(artifact)
        try:
            self._share_target.share_file(
                artifact, title=self.FILE_SHARE_TITLE, text=self.FILE_SHARE_TEXT
            )
        except ShareCancelledError:
            Log.info(f"Share of {artifact.file_name} cancelled")
            return ShareReport(ShareOutcome.CANCELLED)
        except DeliveryError as exc:
            Log.warning(f"Share failed, downloading instead: {exc}")
            return self.download(artifact)
        return ShareReport(ShareOutcome.SHARED)

    def share_text(self, text: str) -> ShareReport:
        """Share text, or copy it when the platform cannot share.

        Raises:
            DeliveryError: if the share sheet fails for a reason other than cancellation.
        """
        if not self._share_target.can_share_text():
            self.copy(text)
            return ShareReport(ShareOutcome.COPIED)
        try:
            self._share_target.share_text(text, title=self.TEXT_SHARE_TITLE)
        except ShareCancelledError:
            return ShareReport(ShareOutcome.CANCELLED)
        return ShareReport(ShareOutcome.SHARED)

    def download(self, artifact: ExportArtifact) -> ShareReport:
        """Save the artifact to the download target."""
        path = self._download_target.save(artifact)
        return ShareReport(ShareOutcome.DOWNLOADED, path=path)
