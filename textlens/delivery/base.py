from abc import ABC, abstractmethod
from pathlib import Path

from textlens.export.models import ExportArtifact


class BaseClipboard(ABC):
    """Contract for clipboard adapters."""

    @abstractmethod
    def copy(self, text: str) -> None:
        """Place text on the clipboard.

        Raises:
            ClipboardError: if the clipboard is unavailable.
        """


class BaseShareTarget(ABC):
    """Contract for platform share sheets."""

    @abstractmethod
    def can_share_files(self) -> bool:
        """Whether share_file() is supported on this platform."""

    @abstractmethod
    def can_share_text(self) -> bool:
        """Whether share_text() is supported on this platform."""

    @abstractmethod
    def share_file(self, artifact: ExportArtifact, *, title: str, text: str) -> None:
        """Share a file artifact.

        Raises:
            ShareCancelledError: if the user dismissed the share sheet.
            DeliveryError: on any other failure.
        """

    @abstractmethod
    def share_text(self, text: str, *, title: str) -> None:
        """Share plain text.

        Raises:
            ShareCancelledError: if the user dismissed the share sheet.
            DeliveryError: on any other failure.
        """


class BaseDownloadTarget(ABC):
    """Contract for saving artifacts locally."""

    @abstractmethod
    def save(self, artifact: ExportArtifact) -> Path:
        """Store the artifact and return where it was written."""
