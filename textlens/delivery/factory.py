from pathlib import Path

from textlens.config.settings import Settings
from textlens.delivery.base import BaseClipboard
from textlens.delivery.clipboard import InMemoryClipboard, PyperclipClipboard
from textlens.delivery.download_target import DirectoryDownloadTarget
from textlens.delivery.share_target import NoShareTarget
from textlens.delivery.sharer import Sharer


class SharerFactory:
    """Creates the delivery chain from settings."""

    CLIPBOARDS: dict[str, type[BaseClipboard]] = {
        "system": PyperclipClipboard,
        "memory": InMemoryClipboard,
    }

    @classmethod
    def create(cls, settings: Settings) -> Sharer:
        backend = settings.clipboard_backend.lower()
        clipboard_cls = cls.CLIPBOARDS.get(backend)
        if clipboard_cls is None:
            raise ValueError(
                f"Unknown clipboard backend '{backend}'. Choose from: {list(cls.CLIPBOARDS)}"
            )
        return Sharer(
            share_target=NoShareTarget(),
            download_target=DirectoryDownloadTarget(Path(settings.download_dir)),
            clipboard=clipboard_cls(),
        )
