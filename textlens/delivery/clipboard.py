import pyperclip

from textlens.delivery.base import BaseClipboard
from textlens.delivery.exceptions import ClipboardError


class PyperclipClipboard(BaseClipboard):
    """System clipboard through pyperclip."""

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"Clipboard unavailable: {exc}") from exc


class InMemoryClipboard(BaseClipboard):
    """Keeps the last copied text; for headless runs and tests."""

    def __init__(self) -> None:
        self.text: str | None = None

    def copy(self, text: str) -> None:
        self.text = text
