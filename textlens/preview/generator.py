import base64
import binascii

from textlens.logging.logger import Log
from textlens.pipeline.file_types import is_heic
from textlens.pipeline.models import NormalizedAsset
from textlens.preview.models import PreviewHandle

_DATA_URL_PREFIX = "data:"
_BASE64_MARKER = ";base64,"


class PreviewGenerator:
    """Builds base64 data URLs for normalized images."""

    def preview(self, asset: NormalizedAsset) -> PreviewHandle:
        """Return a data URL preview, or an unavailable handle.

        Empty assets and HEIC bytes that were never converted cannot be shown
        inline, so they yield PreviewHandle(None) instead of an error.
        """
        if not asset.data:
            Log.debug(f"No preview for {asset.file_name}: empty asset")
            return PreviewHandle(None)
        if is_heic(asset.mime_type, asset.file_name):
            Log.debug(f"No preview for {asset.file_name}: unconverted HEIC")
            return PreviewHandle(None)
        mime_type = asset.mime_type or "application/octet-stream"
        payload = base64.b64encode(asset.data).decode("ascii")
        return PreviewHandle(f"{_DATA_URL_PREFIX}{mime_type}{_BASE64_MARKER}{payload}")


def decode_data_url(data_url: str) -> tuple[str, bytes]:
    """Split a base64 data URL back into (mime_type, bytes).

    Raises:
        ValueError: if the string is not a base64 data URL.
    """
    if not data_url.startswith(_DATA_URL_PREFIX) or _BASE64_MARKER not in data_url:
        raise ValueError("Not a base64 data URL")
    header, payload = data_url[len(_DATA_URL_PREFIX):].split(_BASE64_MARKER, 1)
    try:
        return header, base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64 payload: {exc}") from exc
