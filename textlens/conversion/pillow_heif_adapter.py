import io

import pillow_heif
from PIL import Image

from textlens.conversion.base import BaseImageConverter
from textlens.conversion.exceptions import ConversionError

pillow_heif.register_heif_opener()


class PillowHeifAdapter(BaseImageConverter):
    """Decodes HEIC/HEIF with pillow-heif and re-encodes as JPEG with Pillow."""

    def to_jpeg(self, image_bytes: bytes, quality: float) -> bytes:
        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                buf = io.BytesIO()
                image.convert("RGB").save(buf, format="JPEG", quality=_pillow_quality(quality))
            return buf.getvalue()
        except Exception as exc:
            raise ConversionError(f"HEIC conversion failed: {exc}") from exc


def _pillow_quality(quality: float) -> int:
    return max(1, min(95, round(quality * 100)))
