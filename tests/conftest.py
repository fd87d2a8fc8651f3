import io

import pytest
from PIL import Image

from textlens.pipeline.models import UploadedAsset


def _encode(image_format: str, color: str = "white") -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (32, 16), color).save(buf, format=image_format)
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    """A small valid PNG image."""
    return _encode("PNG")


@pytest.fixture()
def jpeg_bytes() -> bytes:
    """A small valid JPEG image."""
    return _encode("JPEG", "red")


@pytest.fixture()
def png_asset(png_bytes: bytes) -> UploadedAsset:
    return UploadedAsset(raw_bytes=png_bytes, mime_type="image/png", file_name="photo.png")


@pytest.fixture()
def heic_asset() -> UploadedAsset:
    """HEIC-named asset with placeholder bytes; only valid for mocked converters."""
    return UploadedAsset(raw_bytes=b"heic-bytes", mime_type="image/heic", file_name="invoice.heic")
