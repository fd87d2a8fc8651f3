import io
from pathlib import Path

import pillow_heif
import pytest
from PIL import Image

from textlens.config.settings import Settings


@pytest.fixture()
def offline_settings(tmp_path: Path) -> Settings:
    """Settings that keep the whole pipeline local: example backend, in-memory clipboard."""
    return Settings(
        extraction_provider="example",
        clipboard_backend="memory",
        download_dir=str(tmp_path / "downloads"),
    )


@pytest.fixture()
def heic_bytes() -> bytes:
    """A real HEIC image, or skip when libheif was built without an encoder."""
    image = Image.new("RGB", (64, 32), "blue")
    try:
        heif_file = pillow_heif.from_pillow(image)
        buf = io.BytesIO()
        heif_file.save(buf, quality=80)
    except (RuntimeError, ValueError) as e:
        pytest.skip(f"HEIC encoder not available: {e}")
    return buf.getvalue()
