from unittest.mock import MagicMock

import pytest

from textlens.conversion.base import BaseImageConverter
from textlens.conversion.converter import FormatConverter
from textlens.conversion.exceptions import ConversionError
from textlens.pipeline.models import UploadedAsset


def _make_converter(jpeg: bytes = b"jpeg-bytes") -> tuple[FormatConverter, MagicMock]:
    image_converter = MagicMock(spec=BaseImageConverter)
    image_converter.to_jpeg.return_value = jpeg
    return FormatConverter(image_converter=image_converter, quality=0.8), image_converter


class TestNonHeicIsIdentity:
    @pytest.mark.parametrize(
        ("mime_type", "file_name"),
        [("image/png", "photo.png"), ("image/jpeg", "a.jpg"), ("", "scan.webp")],
    )
    def test_returns_same_bytes_mime_and_name(self, mime_type: str, file_name: str) -> None:
        converter, image_converter = _make_converter()
        asset = UploadedAsset(raw_bytes=b"\x89PNG data", mime_type=mime_type, file_name=file_name)

        result = converter.convert(asset)

        assert result.data == asset.raw_bytes
        assert result.mime_type == mime_type
        assert result.file_name == file_name
        assert result.converted is False
        image_converter.to_jpeg.assert_not_called()


class TestHeicConversion:
    def test_returns_jpeg_asset(self, heic_asset: UploadedAsset) -> None:
        converter, image_converter = _make_converter(b"jpeg!")

        result = converter.convert(heic_asset)

        image_converter.to_jpeg.assert_called_once_with(b"heic-bytes", 0.8)
        assert result.data == b"jpeg!"
        assert result.mime_type == "image/jpeg"
        assert result.file_name == "invoice.jpg"
        assert result.converted is True

    def test_detects_heic_by_extension_only(self) -> None:
        converter, _ = _make_converter()
        asset = UploadedAsset(raw_bytes=b"x", mime_type="", file_name="IMG_1.HEIF")

        result = converter.convert(asset)

        assert result.mime_type == "image/jpeg"
        assert result.file_name == "IMG_1.jpg"

    def test_does_not_mutate_original(self, heic_asset: UploadedAsset) -> None:
        converter, _ = _make_converter()

        converter.convert(heic_asset)

        assert heic_asset.raw_bytes == b"heic-bytes"
        assert heic_asset.file_name == "invoice.heic"

    def test_propagates_conversion_error(self, heic_asset: UploadedAsset) -> None:
        converter, image_converter = _make_converter()
        image_converter.to_jpeg.side_effect = ConversionError("bad heic")

        with pytest.raises(ConversionError, match="bad heic"):
            converter.convert(heic_asset)

    def test_empty_output_raises(self, heic_asset: UploadedAsset) -> None:
        converter, _ = _make_converter(b"")

        with pytest.raises(ConversionError, match="no data"):
            converter.convert(heic_asset)


class TestEmptyInput:
    def test_empty_bytes_raise(self) -> None:
        converter, _ = _make_converter()
        asset = UploadedAsset(raw_bytes=b"", mime_type="image/png", file_name="empty.png")

        with pytest.raises(ConversionError, match="empty"):
            converter.convert(asset)
