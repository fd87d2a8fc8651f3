from textlens.conversion.base import BaseImageConverter
from textlens.conversion.exceptions import ConversionError
from textlens.logging.logger import Log
from textlens.pipeline.file_types import is_heic, jpeg_file_name
from textlens.pipeline.models import NormalizedAsset, UploadedAsset


class FormatConverter:
    """Normalizes uploads into an encoding every preview surface can render.

    Only HEIC/HEIF sources are touched; everything else passes through as is.
    """

    JPEG_MIME_TYPE = "image/jpeg"

    def __init__(self, image_converter: BaseImageConverter, quality: float = 0.8) -> None:
        self._image_converter = image_converter
        self._quality = quality

    def convert(self, asset: UploadedAsset) -> NormalizedAsset:
        """Return a JPEG copy of HEIC/HEIF assets, the asset itself otherwise.

        Raises:
            ConversionError: if the asset is empty or the HEIC decoder fails.
        """
        if not asset.raw_bytes:
            raise ConversionError(f"File '{asset.file_name}' is empty")
        if not is_heic(asset.mime_type, asset.file_name):
            return NormalizedAsset.from_upload(asset)

        Log.info(f"Converting {asset.file_name} ({len(asset.raw_bytes)} bytes) to JPEG")
        jpeg_bytes = self._image_converter.to_jpeg(asset.raw_bytes, self._quality)
        if not jpeg_bytes:
            raise ConversionError(f"HEIC conversion of '{asset.file_name}' produced no data")
        return NormalizedAsset(
            data=jpeg_bytes,
            mime_type=self.JPEG_MIME_TYPE,
            file_name=jpeg_file_name(asset.file_name),
            converted=True,
        )
