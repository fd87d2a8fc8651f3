from textlens.config.settings import Settings
from textlens.conversion.converter import FormatConverter
from textlens.conversion.pillow_heif_adapter import PillowHeifAdapter


class FormatConverterFactory:
    """Creates the format converter with the configured JPEG quality."""

    @classmethod
    def create(cls, settings: Settings) -> FormatConverter:
        return FormatConverter(
            image_converter=PillowHeifAdapter(),
            quality=settings.heic_jpeg_quality,
        )
