from abc import ABC, abstractmethod


class BaseImageConverter(ABC):
    """Contract for all HEIC/HEIF decoding adapters."""

    @abstractmethod
    def to_jpeg(self, image_bytes: bytes, quality: float) -> bytes:
        """Re-encode image bytes as JPEG.

        Args:
            image_bytes: Raw HEIC/HEIF file content.
            quality: JPEG quality factor in the range (0, 1].

        Returns:
            JPEG-encoded bytes.

        Raises:
            ConversionError: if decoding or encoding fails for any reason.
        """
