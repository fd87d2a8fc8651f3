from abc import ABC, abstractmethod


class BaseExtractionClient(ABC):
    """Contract for provider-specific OCR / vision clients."""

    @abstractmethod
    def recognize(
        self,
        *,
        model: str,
        temperature: float,
        instruction: str,
        image_bytes: bytes,
        mime_type: str,
    ) -> str:
        """Return the provider's text for one image, unmodified."""
