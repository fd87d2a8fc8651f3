from abc import ABC, abstractmethod

from textlens.extraction.models import ExtractionMode, ExtractionResult
from textlens.pipeline.models import NormalizedAsset, UploadedAsset


class BaseExtractor(ABC):
    """Contract for all text extraction services."""

    @abstractmethod
    async def extract(
        self,
        asset: NormalizedAsset | UploadedAsset,
        mode: ExtractionMode,
    ) -> ExtractionResult:
        """Extract text from an image asset.

        Args:
            asset: Normalized asset, or the original upload when conversion failed.
            mode: Selects plain text or CSV output.

        Returns:
            ExtractionResult carrying the backend's raw text.

        Raises:
            InvalidInputError: if the asset carries no bytes.
            ExtractionFailedError: on any backend failure.
        """
