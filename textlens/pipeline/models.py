from dataclasses import dataclass
from enum import Enum

from textlens.extraction.models import ExtractionMode, ExtractionResult
from textlens.preview.models import PreviewHandle


@dataclass(frozen=True)
class UploadedAsset:
    """A file exactly as the user selected it."""

    raw_bytes: bytes
    mime_type: str
    file_name: str


@dataclass(frozen=True)
class NormalizedAsset:
    """An uploaded file after format normalization (JPEG for HEIC sources)."""

    data: bytes
    mime_type: str
    file_name: str
    converted: bool = False

    @classmethod
    def from_upload(cls, asset: UploadedAsset) -> "NormalizedAsset":
        return cls(data=asset.raw_bytes, mime_type=asset.mime_type, file_name=asset.file_name)


class PipelineState(str, Enum):
    IDLE = "idle"
    AWAITING_PREVIEW = "awaiting_preview"
    EXTRACTING = "extracting"
    READY = "ready"
    FAILED = "failed"


@dataclass
class PipelineSession:
    """Everything the orchestrator holds for the single active upload."""

    state: PipelineState = PipelineState.IDLE
    mode: ExtractionMode = ExtractionMode.PLAIN_TEXT
    uploaded: UploadedAsset | None = None
    normalized: NormalizedAsset | None = None
    preview: PreviewHandle | None = None
    result: ExtractionResult | None = None
    error_message: str = ""
    warning_message: str = ""
    token: int = 0

    @property
    def extraction_asset(self) -> NormalizedAsset | UploadedAsset | None:
        """Asset fed to the extraction backend: normalized if available, else the original."""
        if self.normalized is not None:
            return self.normalized
        return self.uploaded

    def clear(self) -> None:
        """Drop the held assets and results, keeping the mode and token counter."""
        self.state = PipelineState.IDLE
        self.uploaded = None
        self.normalized = None
        self.preview = None
        self.result = None
        self.error_message = ""
        self.warning_message = ""
