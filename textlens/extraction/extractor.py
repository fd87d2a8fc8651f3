"""Mode-aware text extraction over a pluggable OCR / vision client."""

import asyncio
from pathlib import Path

from textlens.extraction.base import BaseExtractor
from textlens.extraction.client_base import BaseExtractionClient
from textlens.extraction.exceptions import (
    ExtractionError,
    ExtractionFailedError,
    InvalidInputError,
)
from textlens.extraction.models import ExtractionMode, ExtractionResult
from textlens.extraction.prompt_loader import load_instruction
from textlens.logging.logger import Log
from textlens.pipeline.file_types import infer_mime_type
from textlens.pipeline.models import NormalizedAsset, UploadedAsset


class Extractor(BaseExtractor):
    """Sends one image plus a mode instruction to the backend and returns its text.

    The backend output is returned verbatim. Code fences or other markers the
    backend adds despite the instruction are not stripped.
    """

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.0,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._instructions = {mode: load_instruction(mode, prompt_dir) for mode in ExtractionMode}

    async def extract(
        self,
        asset: NormalizedAsset | UploadedAsset,
        mode: ExtractionMode,
    ) -> ExtractionResult:
        image_bytes = _asset_bytes(asset)
        if not image_bytes:
            raise InvalidInputError(f"File '{asset.file_name}' is empty")
        mime_type = infer_mime_type(asset.mime_type, asset.file_name)
        instruction = self._instructions[mode]
        Log.debug(f"Extraction instruction ({mode.value}):\n{instruction}")

        raw_text = await asyncio.to_thread(self._call_backend, instruction, image_bytes, mime_type)
        Log.debug(f"Backend raw response:\n{raw_text}")
        Log.info(f"Extracted {len(raw_text)} chars from {asset.file_name} in {mode.value} mode")
        return ExtractionResult(text=raw_text)

    def _call_backend(self, instruction: str, image_bytes: bytes, mime_type: str) -> str:
        try:
            return self._client.recognize(
                model=self._model,
                temperature=self._temperature,
                instruction=instruction,
                image_bytes=image_bytes,
                mime_type=mime_type,
            )
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionFailedError(f"Extraction backend failed: {exc}") from exc


def _asset_bytes(asset: NormalizedAsset | UploadedAsset) -> bytes:
    if isinstance(asset, NormalizedAsset):
        return asset.data
    return asset.raw_bytes
