import asyncio

from textlens.config.settings import Settings
from textlens.conversion.converter import FormatConverter
from textlens.conversion.exceptions import ConversionError
from textlens.conversion.factory import FormatConverterFactory
from textlens.delivery.factory import SharerFactory
from textlens.delivery.sharer import ShareReport, Sharer
from textlens.export.builder import ExportBuilder
from textlens.export.factory import ExportBuilderFactory
from textlens.export.models import ExportArtifact
from textlens.extraction.base import BaseExtractor
from textlens.extraction.exceptions import ExtractionError
from textlens.extraction.factory import ExtractorFactory
from textlens.extraction.models import ExtractionMode, ExtractionResult
from textlens.logging.logger import Log
from textlens.pipeline.exceptions import (
    NothingToExportError,
    PipelineError,
    UnsupportedFileTypeError,
)
from textlens.pipeline.file_types import infer_mime_type, is_image_like
from textlens.pipeline.models import PipelineSession, PipelineState, UploadedAsset
from textlens.preview.generator import PreviewGenerator
from textlens.preview.models import PreviewHandle
from textlens.tabular.parser import Grid, parse


class Orchestrator:
    """Drives one upload through conversion, preview and extraction.

    States: idle -> awaiting_preview -> extracting -> ready, with failed
    reachable from extracting. Every upload, mode change and reset takes a
    new sequence token; work started under an older token never touches the
    session, so the last request always wins.
    """

    def __init__(
        self,
        converter: FormatConverter,
        preview_generator: PreviewGenerator,
        extractor: BaseExtractor,
        export_builder: ExportBuilder,
        sharer: Sharer,
        session: PipelineSession | None = None,
    ) -> None:
        self._converter = converter
        self._preview_generator = preview_generator
        self._extractor = extractor
        self._export_builder = export_builder
        self._sharer = sharer
        self._session = session if session is not None else PipelineSession()

    @property
    def session(self) -> PipelineSession:
        return self._session

    @property
    def state(self) -> PipelineState:
        return self._session.state

    async def upload(
        self,
        file_name: str,
        raw_bytes: bytes,
        mime_type: str = "",
    ) -> ExtractionResult | None:
        """Replace the current image and extract text from it.

        Returns the extraction result, or None if a newer request superseded
        this one while it was running.

        Raises:
            UnsupportedFileTypeError: if the file is not an image; state is unchanged.
            ExtractionError: if extraction fails; the session moves to failed.
        """
        if not is_image_like(mime_type, file_name):
            Log.warning(f"Rejected upload {file_name!r} with type {mime_type!r}")
            raise UnsupportedFileTypeError(
                "Please upload an image file (JPG, PNG, HEIC, etc)."
            )

        token = self._next_token()
        self._session.clear()
        asset = UploadedAsset(
            raw_bytes=raw_bytes,
            mime_type=infer_mime_type(mime_type, file_name),
            file_name=file_name,
        )
        self._session.uploaded = asset
        self._transition(PipelineState.AWAITING_PREVIEW)
        Log.info(f"Upload {file_name} ({len(raw_bytes)} bytes, {asset.mime_type or 'unknown type'})")

        try:
            normalized = await asyncio.to_thread(self._converter.convert, asset)
        except ConversionError as exc:
            if self._is_stale(token):
                return None
            Log.warning(f"Conversion of {file_name} failed, extracting from original: {exc}")
            self._session.preview = PreviewHandle(None)
            self._session.warning_message = (
                f"Preview unavailable: {exc}. Attempting to extract text..."
            )
        else:
            if self._is_stale(token):
                return None
            self._session.normalized = normalized
            self._session.preview = self._preview_generator.preview(normalized)

        return await self._extract(token)

    async def change_mode(self, mode: ExtractionMode) -> ExtractionResult | None:
        """Switch extraction mode, re-extracting from the held image if there is one.

        No conversion or preview is redone. Returns None when nothing was
        extracted (same mode, no image yet, or superseded).
        """
        if mode is self._session.mode:
            return None
        self._session.mode = mode
        Log.info(f"Extraction mode set to {mode.value}")
        if self._session.state in (PipelineState.IDLE, PipelineState.AWAITING_PREVIEW):
            # An upload still converting will pick the new mode up on its own.
            return None
        return await self._extract(self._next_token())

    async def retry(self) -> ExtractionResult | None:
        """Re-run extraction on the held image in the current mode."""
        if self._session.extraction_asset is None:
            raise PipelineError("No image to extract from; upload one first")
        return await self._extract(self._next_token())

    def reset(self) -> None:
        """Discard the image, preview and text; any in-flight work is ignored."""
        self._next_token()
        self._session.clear()
        Log.info("Session cleared")

    def grid(self) -> Grid:
        """Rows parsed from the current text; empty unless in tabular mode."""
        result = self._session.result
        if result is None or self._session.mode is not ExtractionMode.TABULAR:
            return []
        return parse(result.text)

    def export(self) -> ExportArtifact:
        """Build the export artifact for the current result and mode.

        Raises:
            NothingToExportError: if no text has been extracted.
            ExportFailedError: if no artifact could be produced.
        """
        return self._export_builder.build(self._require_result(), self._session.mode)

    def download(self) -> ShareReport:
        """Save the export artifact to the download directory."""
        return self._sharer.download(self.export())

    def copy_text(self) -> None:
        """Copy the current text to the clipboard."""
        self._sharer.copy(self._require_result().text)

    def share(self) -> ShareReport:
        """Share the export file in tabular mode, the plain text otherwise."""
        result = self._require_result()
        if self._session.mode is ExtractionMode.TABULAR:
            return self._sharer.share_file(self.export())
        return self._sharer.share_text(result.text)

    async def _extract(self, token: int) -> ExtractionResult | None:
        asset = self._session.extraction_asset
        if asset is None:
            raise PipelineError("No image to extract from; upload one first")
        mode = self._session.mode
        self._session.result = None
        self._session.error_message = ""
        self._transition(PipelineState.EXTRACTING)

        try:
            result = await self._extractor.extract(asset, mode)
        except ExtractionError as exc:
            if self._is_stale(token):
                Log.debug(f"Ignoring failure of superseded request {token}: {exc}")
                return None
            self._session.error_message = f"Failed to extract text: {exc}"
            self._transition(PipelineState.FAILED)
            Log.error(f"Extraction of {asset.file_name} failed: {exc}")
            raise

        if self._is_stale(token):
            Log.debug(f"Ignoring result of superseded request {token}")
            return None
        self._session.result = result
        self._transition(PipelineState.READY)
        return result

    def _require_result(self) -> ExtractionResult:
        if self._session.result is None:
            raise NothingToExportError("No extracted text yet")
        return self._session.result

    def _next_token(self) -> int:
        self._session.token += 1
        return self._session.token

    def _is_stale(self, token: int) -> bool:
        return token != self._session.token

    def _transition(self, state: PipelineState) -> None:
        Log.debug(f"Pipeline state {self._session.state.value} -> {state.value}")
        self._session.state = state


def build_orchestrator(settings: Settings) -> Orchestrator:
    """Build an Orchestrator with all required adapters."""
    return Orchestrator(
        converter=FormatConverterFactory.create(settings),
        preview_generator=PreviewGenerator(),
        extractor=ExtractorFactory.create(settings),
        export_builder=ExportBuilderFactory.create(settings),
        sharer=SharerFactory.create(settings),
    )
