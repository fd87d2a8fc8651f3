from typing import Literal

from textlens.export.base import BaseWorkbookEncoder
from textlens.export.exceptions import ExportFailedError, WorkbookEncodingError
from textlens.export.models import ExportArtifact
from textlens.extraction.models import ExtractionMode, ExtractionResult
from textlens.logging.logger import Log
from textlens.tabular.parser import parse

TEXT_MIME_TYPE = "text/plain; charset=utf-8"
CSV_MIME_TYPE = "text/csv; charset=utf-8"
XLSX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class ExportBuilder:
    """Turns an extraction result into a downloadable artifact.

    Tabular results become an .xlsx workbook or a .csv file depending on
    tabular_format; a workbook that fails to encode falls back to CSV.
    """

    TEXT_FILE_NAME = "extracted_text.txt"
    CSV_FILE_NAME = "extracted_data.csv"
    XLSX_FILE_NAME = "extracted_data.xlsx"

    def __init__(
        self,
        workbook_encoder: BaseWorkbookEncoder,
        tabular_format: Literal["xlsx", "csv"] = "xlsx",
    ) -> None:
        self._workbook_encoder = workbook_encoder
        self._tabular_format = tabular_format

    def build(self, result: ExtractionResult, mode: ExtractionMode) -> ExportArtifact:
        """Build the export artifact for the given mode.

        Raises:
            ExportFailedError: if the result is empty or every encoding fails.
        """
        if not result.text:
            raise ExportFailedError("Nothing to export: extracted text is empty")
        if mode is ExtractionMode.PLAIN_TEXT:
            return self._text_artifact(result.text)
        if self._tabular_format == "xlsx":
            try:
                return self._workbook_artifact(result.text)
            except WorkbookEncodingError as exc:
                Log.warning(f"Workbook export failed, falling back to CSV: {exc}")
        return self._csv_artifact(result.text)

    def _text_artifact(self, text: str) -> ExportArtifact:
        return ExportArtifact(
            data=self._encode_text(text),
            mime_type=TEXT_MIME_TYPE,
            file_name=self.TEXT_FILE_NAME,
        )

    def _workbook_artifact(self, text: str) -> ExportArtifact:
        data = self._workbook_encoder.encode(parse(text))
        Log.info(f"Built workbook export ({len(data)} bytes)")
        return ExportArtifact(data=data, mime_type=XLSX_MIME_TYPE, file_name=self.XLSX_FILE_NAME)

    def _csv_artifact(self, text: str) -> ExportArtifact:
        return ExportArtifact(
            data=self._encode_text(text),
            mime_type=CSV_MIME_TYPE,
            file_name=self.CSV_FILE_NAME,
        )

    @staticmethod
    def _encode_text(text: str) -> bytes:
        try:
            return text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ExportFailedError(f"Text export failed: {exc}") from exc
