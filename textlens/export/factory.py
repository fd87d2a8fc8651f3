from textlens.config.settings import Settings
from textlens.export.builder import ExportBuilder
from textlens.export.openpyxl_adapter import OpenpyxlWorkbookEncoder


class ExportBuilderFactory:
    """Creates the export builder with the configured tabular policy."""

    @classmethod
    def create(cls, settings: Settings) -> ExportBuilder:
        return ExportBuilder(
            workbook_encoder=OpenpyxlWorkbookEncoder(),
            tabular_format=settings.export_tabular_format,
        )
