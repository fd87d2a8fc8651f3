import io

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.worksheet.worksheet import Worksheet

from textlens.export.base import BaseWorkbookEncoder
from textlens.export.exceptions import WorkbookEncodingError
from textlens.tabular.parser import Grid, split_header

_FORMULA_PREFIX = "="


class OpenpyxlWorkbookEncoder(BaseWorkbookEncoder):
    """Writes .xlsx workbooks with openpyxl.

    Every field is stored as text; a field starting with '=' stays a literal
    string instead of becoming a formula.
    """

    SHEET_TITLE = "Sheet1"

    def encode(self, grid: Grid) -> bytes:
        try:
            workbook = Workbook()
            sheet = workbook.active
            sheet.title = self.SHEET_TITLE
            header, body = split_header(grid)
            if header:
                _append_text_row(sheet, header)
                for cell in sheet[1]:
                    cell.font = Font(bold=True)
            for row in body:
                _append_text_row(sheet, row)
            buf = io.BytesIO()
            workbook.save(buf)
            return buf.getvalue()
        except Exception as exc:
            raise WorkbookEncodingError(f"openpyxl encoding failed: {exc}") from exc


def _append_text_row(sheet: Worksheet, row: list[str]) -> None:
    sheet.append(row)
    for cell in sheet[sheet.max_row]:
        if isinstance(cell.value, str) and cell.value.startswith(_FORMULA_PREFIX):
            cell.data_type = "s"
