import io

import pytest
from openpyxl import load_workbook

from textlens.export.exceptions import WorkbookEncodingError
from textlens.export.openpyxl_adapter import OpenpyxlWorkbookEncoder


class TestOpenpyxlWorkbookEncoder:
    def test_writes_header_and_body(self) -> None:
        data = OpenpyxlWorkbookEncoder().encode([["Item", "Qty"], ["Apple", "3"], ["Pear, ripe", "2"]])

        sheet = load_workbook(io.BytesIO(data)).active
        assert sheet.title == "Sheet1"
        rows = [list(r) for r in sheet.iter_rows(values_only=True)]
        assert rows == [["Item", "Qty"], ["Apple", "3"], ["Pear, ripe", "2"]]
        assert sheet["A1"].font.bold
        assert not sheet["A2"].font.bold

    def test_header_only(self) -> None:
        data = OpenpyxlWorkbookEncoder().encode([["only"]])

        sheet = load_workbook(io.BytesIO(data)).active
        assert [list(r) for r in sheet.iter_rows(values_only=True)] == [["only"]]

    def test_illegal_characters_raise(self) -> None:
        with pytest.raises(WorkbookEncodingError, match="openpyxl encoding failed"):
            OpenpyxlWorkbookEncoder().encode([["bad\x01value"]])

    def test_formula_like_fields_stay_text(self) -> None:
        data = OpenpyxlWorkbookEncoder().encode([["Item", "=Note"], ["Apple", "=Total"]])

        sheet = load_workbook(io.BytesIO(data)).active
        assert sheet["B1"].data_type == "s"
        assert sheet["B1"].value == "=Note"
        assert sheet["B2"].data_type == "s"
        assert sheet["B2"].value == "=Total"
