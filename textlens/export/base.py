from abc import ABC, abstractmethod

from textlens.tabular.parser import Grid


class BaseWorkbookEncoder(ABC):
    """Contract for all spreadsheet encoding adapters."""

    @abstractmethod
    def encode(self, grid: Grid) -> bytes:
        """Encode a grid as a single-sheet workbook.

        Args:
            grid: Rows of fields; row 0 is the header row.

        Returns:
            The workbook file content.

        Raises:
            WorkbookEncodingError: if encoding fails for any reason.
        """
