class ExportError(Exception):
    """Base exception for all export errors."""


class WorkbookEncodingError(ExportError):
    """Raised when a grid cannot be encoded as a spreadsheet workbook."""


class ExportFailedError(ExportError):
    """Raised when no export artifact could be produced."""
