class PipelineError(Exception):
    """Base exception for all pipeline orchestration errors."""


class UnsupportedFileTypeError(PipelineError):
    """Raised when the selected file is not an image."""


class NothingToExportError(PipelineError):
    """Raised when export, copy or share is requested before any text was extracted."""
