class ExtractionError(Exception):
    """Base exception for all text extraction errors."""


class InvalidInputError(ExtractionError):
    """Raised when the image payload is empty or in a format the backend rejects."""


class ExtractionFailedError(ExtractionError):
    """Raised when the backend call fails or returns no usable text."""


class ExtractionNetworkError(ExtractionFailedError):
    """Raised when the backend call fails due to network/infrastructure issues."""
