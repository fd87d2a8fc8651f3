class ConversionError(Exception):
    """Raised when an image cannot be converted into a previewable encoding."""
