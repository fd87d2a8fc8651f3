class DeliveryError(Exception):
    """Base exception for clipboard, share and download errors."""


class ShareCancelledError(DeliveryError):
    """Raised by share targets when the user dismisses the share sheet."""


class ClipboardError(DeliveryError):
    """Raised when text cannot be placed on the clipboard."""
