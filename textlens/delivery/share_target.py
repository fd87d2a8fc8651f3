from textlens.delivery.base import BaseShareTarget
from textlens.delivery.exceptions import DeliveryError
from textlens.export.models import ExportArtifact


class NoShareTarget(BaseShareTarget):
    """Share target for platforms without a share sheet (terminals, servers).

    Reports no capabilities, so Sharer always takes its fallbacks.
    """

    def can_share_files(self) -> bool:
        return False

    def can_share_text(self) -> bool:
        return False

    def share_file(self, artifact: ExportArtifact, *, title: str, text: str) -> None:
        _ = title, text
        raise DeliveryError(f"Sharing files is not supported here ({artifact.file_name})")

    def share_text(self, text: str, *, title: str) -> None:
        _ = text, title
        raise DeliveryError("Sharing text is not supported here")
