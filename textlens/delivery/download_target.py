from pathlib import Path

from textlens.delivery.base import BaseDownloadTarget
from textlens.delivery.exceptions import DeliveryError
from textlens.export.models import ExportArtifact
from textlens.logging.logger import Log


class DirectoryDownloadTarget(BaseDownloadTarget):
    """Writes artifacts into a download directory, never overwriting existing files."""

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    def save(self, artifact: ExportArtifact) -> Path:
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            path = self._free_path(artifact.file_name)
            path.write_bytes(artifact.data)
        except OSError as exc:
            raise DeliveryError(f"Failed to save {artifact.file_name}: {exc}") from exc
        Log.info(f"Saved {len(artifact.data)} bytes to {path}")
        return path

    def _free_path(self, file_name: str) -> Path:
        path = self._directory / file_name
        stem, suffix = Path(file_name).stem, Path(file_name).suffix
        counter = 1
        while path.exists():
            path = self._directory / f"{stem} ({counter}){suffix}"
            counter += 1
        return path
