from dataclasses import dataclass


@dataclass(frozen=True)
class ExportArtifact:
    """A named byte blob ready to be shared or downloaded."""

    data: bytes
    mime_type: str
    file_name: str
