from dataclasses import dataclass


@dataclass(frozen=True)
class PreviewHandle:
    """Displayable representation of an image; data_url is None when unavailable."""

    data_url: str | None = None

    @property
    def available(self) -> bool:
        return self.data_url is not None
