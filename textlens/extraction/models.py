from dataclasses import dataclass
from enum import Enum


class ExtractionMode(str, Enum):
    """What the backend is asked to return."""

    PLAIN_TEXT = "text"
    TABULAR = "table"


@dataclass(frozen=True)
class ExtractionResult:
    """Raw backend text: free text for PLAIN_TEXT, CSV for TABULAR."""

    text: str
