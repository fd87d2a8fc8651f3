"""Example extraction client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseExtractionClient and register the provider in ExtractorFactory.
"""

from typing import ClassVar

from textlens.extraction.client_base import BaseExtractionClient
from textlens.extraction.models import ExtractionMode
from textlens.extraction.prompt_loader import load_instruction


class ExampleClientAdapter(BaseExtractionClient):
    """Example adapter that returns fixed text without looking at the image.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters. The tabular response is returned only
    for the exact tabular instruction; any other instruction gets plain text.
    """

    PLAIN_TEXT_RESPONSE: ClassVar[str] = "Example extracted text"
    TABULAR_RESPONSE: ClassVar[str] = "Column,Value\nexample,1"

    def __init__(self, tabular_instruction: str | None = None) -> None:
        if tabular_instruction is None:
            tabular_instruction = load_instruction(ExtractionMode.TABULAR)
        self._tabular_instruction = tabular_instruction

    def recognize(
        self,
        *,
        model: str,
        temperature: float,
        instruction: str,
        image_bytes: bytes,
        mime_type: str,
    ) -> str:
        _ = model, temperature, image_bytes, mime_type
        if instruction == self._tabular_instruction:
            return self.TABULAR_RESPONSE
        return self.PLAIN_TEXT_RESPONSE
