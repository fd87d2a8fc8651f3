import io

import pytesseract
from PIL import Image, UnidentifiedImageError

from textlens.extraction.client_base import BaseExtractionClient
from textlens.extraction.exceptions import ExtractionFailedError, InvalidInputError


class TesseractAdapter(BaseExtractionClient):
    """Local OCR through the Tesseract engine.

    Tesseract cannot follow instructions: model, temperature and instruction
    are ignored, and tabular requests return the same plain recognition text.
    """

    def __init__(self, lang: str = "eng+tha") -> None:
        self._lang = lang

    def recognize(
        self,
        *,
        model: str,
        temperature: float,
        instruction: str,
        image_bytes: bytes,
        mime_type: str,
    ) -> str:
        _ = model, temperature, instruction, mime_type
        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                return pytesseract.image_to_string(image.convert("RGB"), lang=self._lang)
        except UnidentifiedImageError as exc:
            raise InvalidInputError(f"Tesseract cannot read this image: {exc}") from exc
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError) as exc:
            raise ExtractionFailedError(f"Tesseract OCR failed: {exc}") from exc
