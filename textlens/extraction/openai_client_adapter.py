import base64

import httpx
import openai

from textlens.extraction.client_base import BaseExtractionClient
from textlens.extraction.exceptions import (
    ExtractionFailedError,
    ExtractionNetworkError,
    InvalidInputError,
)


class OpenAIClientAdapter(BaseExtractionClient):
    """Vision extraction client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def recognize(
        self,
        *,
        model: str,
        temperature: float,
        instruction: str,
        image_bytes: bytes,
        mime_type: str,
    ) -> str:
        data_url = _image_data_url(image_bytes, mime_type)
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": instruction},
                            {"type": "image_url", "image_url": {"url": data_url}},
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionNetworkError(
                f"Vision provider network error: {exc}"
            ) from exc
        except openai.BadRequestError as exc:
            raise InvalidInputError(
                f"Vision provider rejected the image: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise ExtractionNetworkError(
                f"Vision provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise ExtractionFailedError("Vision provider returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise ExtractionFailedError("Vision provider returned empty response")
        return content


def _image_data_url(image_bytes: bytes, mime_type: str) -> str:
    payload = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime_type or 'image/jpeg'};base64,{payload}"
