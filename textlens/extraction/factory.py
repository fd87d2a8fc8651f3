from typing import ClassVar

from textlens.config.settings import Settings
from textlens.extraction.base import BaseExtractor
from textlens.extraction.example_client_adapter import ExampleClientAdapter
from textlens.extraction.extractor import Extractor
from textlens.extraction.openai_client_adapter import OpenAIClientAdapter
from textlens.extraction.tesseract_adapter import TesseractAdapter


class ExtractorFactory:
    """Creates the configured extractor adapter."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseExtractor:
        """Create a configured extractor from application settings."""
        provider = settings.extraction_provider.lower()
        if provider == "example":
            return Extractor(client=ExampleClientAdapter(), model="example")
        if provider == "tesseract":
            return Extractor(
                client=TesseractAdapter(lang=settings.tesseract_lang),
                model="tesseract",
            )
        base_url = cls._resolve_base_url(provider, settings)
        client = OpenAIClientAdapter(
            api_key=cls._provider_setting(provider, settings, "api_key"),
            timeout_seconds=cls._provider_setting(provider, settings, "timeout_seconds"),
            base_url=base_url,
        )
        return Extractor(
            client=client,
            model=cls._provider_setting(provider, settings, "model_name"),
            temperature=settings.extraction_temperature,
        )

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "tesseract", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.extraction_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "extraction_openai_compatible_base_url is required for "
                    "extraction_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        raise ValueError(
            f"Unknown extraction provider '{provider}'. Choose from: {cls.supported_providers()}"
        )

    @staticmethod
    def _provider_setting(provider: str, settings: Settings, name: str):  # type: ignore[no-untyped-def]
        return getattr(settings, f"extraction_{provider}_{name}", None)
