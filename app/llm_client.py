"""Generation providers behind one small interface.

Gemini, Cohere and OpenRouter all expose an OpenAI-compatible chat
completions endpoint, so a single adapter over the OpenAI SDK covers them;
only the base URL, key and model differ.
"""
from __future__ import annotations

from typing import Any, Protocol

from app.config import settings


class ProviderError(RuntimeError):
    """A provider could not produce usable text."""


class GenerationProvider(Protocol):
    name: str

    async def generate(self, prompt: str, system: str, *, max_tokens: int) -> str: ...


class OpenAICompatibleProvider:
    def __init__(
        self,
        name: str,
        *,
        api_key: str,
        base_url: str,
        model: str,
        timeout: float | None = None,
        temperature: float | None = None,
    ):
        self.name = name
        self.api_key = api_key
        self.base_url = base_url
        self.model = model
        self.timeout = settings.generation_timeout_seconds if timeout is None else timeout
        self.temperature = settings.generation_temperature if temperature is None else temperature
        self._client: Any | None = None

    def _get_client(self) -> Any:
        if self._client is None:
            from openai import AsyncOpenAI

            # One attempt per provider per request: the fallback chain owns retries.
            self._client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    async def generate(self, prompt: str, system: str, *, max_tokens: int) -> str:
        if not self.api_key:
            raise ProviderError(f"{self.name}: API key is not configured")

        messages: list[dict[str, str]] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        response = await self._get_client().chat.completions.create(
            model=self.model,
            messages=messages,
            max_tokens=max_tokens,
            temperature=self.temperature,
        )
        choices = getattr(response, "choices", None) or []
        text = choices[0].message.content if choices else None
        if not text or not text.strip():
            raise ProviderError(f"{self.name}: empty completion")
        return text


def get_provider(name: str) -> OpenAICompatibleProvider:
    """Build a provider from settings by name."""
    key = name.strip().lower()
    if key == "gemini":
        return OpenAICompatibleProvider(
            "gemini",
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_base_url,
            model=settings.gemini_model,
        )
    if key == "cohere":
        return OpenAICompatibleProvider(
            "cohere",
            api_key=settings.cohere_api_key,
            base_url=settings.cohere_base_url,
            model=settings.cohere_model,
        )
    if key == "openrouter":
        return OpenAICompatibleProvider(
            "openrouter",
            api_key=settings.openrouter_api_key,
            base_url=settings.openrouter_base_url.strip() or "https://openrouter.ai/api/v1",
            model=settings.openrouter_model,
        )
    raise ValueError(f"Unsupported generation provider: {name}")


_providers: dict[str, OpenAICompatibleProvider] = {}


def provider(name: str) -> OpenAICompatibleProvider:
    """Get or create the cached provider for `name`."""
    key = name.strip().lower()
    if key not in _providers:
        _providers[key] = get_provider(key)
    return _providers[key]


def providers() -> list[OpenAICompatibleProvider]:
    """Providers in fallback order, as configured by GENERATION_PROVIDERS."""
    return [provider(name) for name in settings.generation_provider_list]
