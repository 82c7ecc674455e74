"""Tests for the generation provider adapter and factory."""
import sys
import types
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app import llm_client
from app.llm_client import OpenAICompatibleProvider, ProviderError, get_provider


def _completion(text):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=text))])


def _provider_with_client(fake_client) -> OpenAICompatibleProvider:
    provider = OpenAICompatibleProvider(
        "gemini",
        api_key="key",
        base_url="https://gemini.test/openai/",
        model="gemini-test",
        timeout=5.0,
        temperature=0.7,
    )
    provider._client = fake_client
    return provider


class TestOpenAICompatibleProvider:
    @pytest.mark.asyncio
    async def test_sends_system_and_user_messages(self):
        fake_client = MagicMock()
        fake_client.chat.completions.create = AsyncMock(return_value=_completion("answer"))
        provider = _provider_with_client(fake_client)

        text = await provider.generate("question", "be brief", max_tokens=256)

        assert text == "answer"
        fake_client.chat.completions.create.assert_awaited_once_with(
            model="gemini-test",
            messages=[
                {"role": "system", "content": "be brief"},
                {"role": "user", "content": "question"},
            ],
            max_tokens=256,
            temperature=0.7,
        )

    @pytest.mark.asyncio
    async def test_empty_completion_raises(self):
        fake_client = MagicMock()
        fake_client.chat.completions.create = AsyncMock(return_value=_completion("  "))
        provider = _provider_with_client(fake_client)

        with pytest.raises(ProviderError):
            await provider.generate("question", "system", max_tokens=16)

    @pytest.mark.asyncio
    async def test_no_choices_raises(self):
        fake_client = MagicMock()
        fake_client.chat.completions.create = AsyncMock(return_value=SimpleNamespace(choices=[]))
        provider = _provider_with_client(fake_client)

        with pytest.raises(ProviderError):
            await provider.generate("question", "system", max_tokens=16)

    @pytest.mark.asyncio
    async def test_missing_key_fails_without_network(self):
        provider = OpenAICompatibleProvider("cohere", api_key="", base_url="https://c.test", model="m")
        provider._client = MagicMock()

        with pytest.raises(ProviderError):
            await provider.generate("question", "system", max_tokens=16)
        provider._client.chat.completions.create.assert_not_called()

    def test_client_has_timeout_and_no_retries(self):
        openai_module = types.ModuleType("openai")
        mock_openai = MagicMock()
        openai_module.AsyncOpenAI = mock_openai

        provider = OpenAICompatibleProvider(
            "openrouter", api_key="k", base_url="https://or.test/v1", model="m", timeout=12.0
        )
        with patch.dict(sys.modules, {"openai": openai_module}):
            provider._get_client()

        mock_openai.assert_called_once_with(
            api_key="k",
            base_url="https://or.test/v1",
            timeout=12.0,
            max_retries=0,
        )


class TestProviderFactory:
    def test_builds_known_providers_from_settings(self):
        with patch("app.llm_client.settings") as mock_settings:
            mock_settings.gemini_api_key = "g-key"
            mock_settings.gemini_base_url = "https://g.test/"
            mock_settings.gemini_model = "gemini-x"
            mock_settings.cohere_api_key = "c-key"
            mock_settings.cohere_base_url = "https://c.test/"
            mock_settings.cohere_model = "command-x"
            mock_settings.generation_timeout_seconds = 30.0
            mock_settings.generation_temperature = 0.7

            gemini = get_provider("Gemini")
            cohere = get_provider("cohere")

        assert (gemini.name, gemini.model, gemini.base_url) == ("gemini", "gemini-x", "https://g.test/")
        assert (cohere.name, cohere.api_key) == ("cohere", "c-key")

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValueError):
            get_provider("mystery")

    def test_providers_follow_configured_order(self):
        with (
            patch("app.llm_client.settings") as mock_settings,
            patch.dict(llm_client._providers, clear=True),
        ):
            mock_settings.generation_provider_list = ["cohere", "gemini"]
            ordered = llm_client.providers()

        assert [p.name for p in ordered] == ["cohere", "gemini"]
