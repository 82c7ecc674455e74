from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from app.agents.query_rewriter import QueryRewriter, parse_rewrite


def _provider(**kwargs) -> MagicMock:
    provider = MagicMock()
    provider.name = "gemini"
    provider.generate = AsyncMock(**kwargs)
    return provider


class TestParseRewrite:
    def test_takes_text_after_marker(self):
        assert parse_rewrite("Sure!\nRephrased:  IPL 2026 final winner  ") == "IPL 2026 final winner"

    def test_marker_is_case_insensitive_and_single_line(self):
        assert parse_rewrite("rephrased: first line\nsecond line") == "first line"

    def test_without_marker_returns_whole_reply(self):
        assert parse_rewrite("  IPL 2026 winner \n") == "IPL 2026 winner"


@pytest.mark.asyncio
async def test_rewrite_returns_parsed_text():
    provider = _provider(return_value="Rephrased: capital city of France")
    rewriter = QueryRewriter(provider, max_tokens=32)

    assert await rewriter.rewrite("whats the capital of france") == "capital city of France"
    prompt, system = provider.generate.await_args.args
    assert "whats the capital of france" in prompt
    assert "Rephrased:" in prompt
    assert system
    assert provider.generate.await_args.kwargs == {"max_tokens": 32}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        RuntimeError("quota exceeded"),
        httpx.ConnectError("network down"),
        ValueError("malformed payload"),
    ],
)
async def test_rewrite_failure_returns_original(error):
    rewriter = QueryRewriter(_provider(side_effect=error))
    assert await rewriter.rewrite("current IPL winner") == "current IPL winner"


@pytest.mark.asyncio
async def test_empty_rewrite_returns_original():
    rewriter = QueryRewriter(_provider(return_value="Rephrased:   "))
    assert await rewriter.rewrite("current IPL winner") == "current IPL winner"
