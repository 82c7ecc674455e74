from __future__ import annotations

import re

from loguru import logger

from app.config import settings
from app.llm_client import GenerationProvider
from app.services.prompt_store import get_prompt, render_prompt

REWRITE_MARKER = "Rephrased:"
_MARKER_RE = re.compile(re.escape(REWRITE_MARKER) + r"(.*)", re.IGNORECASE)


def parse_rewrite(text: str) -> str:
    """Text after the marker on its line, or the whole reply when there is no marker."""
    match = _MARKER_RE.search(text)
    return match.group(1).strip() if match else text.strip()


class QueryRewriter:
    """Turns a raw user message into a search-friendly query.

    Any provider failure falls back to the original query; search can still
    run on the raw text.
    """

    def __init__(self, provider: GenerationProvider, *, max_tokens: int | None = None):
        self.provider = provider
        self.max_tokens = max_tokens or settings.rewrite_max_tokens

    async def rewrite(self, query: str) -> str:
        prompt = render_prompt("query_rewriter.prompt", query=query, marker=REWRITE_MARKER)
        try:
            text = await self.provider.generate(
                prompt,
                get_prompt("query_rewriter.system_prompt"),
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            logger.warning(f"Query rewrite via {self.provider.name} failed, using original query: {e}")
            return query

        rewritten = parse_rewrite(text or "")
        if not rewritten:
            return query
        logger.info(f"Rephrased query: {rewritten!r}")
        return rewritten
