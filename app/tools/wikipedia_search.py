from __future__ import annotations

import httpx
from loguru import logger

from app.config import settings
from app.models.chat import SearchResult
from app.tools import web_utils


async def search(query: str, *, max_results: int | None = None) -> list[SearchResult]:
    """Search Wikipedia's public API. Returns an empty list on any failure."""
    params = {
        "action": "query",
        "list": "search",
        "format": "json",
        "srsearch": query,
        "srlimit": max_results or settings.wikipedia_max_results,
    }

    try:
        async with httpx.AsyncClient(timeout=settings.search_timeout_seconds) as client:
            response = await client.get(settings.wikipedia_api_url, params=params)
            response.raise_for_status()
            payload = response.json()

        hits = (payload.get("query") or {}).get("search") or []
        return [
            SearchResult(
                title=item["title"],
                description=web_utils.strip_html(item.get("snippet", "")),
                url=web_utils.article_url(settings.wikipedia_article_base_url, item["title"]),
            )
            for item in hits
        ]
    except Exception as e:
        logger.warning(f"Wikipedia search failed for {query!r}: {e}")
        return []
