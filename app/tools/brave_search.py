from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from app.config import settings
from app.models.chat import SearchResult
from app.tools import web_utils


async def search(query: str, *, max_results: int | None = None) -> list[SearchResult]:
    """Execute a Brave web search and normalize results.

    Never raises: a missing key, a failed request or an unexpected payload
    all yield an empty list.
    """
    if not settings.brave_api_key:
        logger.debug("Brave search skipped: BRAVE_API_KEY is not configured")
        return []

    params: dict[str, Any] = {
        "q": query,
        "count": max_results or settings.web_search_max_results,
    }

    try:
        async with httpx.AsyncClient(timeout=settings.search_timeout_seconds) as client:
            response = await client.get(
                settings.brave_search_url,
                params=params,
                headers={
                    "Accept": "application/json",
                    "X-Subscription-Token": settings.brave_api_key,
                },
            )
            response.raise_for_status()
            payload = response.json()

        raw_results = (payload.get("web") or {}).get("results") or []
        mapped: list[SearchResult] = []
        for item in raw_results:
            url = item.get("url", "")
            if not web_utils.is_valid_url(url):
                continue
            mapped.append(
                SearchResult(
                    title=item.get("title", "") or "",
                    description=web_utils.strip_html(item.get("description", "") or ""),
                    url=url,
                )
            )
        return mapped
    except Exception as e:
        logger.warning(f"Brave search failed for {query!r}: {e}")
        return []
