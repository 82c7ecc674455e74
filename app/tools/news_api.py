from __future__ import annotations

from datetime import datetime, timezone

import httpx
from loguru import logger

from app.config import settings
from app.models.chat import NewsArticle


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _sort_key(article: NewsArticle) -> datetime:
    return article.published_at or datetime.min.replace(tzinfo=timezone.utc)


async def get_live_news(query: str, *, max_results: int | None = None) -> list[NewsArticle]:
    """Fetch the most recent articles matching `query`, newest first.

    Provider errors are logged with the provider's own message and yield an
    empty list.
    """
    if not settings.news_api_key:
        logger.warning("NewsAPI error: NEWS_API_KEY is not configured")
        return []

    limit = max_results or settings.news_max_results
    params = {
        "q": query,
        "pageSize": limit,
        "sortBy": "publishedAt",
        "language": settings.news_language,
    }

    try:
        async with httpx.AsyncClient(timeout=settings.search_timeout_seconds) as client:
            response = await client.get(
                settings.news_api_url,
                params=params,
                headers={"X-Api-Key": settings.news_api_key},
            )
            payload = response.json()
    except Exception as e:
        logger.warning(f"NewsAPI request failed for {query!r}: {e}")
        return []

    articles = payload.get("articles") if isinstance(payload, dict) else None
    if not isinstance(articles, list):
        message = payload.get("message") if isinstance(payload, dict) else None
        logger.warning(f"NewsAPI error: {message or payload}")
        return []

    mapped: list[NewsArticle] = []
    for item in articles:
        if not isinstance(item, dict):
            continue
        url = item.get("url")
        if not isinstance(url, str) or not url:
            continue
        source = item.get("source")
        published = item.get("publishedAt")
        mapped.append(
            NewsArticle(
                title=str(item.get("title") or "Untitled"),
                source_name=str(source.get("name") or "") if isinstance(source, dict) else "",
                url=url,
                published_at=_parse_timestamp(published if isinstance(published, str) else None),
            )
        )
    mapped.sort(key=_sort_key, reverse=True)
    return mapped[:limit]
