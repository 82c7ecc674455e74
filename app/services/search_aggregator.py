from __future__ import annotations

import asyncio

from loguru import logger

from app.models.chat import SearchResult
from app.tools import brave_search, wikipedia_search


def dedupe_results(results: list[SearchResult]) -> list[SearchResult]:
    """Drop later results whose url was already seen, keeping order."""
    seen: set[str] = set()
    deduped: list[SearchResult] = []
    for item in results:
        if item.url in seen:
            continue
        seen.add(item.url)
        deduped.append(item)
    return deduped


async def aggregate(query: str) -> list[SearchResult]:
    """Search the web and the encyclopedia concurrently and merge the results.

    Web results come first, so on a url collision the web copy wins.
    Connectors never raise, so the gather cannot fail the aggregation.
    """
    web, encyclopedia = await asyncio.gather(
        brave_search.search(query),
        wikipedia_search.search(query),
    )
    merged = dedupe_results([*web, *encyclopedia])
    logger.info(
        f"Aggregated {len(merged)} results for {query!r} "
        f"(web={len(web)}, wikipedia={len(encyclopedia)})"
    )
    return merged
