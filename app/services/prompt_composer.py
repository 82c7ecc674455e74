from __future__ import annotations

from app.config import settings
from app.models.chat import GenerationRequest, HistoryTurn, SearchResult
from app.services.prompt_store import get_prompt, render_prompt


def format_source(result: SearchResult) -> str:
    return f"Title: {result.title}\nDescription: {result.description}\nURL: {result.url}"


def select_sources(
    results: list[SearchResult],
    *,
    max_sources: int | None = None,
    max_chars: int | None = None,
) -> list[str]:
    """Formatted blocks for the top results that fit the character budget.

    Stops at the first block that would push the running total past
    `max_chars`; that block and everything after it are dropped.
    """
    max_sources = settings.source_max_count if max_sources is None else max_sources
    max_chars = settings.source_char_budget if max_chars is None else max_chars

    total = 0
    blocks: list[str] = []
    for result in results[:max_sources]:
        block = format_source(result)
        if total + len(block) > max_chars:
            break
        blocks.append(block)
        total += len(block)
    return blocks


def render_history(history: list[HistoryTurn]) -> str:
    return "\n".join(f"User: {turn.user}\nBot: {turn.bot}" for turn in history)


def compose_general(
    message: str,
    rewritten_query: str,
    results: list[SearchResult],
    history: list[HistoryTurn],
) -> GenerationRequest:
    """Build the sourced-answer request for the general path."""
    source_context = "\n\n".join(select_sources(results))
    rewritten = rewritten_query or message
    prompt = render_prompt(
        "general.prompt",
        history=render_history(history),
        query=message,
        rewritten_query=rewritten,
        sources=source_context,
    )
    return GenerationRequest(
        system_prompt=get_prompt("general.system_prompt"),
        user_query=message,
        rewritten_query=rewritten,
        source_context=source_context,
        history=list(history),
        prompt=prompt,
    )


def compose_chit_chat(message: str) -> GenerationRequest:
    return GenerationRequest(
        system_prompt=get_prompt("chit_chat.system_prompt"),
        user_query=message,
        prompt=render_prompt("chit_chat.prompt", message=message),
    )
