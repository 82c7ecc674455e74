from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Intent(str, Enum):
    CHIT_CHAT = "chit_chat"
    NEWS = "news"
    GENERAL = "general"


@dataclass(slots=True)
class SearchResult:
    """Normalized result from any search connector. `url` is the identity key."""

    title: str
    description: str
    url: str


@dataclass(slots=True)
class NewsArticle:
    title: str
    source_name: str
    url: str
    published_at: datetime | None = None


@dataclass(slots=True)
class HistoryTurn:
    user: str
    bot: str


@dataclass(slots=True)
class GenerationRequest:
    """Everything a provider needs for one generation call."""

    system_prompt: str
    user_query: str
    rewritten_query: str = ""
    source_context: str = ""
    history: list[HistoryTurn] = field(default_factory=list)
    prompt: str = ""


@dataclass(slots=True)
class ChatReply:
    intent: Intent
    text: str
    suggestions: list[str] = field(default_factory=list)
