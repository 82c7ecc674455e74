"""Message intent classification.

The regex classifier is the default; anything implementing
`IntentClassifier` can replace it in the orchestrator.
"""
from __future__ import annotations

import re
from typing import Protocol

from app.models.chat import Intent

GREETINGS = (
    "hi",
    "hello",
    "hey",
    "good morning",
    "good evening",
    "good night",
    "how are you",
    "what's up",
    "yo",
    "sup",
)

# Whole-word match so "history" or "young" are not greetings.
GREETING_RE = re.compile(
    r"^(?:" + "|".join(re.escape(g) for g in GREETINGS) + r")\b",
    re.IGNORECASE,
)
NEWS_RE = re.compile(r"\b(?:latest|breaking) news\b|\bheadlines\b|\btop stories\b", re.IGNORECASE)


class IntentClassifier(Protocol):
    def classify(self, message: str) -> Intent: ...


class RegexIntentClassifier:
    def classify(self, message: str) -> Intent:
        text = _normalize(message)
        if GREETING_RE.match(text):
            return Intent.CHIT_CHAT
        if NEWS_RE.search(text):
            return Intent.NEWS
        return Intent.GENERAL


def _normalize(message: str) -> str:
    # Typographic apostrophes from mobile keyboards.
    return (message or "").strip().replace("’", "'")


def classify_intent(message: str) -> Intent:
    return RegexIntentClassifier().classify(message)


def news_topic(message: str) -> str:
    """Strip the headline trigger and filler words, leaving the subject."""
    text = NEWS_RE.sub(" ", _normalize(message))
    text = re.sub(r"^\W*(?:(?:show|give|get|me|the|any|some|what are|what's)\s+)*", "", text, flags=re.IGNORECASE)
    text = re.sub(r"^\W*(?:on|about|for|regarding|in)\s+", "", text.strip(), flags=re.IGNORECASE)
    text = " ".join(text.split()).strip(" ?!.,:;")
    return text or (message or "").strip()
