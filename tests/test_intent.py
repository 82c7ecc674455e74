from __future__ import annotations

import pytest

from app.agents.intent import RegexIntentClassifier, classify_intent, news_topic
from app.models.chat import Intent


@pytest.mark.parametrize(
    "message",
    [
        "hello there",
        "Hi!",
        "  hey, what can you do?",
        "Good morning BoTesh",
        "how are you today",
        "What's up",
        "What’s up",
        "SUP",
    ],
)
def test_greetings_are_chit_chat(message):
    assert classify_intent(message) == Intent.CHIT_CHAT


@pytest.mark.parametrize(
    "message",
    [
        "breaking news on elections",
        "latest news on cricket",
        "Show me today's HEADLINES",
        "what are the top stories right now",
    ],
)
def test_headline_requests_are_news(message):
    assert classify_intent(message) == Intent.NEWS


@pytest.mark.parametrize(
    "message",
    [
        "what's the capital of France",
        "current IPL winner",
        "history of the roman empire",
        "young stars in football",
        "news about rust",
        "",
    ],
)
def test_everything_else_is_general(message):
    assert classify_intent(message) == Intent.GENERAL


def test_greeting_wins_over_news():
    assert classify_intent("hi, any breaking news?") == Intent.CHIT_CHAT


def test_classifier_class_matches_function():
    classifier = RegexIntentClassifier()
    assert classifier.classify("hello there") == classify_intent("hello there")


class TestNewsTopic:
    def test_strips_trigger_and_filler(self):
        assert news_topic("latest news on cricket") == "cricket"
        assert news_topic("breaking news about the elections") == "the elections"
        assert news_topic("show me the latest news about AI") == "AI"

    def test_keeps_message_when_nothing_left(self):
        assert news_topic("Headlines") == "Headlines"
