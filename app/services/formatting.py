from __future__ import annotations

import re

from app.models.chat import NewsArticle

URL_RE = re.compile(r"(https?://\S+)")

NEWS_HEADING = "📰 **Top News Headlines:**\n\n"
NEWS_UNAVAILABLE = "Sorry, I could not fetch the latest news at this time."


def autolink_urls(text: str) -> str:
    """Wrap every bare http(s) URL as a markdown link to itself.

    Text that already contains markdown links is not special-cased: the URL
    inside `(...)` is linked again.
    """
    return URL_RE.sub(r"[\1](\1)", text)


def format_timestamp(article: NewsArticle) -> str:
    if article.published_at is None:
        return ""
    return article.published_at.strftime("%b %d, %Y %I:%M %p %Z").strip()


def format_news(articles: list[NewsArticle]) -> str:
    msg = NEWS_HEADING
    for i, article in enumerate(articles, 1):
        msg += f"**{i}. [{article.title}]({article.url})**\n"
        if article.source_name and article.url:
            msg += f"[Source: {article.source_name}]({article.url})"
        stamp = format_timestamp(article)
        if stamp:
            msg += f"  •  _{stamp}_"
        msg += "\n---\n\n"
    return msg


def follow_up_suggestions(query: str) -> list[str]:
    if re.search(r"cricket|ipl", query, re.IGNORECASE):
        return [
            "Show latest IPL news",
            "List top IPL teams",
            "Who is the current Orange Cap holder?",
        ]
    if re.search(r"\bjs\b|javascript|\bweb\b", query, re.IGNORECASE):
        return [
            "Show top JavaScript frameworks",
            "How to optimize web performance?",
            "What is the best way to learn JavaScript?",
        ]
    return ["Ask a follow-up question", "Request more details"]
