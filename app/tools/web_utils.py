from __future__ import annotations

import re
from urllib.parse import quote, urlparse

from bs4 import BeautifulSoup


def is_valid_url(url: str) -> bool:
    """Basic URL validation."""
    try:
        result = urlparse(url)
        return all([result.scheme in ("http", "https"), result.netloc])
    except ValueError:
        return False


def strip_html(text: str) -> str:
    """Drop markup from a snippet and collapse whitespace."""
    if not text:
        return ""
    plain = BeautifulSoup(text, "html.parser").get_text()
    return re.sub(r"\s+", " ", plain).strip()


def article_url(base_url: str, title: str) -> str:
    """Canonical article URL for an encyclopedia title (spaces become underscores)."""
    # Same escaping as JavaScript's encodeURIComponent.
    return base_url + quote(title.replace(" ", "_"), safe="!~*'()")
