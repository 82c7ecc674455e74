from __future__ import annotations

from app.config import Settings


def test_defaults_need_no_credentials():
    s = Settings(_env_file=None)
    assert s.web_search_max_results == 5
    assert s.wikipedia_max_results == 3
    assert s.news_max_results == 5
    assert s.source_max_count == 5
    assert s.source_char_budget == 1200
    assert s.context_window_turns == 5


def test_generation_provider_list_parsing():
    s = Settings(_env_file=None, generation_providers=" Gemini, cohere ,,openrouter ")
    assert s.generation_provider_list == ["gemini", "cohere", "openrouter"]


def test_cors_origin_list():
    s = Settings(_env_file=None, cors_origins="http://a.test, http://b.test")
    assert s.cors_origin_list == ["http://a.test", "http://b.test"]
