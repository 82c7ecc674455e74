from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Web search (Brave)
    brave_api_key: str = ""
    brave_search_url: str = "https://api.search.brave.com/res/v1/web/search"
    web_search_max_results: int = 5

    # Encyclopedia (Wikipedia)
    wikipedia_api_url: str = "https://en.wikipedia.org/w/api.php"
    wikipedia_article_base_url: str = "https://en.wikipedia.org/wiki/"
    wikipedia_max_results: int = 3

    # Live news (NewsAPI)
    news_api_key: str = ""
    news_api_url: str = "https://newsapi.org/v2/everything"
    news_max_results: int = 5
    news_language: str = "en"

    search_timeout_seconds: float = 10.0

    # Generation providers (OpenAI-compatible endpoints)
    gemini_api_key: str = ""
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    gemini_model: str = "gemini-1.5-pro"
    cohere_api_key: str = ""
    cohere_base_url: str = "https://api.cohere.ai/compatibility/v1"
    cohere_model: str = "command-r"
    openrouter_api_key: str = ""
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_model: str = "openai/gpt-4o-mini"

    generation_providers: str = "gemini,cohere"  # tried in this order
    rewrite_provider: str = "gemini"
    generation_timeout_seconds: float = 30.0
    generation_temperature: float = 0.7
    chat_max_tokens: int = 256
    answer_max_tokens: int = 1024
    rewrite_max_tokens: int = 128

    # Conversation history (Supabase)
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    conversations_table: str = "conversations"
    context_window_turns: int = 5

    # Prompt source budget
    source_max_count: int = 5
    source_char_budget: int = 1200

    # App
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: str = "http://localhost:3000"
    app_log_level: str = "INFO"
    noisy_log_level: str = "WARNING"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",")]

    @property
    def generation_provider_list(self) -> list[str]:
        return [p.strip().lower() for p in self.generation_providers.split(",") if p.strip()]


settings = Settings()
