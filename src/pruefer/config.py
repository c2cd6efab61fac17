from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # OpenAI (default backend)
    openai_api_key: str = ""
    openai_base_url: str | None = None
    openai_model: str = "gpt-4o-mini"

    # Anthropic
    anthropic_api_key: str = ""
    anthropic_base_url: str | None = None
    anthropic_model: str = "claude-3-haiku-20240307"

    # Shared generation parameters
    llm_max_tokens: int = 2000
    llm_temperature: float = 0.3  # OpenAI only
    llm_timeout: float = 60.0  # per request, seconds; no retries

    # Backend selection: openai | anthropic
    default_backend: str = "openai"
    enabled_backends: list[str] = ["openai", "anthropic"]

    # ÖSD B2 Stellungnahme
    min_word_count: int = 60  # below this: zero score, no model call
    target_word_count: int = 120
    max_text_chars: int = 20000

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]


settings = Settings()
