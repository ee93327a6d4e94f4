"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    ollama_chat_url: str = "http://localhost:11434/api/chat"
    ollama_model: str = "codellama"
    ollama_timeout_seconds: float | None = 120.0
    test_array_key: str = "test"
    balanced_array_extraction: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()
