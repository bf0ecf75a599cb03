from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # OpenAI
    # Default empty string allows tests to run without .env, but model calls will fail at runtime if not set
    openai_api_key: str = ""

    # Optional OpenAI-compatible endpoint (e.g. a proxy or another provider's compat API)
    # Empty string = the official OpenAI endpoint
    openai_base_url: str = ""

    # Trust Score analysis
    # gpt-4o: Best quality for the multi-profile reasoning the prompt asks for
    trust_score_model: str = "gpt-4o"
    trust_score_temperature: float = 0.3

    # Frontend origins allowed by CORS
    # From env, pass a JSON list: CORS_ORIGINS='["http://localhost:9002"]'
    cors_origins: list[str] = ["http://localhost:9002"]

    model_config = SettingsConfigDict(env_file=".env")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
