from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Normalizer configuration loaded from environment variables and .env files."""

    env: str = "dev"
    nil_token: str = "NIL"
    heading_period_limit: int = Field(default=80, ge=0)
    no_results_message: str = "No results found. Try giving another query."

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def sentinel(self) -> str:
        return self.nil_token.strip().upper()


@lru_cache
def get_settings() -> Settings:
    """Return cached normalizer settings."""
    return Settings()
