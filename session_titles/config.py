"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Title shaping constants are NOT settings: they live in core/derive_title.py

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box in development
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        """Anything other than "json" falls back to human-readable text."""
        val = (v or "json").strip().lower()
        return val if val == "json" else "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()
