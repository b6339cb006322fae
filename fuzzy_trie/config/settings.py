"""Application settings and configuration management."""

from functools import lru_cache

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Fuzzy trie settings with environment variable support."""

    # Application
    app_name: str = Field(default="Fuzzy Trie")
    app_version: str = Field(default="1.0.0")

    # Search Configuration
    default_max_distance: int = Field(default=2, ge=0)
    max_results: int = Field(default=10, ge=1)
    min_search_length: int = Field(default=1, ge=0)
    debounce_ms: int = Field(default=150, ge=0)  # read by callers that debounce input

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
