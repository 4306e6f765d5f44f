"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LINKTAGS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # General
    log_level: str = "INFO"
    log_json: bool = False

    # Routing
    wiki_base_path: str = "/wiki"
    attachments_base_path: str = "/Attachments"

    # Page index (JSON array of {"id", "title"}); empty index when unset
    page_index_path: str | None = None

    # Special page name -> slug of the page serving it
    special_page_routes: dict[str, str] = Field(default_factory=dict)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
