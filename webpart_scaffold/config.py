# webpart_scaffold/config.py
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized, env-driven configuration for generation and page components.
    Override via WEBPART_* environment variables or a .env file at repo root.
    """
    log_level: str = Field(default="INFO")
    strict_substitution: bool = Field(default=True)

    # Generation
    templates_dir: Optional[str] = Field(default=None)  # None -> bundled templates
    output_dir: str = Field(default="test")

    # Portal web part lookup (Playwright selectors)
    region_selector: str = Field(default="div[name='webpart']")
    region_title_selector: str = Field(default=".labkey-wp-title-text")
    page_ready_selector: str = Field(default="body")

    # Waits owned by the driver, never by components
    element_timeout_ms: int = Field(default=10_000)
    navigation_timeout_ms: int = Field(default=30_000)

    # Pydantic v2 config: ignore unknown envs, load .env in UTF-8
    model_config = SettingsConfigDict(
        env_prefix="WEBPART_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
