"""Configuration module for the MindOS application."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from urllib.parse import urlparse

from dotenv import load_dotenv

from mindos.core.exceptions import ConfigurationError

load_dotenv()


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _as_secret(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


@dataclass(frozen=True)
class Config:
    """Runtime configuration with validation."""

    APP_NAME: str
    APP_VERSION: str
    ENV: str
    DEBUG: bool
    DATABASE_URL: str
    OPENAI_API_KEY: str | None
    OPENAI_BASE_URL: str
    EMBEDDING_MODEL: str
    CHAT_MODEL: str
    LLM_TIMEOUT_SECONDS: int
    SEARCH_TOP_K: int
    CHAT_CONTEXT_TOP_K: int
    SUMMARY_SNIPPET_CHARS: int
    API_HOST: str
    API_PORT: int
    API_PREFIX: str
    LOG_LEVEL: str
    LOG_FILE: str

    @property
    def is_production(self) -> bool:
        return self.ENV == "production"

    @property
    def ai_enabled(self) -> bool:
        """AI features are switched on solely by the presence of the API key."""
        return self.OPENAI_API_KEY is not None


def _build_config(env: str | None = None) -> Config:
    resolved_env = (env or os.getenv("ENV", "development")).strip().lower()
    debug = _as_bool(os.getenv("DEBUG"), default=(resolved_env != "production"))

    config = Config(
        APP_NAME="MindOS",
        APP_VERSION=os.getenv("APP_VERSION", "1.0.0"),
        ENV=resolved_env,
        DEBUG=debug if resolved_env != "production" else False,
        DATABASE_URL=os.getenv("DATABASE_URL", "sqlite:///./mindos.db"),
        OPENAI_API_KEY=_as_secret(os.getenv("OPENAI_API_KEY")),
        OPENAI_BASE_URL=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1").rstrip("/"),
        EMBEDDING_MODEL=os.getenv("EMBEDDING_MODEL", "text-embedding-3-small"),
        CHAT_MODEL=os.getenv("CHAT_MODEL", "gpt-4o"),
        LLM_TIMEOUT_SECONDS=int(os.getenv("LLM_TIMEOUT_SECONDS", "60")),
        SEARCH_TOP_K=int(os.getenv("SEARCH_TOP_K", "5")),
        CHAT_CONTEXT_TOP_K=int(os.getenv("CHAT_CONTEXT_TOP_K", "3")),
        SUMMARY_SNIPPET_CHARS=int(os.getenv("SUMMARY_SNIPPET_CHARS", "100")),
        API_HOST=os.getenv("API_HOST", "0.0.0.0"),
        API_PORT=int(os.getenv("API_PORT", "8000")),
        API_PREFIX=os.getenv("API_PREFIX", "/api"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
        LOG_FILE=os.getenv("LOG_FILE", ""),
    )
    _validate_config(config)
    return config


def _validate_database_url(database_url: str) -> None:
    parsed = urlparse(database_url)
    if parsed.scheme not in {"sqlite", "postgresql", "postgresql+psycopg2"}:
        raise ConfigurationError(
            "DATABASE_URL must use sqlite:// or postgresql:// style URL."
        )
    if parsed.scheme.startswith("postgresql") and not parsed.hostname:
        raise ConfigurationError("PostgreSQL DATABASE_URL is missing hostname.")


def _validate_config(config: Config) -> None:
    _validate_database_url(config.DATABASE_URL)

    if config.LLM_TIMEOUT_SECONDS < 1:
        raise ConfigurationError("LLM_TIMEOUT_SECONDS must be >= 1.")
    if config.SEARCH_TOP_K < 1:
        raise ConfigurationError("SEARCH_TOP_K must be >= 1.")
    if config.CHAT_CONTEXT_TOP_K < 1:
        raise ConfigurationError("CHAT_CONTEXT_TOP_K must be >= 1.")
    if config.SUMMARY_SNIPPET_CHARS < 1:
        raise ConfigurationError("SUMMARY_SNIPPET_CHARS must be >= 1.")
    if config.LOG_LEVEL not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ConfigurationError("LOG_LEVEL must be one of DEBUG/INFO/WARNING/ERROR/CRITICAL.")


@lru_cache(maxsize=8)
def get_config(env: str | None = None) -> Config:
    """Get validated configuration for the requested environment."""
    return _build_config(env)
