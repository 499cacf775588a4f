"""Application configuration and constants."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigError

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_NEWS_API_URL = "https://newsapi.org/v2/everything"
# NewsAPI rejects pageSize above 100.
MAX_PAGE_SIZE = 100


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


def _get_int(name: str, default: str) -> int:
    raw = _get_env(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"Env: {name} must be an integer, got {raw!r}") from exc


def _get_float(name: str, default: str) -> float:
    raw = _get_env(name, default)
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"Env: {name} must be a number, got {raw!r}") from exc


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, built once at startup and passed around explicitly."""

    api_key: str
    port: int = 3000
    page_size: int = 20
    request_timeout: float = 10.0
    news_api_url: str = DEFAULT_NEWS_API_URL
    language: str = "en"
    sort_by: str = "publishedAt"
    log_level: str = "INFO"
    templates_dir: str = str(PACKAGE_DIR / "templates")
    assets_dir: str = str(PACKAGE_DIR / "assets")

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigError("Env: api key must be set")
        if not 0 < self.page_size <= MAX_PAGE_SIZE:
            raise ConfigError(f"page size must be between 1 and {MAX_PAGE_SIZE}, got {self.page_size}")
        if self.request_timeout <= 0:
            raise ConfigError(f"request timeout must be positive, got {self.request_timeout}")

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the environment, loading a ``.env`` file first if present."""
        load_dotenv()
        return cls(
            api_key=_get_env("APIKEY", "").strip(),
            port=_get_int("PORT", "3000"),
            page_size=_get_int("PAGE_SIZE", "20"),
            request_timeout=_get_float("REQUEST_TIMEOUT_SECONDS", "10"),
            news_api_url=_get_env("NEWS_API_URL", DEFAULT_NEWS_API_URL),
            language=_get_env("NEWS_LANGUAGE", "en"),
            sort_by=_get_env("NEWS_SORT_BY", "publishedAt"),
            log_level=_get_env("LOG_LEVEL", "INFO"),
        )

    def __repr__(self) -> str:
        # keep the key out of logs and tracebacks
        return (
            f"Settings(port={self.port}, page_size={self.page_size}, "
            f"request_timeout={self.request_timeout}, news_api_url={self.news_api_url!r})"
        )
