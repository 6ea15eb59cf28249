"""Pydantic Settings — loads configuration from environment variables."""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    unsplash_access_key: str = ""
    unsplash_api_url: str = "https://api.unsplash.com"

    photo_count: int = 10
    photo_query: str = "beach"

    scroll_threshold_px: int = 1000
    scroll_debounce_ms: int = 200

    max_sessions: int = 100

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    @property
    def scroll_debounce_seconds(self) -> float:
        return self.scroll_debounce_ms / 1000


def check_access_key(settings: Settings) -> bool:
    """Log when the Unsplash key is missing. Requests are still attempted."""
    if not settings.unsplash_access_key:
        logger.error("UNSPLASH_ACCESS_KEY is not defined, photo requests will be rejected upstream")
        return False
    return True


@lru_cache
def get_settings() -> Settings:
    return Settings()
