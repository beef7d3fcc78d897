import sys
from functools import lru_cache

from pydantic_settings import BaseSettings

from newsapi_mcp.services.news import NEWS_API_BASE


class Settings(BaseSettings):
    """Read from the process environment only."""

    news_api_key: str = ""
    news_api_base_url: str = NEWS_API_BASE
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def load_api_key(settings: Settings) -> str:
    """Return the NewsAPI key, or exit the process with status 1 if it is not set."""
    key = settings.news_api_key.strip()
    if not key:
        print("ERROR: NEWS_API_KEY environment variable is not set", file=sys.stderr)
        sys.exit(1)
    return key
