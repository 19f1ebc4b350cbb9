"""Application configuration."""
from pydantic_settings import BaseSettings

from searxng_scraper import __version__


class Settings(BaseSettings):
    """App settings from env."""

    # Semicolon-delimited list of SearXNG base URLs
    searxng_base_url: str = ""
    # Default language when the caller omits one, e.g. "en"
    searxng_language: str = ""

    max_retries: int = 5
    retry_backoff_seconds: float = 2.0
    detailed_max_servers: int = 3
    detailed_max_pages: int = 3

    request_timeout_seconds: float = 10.0
    user_agent: str = f"searxng-scraper/{__version__}"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

    def endpoints(self) -> list[str]:
        # Empty entries are dropped later by select_endpoints
        return self.searxng_base_url.split(";") if self.searxng_base_url else []
