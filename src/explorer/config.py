"""Centralized application settings via pydantic-settings.

Loads configuration from environment variables with the EXPLORER_ prefix.
Defaults target a ledger node running locally. Override via environment
variables for Docker/production deployment.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Examples:
        Point the explorer at a remote ledger node::

            EXPLORER_LEDGER_URL=http://ledger:8080 uv run ledger-explorer

        Allow larger pages::

            EXPLORER_MAX_PAGE_SIZE=500 uv run ledger-explorer
    """

    # Remote ledger
    ledger_url: str = "http://127.0.0.1:8080"
    ledger_timeout_seconds: float = 10.0

    # Pagination
    default_page_size: int = 15
    max_page_size: int = 100

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 4000
    log_level: str = "INFO"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    model_config = {"env_prefix": "EXPLORER_"}

    @model_validator(mode="after")
    def _check_page_sizes(self) -> "Settings":
        if self.max_page_size < 1:
            raise ValueError("max_page_size must be >= 1")
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise ValueError(
                f"default_page_size must be between 1 and {self.max_page_size}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings singleton.

    Uses lru_cache so the Settings object is created once and reused
    across all FastAPI Depends injections.
    """
    return Settings()
