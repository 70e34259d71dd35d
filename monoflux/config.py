"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) - single instance per process
    - create_app() accepts an explicit Settings so tests never touch the cache

Design Decisions:
    - Defaults reproduce the demo out-of-the-box (1s simulated fetch, maxPrice=500, threshold=15)
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Application
    app_name: str = "MonoFluxDemo"
    app_description: str = "FastAPI demo to learn single-value vs multi-value publishers"

    # Simulated latency for the delayed single-value fetch
    user_fetch_delay_ms: int = Field(1000, ge=0)

    # Query defaults for the multi-value routes
    default_max_price: float = 500.0
    default_low_stock_threshold: int = 15

    # API
    cors_origins: list[str] = ["http://localhost:5173"]
    host: str = "127.0.0.1"
    port: int = 8080

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
