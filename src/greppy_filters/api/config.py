"""FastAPI application settings."""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
import os


def _parse_cors_origins() -> list[str]:
    """Parse CORS origins from environment variable."""
    cors_env = os.getenv("GREPPY_CORS_ORIGINS", "")
    if cors_env:
        return [origin.strip() for origin in cors_env.split(",")]
    # Default development origins
    return ["http://localhost:3000", "http://localhost:5173", "http://127.0.0.1:7878"]


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(env_prefix="GREPPY_")

    # App info
    app_name: str = "Greppy Filters API"
    version: str = "1.0.0"
    debug: bool = False

    # Storage for presets and persisted filters
    storage_path: Path = Path(__file__).parent.parent.parent.parent / "data" / "greppy_state.db"

    # CORS - configurable via GREPPY_CORS_ORIGINS (comma separated)
    allowed_origins: list[str] = _parse_cors_origins()

    # Upper bound on records accepted by /api/search/filter
    max_filter_records: int = 50000

    host: str = "127.0.0.1"
    port: int = 8000


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
