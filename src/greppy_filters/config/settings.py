"""Application settings and configuration."""

from pathlib import Path
from dataclasses import dataclass, field
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent


@dataclass
class StorageConfig:
    """Durable local storage settings."""

    path: Path = field(
        default_factory=lambda: Path(
            os.getenv("GREPPY_STORAGE_PATH", str(PROJECT_ROOT / "data" / "greppy_state.db"))
        )
    )


@dataclass
class BackendConfig:
    """Greppy backend connection settings."""

    base_url: str = field(
        default_factory=lambda: os.getenv("GREPPY_BACKEND_URL", "http://127.0.0.1:7878")
    )
    timeout: float = field(
        default_factory=lambda: float(os.getenv("GREPPY_BACKEND_TIMEOUT", "10"))
    )
    retry_attempts: int = field(
        default_factory=lambda: int(os.getenv("GREPPY_BACKEND_RETRIES", "3"))
    )
    list_limit: int = 500


@dataclass
class SearchConfig:
    """Search input behaviour."""

    debounce_ms: int = field(
        default_factory=lambda: int(os.getenv("GREPPY_SEARCH_DEBOUNCE_MS", "300"))
    )

    @property
    def debounce_seconds(self) -> float:
        """Debounce quiet period in seconds."""
        return self.debounce_ms / 1000.0


@dataclass
class AppConfig:
    """Application configuration settings."""

    name: str = field(default_factory=lambda: os.getenv("APP_NAME", "Greppy Filters"))
    version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    project_name: str = field(default_factory=lambda: os.getenv("GREPPY_PROJECT", "project"))
    exports_path: Path = field(
        default_factory=lambda: Path(
            os.getenv("GREPPY_EXPORTS_PATH", str(PROJECT_ROOT / "data" / "exports"))
        )
    )


@dataclass
class Config:
    """Main configuration container."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    backend: BackendConfig = field(default_factory=BackendConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    app: AppConfig = field(default_factory=AppConfig)

    def ensure_directories(self) -> None:
        """Create necessary directories if they don't exist."""
        self.storage.path.parent.mkdir(parents=True, exist_ok=True)
        self.app.exports_path.mkdir(parents=True, exist_ok=True)


# Global config instance
config = Config()
