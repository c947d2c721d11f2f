"""Configuration module for Greppy Filters.

All filter defaults are "no constraint" - an empty filter shows every symbol.
"""

from .settings import (
    config,
    Config,
    StorageConfig,
    BackendConfig,
    SearchConfig,
    AppConfig,
)
from .constants import (
    # Vocabularies
    KIND_OPTIONS,
    STATE_OPTIONS,
    KIND_VALUES,
    STATE_VALUES,
    REFS_OPTIONS,
    # Quick filters and presets
    QUICK_FILTERS,
    DEFAULT_PRESETS,
    DEFAULT_PRESET_IDS,
    # Storage
    STATE_STORAGE_KEY,
    PRESETS_STORAGE_KEY,
    STATE_VERSION,
    # Export
    SYMBOL_CSV_COLUMNS,
)
from .logging_config import setup_logging, get_logger

__all__ = [
    "config",
    "Config",
    "StorageConfig",
    "BackendConfig",
    "SearchConfig",
    "AppConfig",
    "KIND_OPTIONS",
    "STATE_OPTIONS",
    "KIND_VALUES",
    "STATE_VALUES",
    "REFS_OPTIONS",
    "QUICK_FILTERS",
    "DEFAULT_PRESETS",
    "DEFAULT_PRESET_IDS",
    "STATE_STORAGE_KEY",
    "PRESETS_STORAGE_KEY",
    "STATE_VERSION",
    "SYMBOL_CSV_COLUMNS",
    "setup_logging",
    "get_logger",
]
