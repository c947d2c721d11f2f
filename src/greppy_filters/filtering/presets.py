"""Named filter presets.

A preset is a saved query string. Presets are independent of the live
FilterEngine: saving captures the current spec through the serializer, and
applying one feeds its query back through the parser.
"""

import time
import uuid
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from greppy_filters.config import DEFAULT_PRESETS, PRESETS_STORAGE_KEY
from greppy_filters.config.logging_config import get_logger
from greppy_filters.exceptions import StorageError
from greppy_filters.storage import KeyValueStorage

logger = get_logger("presets")


@dataclass(frozen=True)
class Preset:
    """A saved filter query."""

    id: str
    name: str
    query: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for storage."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Preset":
        """Create from dictionary."""
        return cls(id=str(data["id"]), name=str(data["name"]), query=str(data.get("query", "")))


def default_presets() -> List[Preset]:
    """The built-in preset set used when nothing has been saved."""
    return [Preset.from_dict(p) for p in DEFAULT_PRESETS]


def generate_preset_id() -> str:
    """Millisecond timestamp plus a random suffix, unique under rapid calls."""
    return f"preset-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"


class PresetStore:
    """Durable list of presets kept under a single storage key."""

    def __init__(self, storage: KeyValueStorage, key: str = PRESETS_STORAGE_KEY):
        """
        Initialize the store.

        Args:
            storage: Durable storage backend.
            key: Storage key holding the preset list.
        """
        self.storage = storage
        self.key = key

    def load(self) -> List[Preset]:
        """
        Load saved presets.

        Returns:
            Stored presets, or the built-in defaults when nothing is stored or
            the stored value cannot be read.
        """
        try:
            stored = self.storage.get_json(self.key)
        except StorageError as e:
            logger.error(f"Failed to load presets: {e}")
            return default_presets()

        if stored is None:
            return default_presets()
        if not isinstance(stored, list):
            logger.error(f"Failed to load presets: expected a list, got {type(stored).__name__}")
            return default_presets()

        presets = []
        for entry in stored:
            try:
                presets.append(Preset.from_dict(entry))
            except (KeyError, TypeError) as e:
                logger.warning(f"Skipping malformed preset {entry!r}: {e}")
        return presets

    def save(self, presets: List[Preset]) -> None:
        """Overwrite the stored list. Failures are logged, not raised."""
        try:
            self.storage.set_json(self.key, [p.to_dict() for p in presets])
        except StorageError as e:
            logger.error(f"Failed to save presets: {e}")

    def add(self, name: str, query: str) -> Preset:
        """
        Append a new preset.

        Args:
            name: Display name.
            query: Filter query string.

        Returns:
            The created preset.
        """
        presets = self.load()
        preset = Preset(id=generate_preset_id(), name=name, query=query)
        presets.append(preset)
        self.save(presets)
        logger.debug(f"Added preset {preset.id} ({name!r})")
        return preset

    def remove(self, preset_id: str) -> None:
        """Remove the preset with preset_id; other presets are untouched."""
        presets = [p for p in self.load() if p.id != preset_id]
        self.save(presets)

    def get(self, preset_id: str) -> Optional[Preset]:
        """Look up a preset by id."""
        for preset in self.load():
            if preset.id == preset_id:
                return preset
        return None
