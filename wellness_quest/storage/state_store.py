"""
Progress state persistence

The state is stored as one JSON blob under a single key. Stores only move
strings around; StateRepository handles (de)serialization and the recovery
rules:

- Missing or unreadable blob on load -> default state (logged, never raised)
- Failed save -> logged, in-memory state stays authoritative, no retry
"""
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

from pydantic import ValidationError as PydanticValidationError

from wellness_quest.config import DATA_PATH, STATE_STORAGE_KEY
from wellness_quest.exceptions import StorageError, wrap_storage_exception
from wellness_quest.models.progress import ProgressState

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Minimal key-value interface the core persists through"""

    def load(self, key: str) -> Optional[str]:
        """Stored blob, or None if the key is absent"""
        ...

    def save(self, key: str, blob: str) -> None:
        """Store a blob; raises StorageError on failure"""
        ...


class JsonFileStore:
    """One ``<key>.json`` file per key under a data directory"""

    def __init__(self, data_path: Path = DATA_PATH):
        self.data_path = Path(data_path)

    def get_path(self, key: str) -> Path:
        return self.data_path / f"{key}.json"

    def load(self, key: str) -> Optional[str]:
        filepath = self.get_path(key)
        if not filepath.exists():
            return None
        try:
            return filepath.read_text(encoding="utf-8")
        except (OSError, UnicodeError) as e:
            raise wrap_storage_exception(e, operation="load", key=key)

    def save(self, key: str, blob: str) -> None:
        filepath = self.get_path(key)
        tmp_path = filepath.with_suffix(".json.tmp")
        try:
            self.data_path.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(blob, encoding="utf-8")
            tmp_path.replace(filepath)
        except OSError as e:
            try:
                tmp_path.unlink(missing_ok=True)
            except OSError as cleanup_error:
                logger.warning(f"Could not remove {tmp_path}: {cleanup_error}")
            raise wrap_storage_exception(e, operation="save", key=key)
        logger.debug(f"Saved {key} to {filepath}")


class InMemoryStore:
    """Dict-backed store for tests and throwaway sessions"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def save(self, key: str, blob: str) -> None:
        self._data[key] = blob


class StateRepository:
    """Loads and saves ProgressState through a KeyValueStore"""

    def __init__(self, store: KeyValueStore, key: str = STATE_STORAGE_KEY):
        self.store = store
        self.key = key

    def load_state(self) -> ProgressState:
        """
        Load saved progress

        Returns:
            Saved state, or a fresh default state when nothing usable is stored
        """
        try:
            raw = self.store.load(self.key)
        except (StorageError, OSError):
            logger.warning(f"Could not read {self.key}, starting from default state")
            return ProgressState()

        if not raw:
            logger.info(f"No saved state under {self.key}, starting fresh")
            return ProgressState()

        try:
            return ProgressState.model_validate_json(raw)
        except PydanticValidationError as e:
            logger.warning(f"Saved state under {self.key} is malformed, starting from default state: {e}")
            return ProgressState()

    def save_state(self, state: ProgressState) -> bool:
        """
        Persist progress

        Returns:
            True on success, False if the write failed (logged, not raised)
        """
        blob = state.model_dump_json(by_alias=True)
        try:
            self.store.save(self.key, blob)
        except (StorageError, OSError) as e:
            logger.error(f"Failed to save state under {self.key}: {e}")
            return False
        return True
