"""Persistence for progress state"""

from wellness_quest.storage.state_store import (
    KeyValueStore,
    JsonFileStore,
    InMemoryStore,
    StateRepository,
)

__all__ = [
    "KeyValueStore",
    "JsonFileStore",
    "InMemoryStore",
    "StateRepository",
]
