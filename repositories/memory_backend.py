"""
In-memory backend - nothing survives the process.

Used by tests and throwaway sessions.
"""

from typing import Optional

from config import STORAGE_KEY
from .base import KeyValueStore, Repository, SnapshotRepository
from .snapshots import StoredSnapshotRepository


class MemoryStore(KeyValueStore):
    """Dict-backed key-value store."""

    def __init__(self, initial: dict[str, str] = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> bool:
        return self._items.pop(key, None) is not None

    def exists(self, key: str) -> bool:
        return key in self._items


class MemoryRepository(Repository):
    """In-memory backend implementation."""

    def __init__(self, store: KeyValueStore = None, key: str = STORAGE_KEY):
        self._store = store or MemoryStore()
        self._snapshots = StoredSnapshotRepository(self._store, key)

    @property
    def store(self) -> KeyValueStore:
        return self._store

    @property
    def snapshots(self) -> SnapshotRepository:
        return self._snapshots
