"""
JSON file backend - one file per store key.

Directory structure:
    {data_dir}/
        wheel-of-life-assessments_v1.json   - snapshot history
"""

import re
import threading
from pathlib import Path
from typing import Optional

from config import DATA_DIR, STORAGE_KEY
from .base import KeyValueStore, Repository, SnapshotRepository
from .snapshots import StoredSnapshotRepository


class WriteQueue:
    """Thread-safe write serialization."""

    def __init__(self):
        self._lock = threading.Lock()

    def write_text(self, path: Path, text: str) -> None:
        """Atomic write: temp file, then rename over the target."""
        with self._lock:
            temp = path.with_suffix(path.suffix + ".tmp")
            with open(temp, "w", encoding="utf-8") as f:
                f.write(text)
            temp.replace(path)


_write_queue = WriteQueue()


def key_to_filename(key: str) -> str:
    """'wheel-of-life-assessments:v1' -> 'wheel-of-life-assessments_v1.json'"""
    return re.sub(r"[^A-Za-z0-9._-]+", "_", key) + ".json"


class JsonFileStore(KeyValueStore):
    """Key-value store backed by JSON files in a directory."""

    def __init__(self, base_path: Path = None):
        self._base_path = Path(base_path or DATA_DIR)

    def _path(self, key: str) -> Path:
        return self._base_path / key_to_filename(key)

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        with open(path, encoding="utf-8") as f:
            return f.read()

    def set_item(self, key: str, value: str) -> None:
        self._base_path.mkdir(parents=True, exist_ok=True)
        _write_queue.write_text(self._path(key), value)

    def remove_item(self, key: str) -> bool:
        path = self._path(key)
        if not path.exists():
            return False
        path.unlink()
        return True

    def exists(self, key: str) -> bool:
        return self._path(key).exists()


class JsonRepository(Repository):
    """JSON file backend implementation."""

    def __init__(self, base_path: Path = None, key: str = STORAGE_KEY):
        self._store = JsonFileStore(base_path)
        self._snapshots = StoredSnapshotRepository(self._store, key)

    @property
    def store(self) -> KeyValueStore:
        return self._store

    @property
    def snapshots(self) -> SnapshotRepository:
        return self._snapshots
