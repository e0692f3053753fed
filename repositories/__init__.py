"""
Repository layer - abstracts persistence.

Usage:
    from repositories import get_repository

    repo = get_repository()  # Returns configured backend
    history = repo.snapshots.load()
    repo.snapshots.save_all(history)

Backends are swappable via config.
"""

from config import STORAGE_BACKEND
from .base import KeyValueStore, Repository, SnapshotRepository
from .json_backend import JsonFileStore, JsonRepository
from .memory_backend import MemoryRepository, MemoryStore
from .snapshots import StoredSnapshotRepository

# Default backend - can be changed via config
_backend: str = STORAGE_BACKEND
_backend_kwargs: dict = {}
_instance: Repository = None


def get_repository() -> Repository:
    """Get the configured repository instance."""
    global _instance

    if _instance is None:
        if _backend == "json":
            _instance = JsonRepository(**_backend_kwargs)
        elif _backend == "memory":
            _instance = MemoryRepository(**_backend_kwargs)
        else:
            raise ValueError(f"Unknown backend: {_backend}")

    return _instance


def configure_backend(backend: str, **kwargs) -> None:
    """Configure the repository backend."""
    global _backend, _backend_kwargs, _instance
    _backend = backend
    _backend_kwargs = kwargs
    _instance = None  # Force re-initialization


__all__ = [
    "get_repository",
    "configure_backend",
    "Repository",
    "KeyValueStore",
    "SnapshotRepository",
    "StoredSnapshotRepository",
    "JsonFileStore",
    "JsonRepository",
    "MemoryStore",
    "MemoryRepository",
]
