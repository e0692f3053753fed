"""
Repository base classes - define the interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from models import Snapshot


class KeyValueStore(ABC):
    """String key -> string document. Writes replace the whole document."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Get raw document, or None if absent."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Replace the document. May raise OSError on storage failure."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> bool:
        """Delete document. Returns True if deleted."""
        pass

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check if a document is stored under key."""
        pass


class SnapshotRepository(ABC):
    """Repository for the snapshot history (newest first)."""

    @abstractmethod
    def load(self) -> list[Snapshot]:
        """Load the full history. Never raises; bad data loads as []."""
        pass

    @abstractmethod
    def save_all(self, snapshots: list[Snapshot]) -> bool:
        """Rewrite the full history. Returns False if the write failed."""
        pass


class Repository:
    """
    Aggregate repository - provides access to all entity repositories.

    This is what consumers use. Backend implementations provide
    concrete versions of each sub-repository.
    """

    @property
    @abstractmethod
    def store(self) -> KeyValueStore:
        """Access the underlying key-value store."""
        pass

    @property
    @abstractmethod
    def snapshots(self) -> SnapshotRepository:
        """Access snapshot repository."""
        pass
