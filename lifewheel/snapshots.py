"""
Snapshot manager - saved history plus the single active comparison target.
"""

import logging
from datetime import datetime
from typing import Mapping, Optional, Sequence

from models import Category, Snapshot
from repositories import SnapshotRepository

logger = logging.getLogger(__name__)


class SnapshotManager:
    """
    Owns the in-memory history (newest first) for one session.

    History is read from the repository once, at construction. Every save
    rewrites the whole history; if that write fails the in-memory copy
    stays authoritative until the process ends.
    """

    def __init__(self, repository: SnapshotRepository):
        self._repository = repository
        self._history: list[Snapshot] = repository.load()
        self._active_id: Optional[str] = None
        self.last_save_ok: bool = True

    def create_snapshot(
        self,
        categories: Sequence[Category],
        scores: Mapping[str, int],
        name: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> Snapshot:
        """Capture, prepend and persist. Returns the new snapshot."""
        snapshot = Snapshot.capture(list(categories), dict(scores), name=name, now=now)
        self._history.insert(0, snapshot)
        self.last_save_ok = self._repository.save_all(self._history)
        if not self.last_save_ok:
            logger.warning("Snapshot %s kept in memory only", snapshot.id)
        return snapshot

    def list_snapshots(self) -> list[Snapshot]:
        return list(self._history)

    def get(self, snapshot_id: str) -> Optional[Snapshot]:
        for snapshot in self._history:
            if snapshot.id == snapshot_id:
                return snapshot
        return None

    @property
    def active_comparison_id(self) -> Optional[str]:
        return self._active_id

    def select_for_comparison(self, snapshot_id: str) -> Optional[str]:
        """
        Toggle: the active id clears, any other known id replaces it.
        Unknown ids leave the selection alone. Returns the active id.
        """
        if snapshot_id == self._active_id:
            self._active_id = None
        elif self.get(snapshot_id) is not None:
            self._active_id = snapshot_id
        return self._active_id

    def clear_comparison(self) -> None:
        self._active_id = None

    def comparison_snapshot(self) -> Optional[Snapshot]:
        if self._active_id is None:
            return None
        return self.get(self._active_id)
