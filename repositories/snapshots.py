"""
Snapshot history stored as one JSON array under a fixed namespace key.

Layout:
    [
      {"id": ..., "name": ..., "createdAt": "<ISO-8601>",
       "scores": {label: 0-10}, "categories": [{"id", "label", "description"}]},
      ...
    ]
"""

import json
import logging

from pydantic import ValidationError

from config import STORAGE_KEY
from models import Snapshot
from .base import KeyValueStore, SnapshotRepository

logger = logging.getLogger(__name__)


class StoredSnapshotRepository(SnapshotRepository):
    """Snapshot history on top of any KeyValueStore."""

    def __init__(self, store: KeyValueStore, key: str = STORAGE_KEY):
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Snapshot]:
        try:
            raw = self._store.get_item(self._key)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Snapshot store unreadable (%s): %s", self._key, e)
            return []
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Corrupt snapshot history under %s: %s", self._key, e)
            return []
        if not isinstance(data, list):
            logger.warning("Snapshot history under %s is not a list, ignoring", self._key)
            return []

        snapshots = []
        for index, item in enumerate(data):
            try:
                snapshots.append(Snapshot.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping malformed snapshot #%d: %s", index, e.error_count())
        return snapshots

    def save_all(self, snapshots: list[Snapshot]) -> bool:
        try:
            payload = json.dumps([s.to_record() for s in snapshots])
            self._store.set_item(self._key, payload)
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Snapshot history not persisted: %s", e)
            return False
        return True
