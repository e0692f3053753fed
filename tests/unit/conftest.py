"""
Unit test fixtures.

All unit tests should be:
- Fast (< 100ms)
- Isolated (no files, no network)
- Deterministic (same result every time)
"""

import pytest
from datetime import datetime, timezone


@pytest.fixture
def fixed_time():
    """Fixed UTC datetime for deterministic tests."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def snapshot_record():
    """Raw stored snapshot, as found under the history key."""
    return {
        "id": "snap-1",
        "name": "January check-in",
        "createdAt": "2024-01-15T12:00:00+00:00",
        "scores": {"A": 1, "B": 2, "D": 9},
        "categories": [
            {"id": "a", "label": "A", "description": ""},
            {"id": "b", "label": "B", "description": ""},
            {"id": "d", "label": "D", "description": ""},
        ],
    }


@pytest.fixture
def memory_repo():
    """Empty in-memory repository."""
    from repositories import MemoryRepository
    return MemoryRepository()


@pytest.fixture
def failing_store():
    """Store whose writes always fail."""
    from repositories import MemoryStore

    class FailingStore(MemoryStore):
        def set_item(self, key, value):
            raise OSError("quota exceeded")

    return FailingStore()
