"""
Snapshot - a saved copy of the wheel at one point in time.
"""

import random
import string
import uuid
from datetime import datetime, timezone
from typing import Optional
from pydantic import Field

from .base import RecordModel
from .category import Category

_BASE36 = string.digits + string.ascii_lowercase


def _base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def new_snapshot_id() -> str:
    """Random UUID; pseudo-random base-36 when the OS has no entropy source."""
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        return _base36(random.getrandbits(64))


def default_snapshot_name(created_at: datetime) -> str:
    """'Assessment 2024-01-15 12:00' in local time."""
    local = created_at.astimezone() if created_at.tzinfo else created_at
    return f"Assessment {local:%Y-%m-%d} {local:%H:%M}"


class Snapshot(RecordModel):
    """
    Immutable record of categories + scores at save time.

    Stored with camelCase `createdAt` to match the persisted layout.
    """
    id: str
    name: str
    created_at: datetime = Field(alias="createdAt")
    scores: dict[str, int] = Field(default_factory=dict)
    categories: list[Category] = Field(default_factory=list)

    @classmethod
    def capture(
        cls,
        categories: list[Category],
        scores: dict[str, int],
        name: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> "Snapshot":
        """Copy the live state into a new snapshot."""
        created_at = now or datetime.now(timezone.utc)
        return cls(
            id=new_snapshot_id(),
            name=(name or "").strip() or default_snapshot_name(created_at),
            created_at=created_at,
            scores=dict(scores),
            categories=[c.model_copy() for c in categories],
        )

    @property
    def labels(self) -> list[str]:
        return [c.label for c in self.categories]

    def to_record(self) -> dict:
        """JSON-safe dict in the persisted field layout."""
        return self.model_dump(mode="json", by_alias=True)
