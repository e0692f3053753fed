"""
Category - a life area on the wheel, and the ordered registry that holds them.
"""

import re
import time
from typing import Optional
from pydantic import Field

from config import MIN_CATEGORIES
from .base import RecordModel, StateModel

DEFAULT_DESCRIPTION = "A custom area of life that matters to you."


class Category(RecordModel):
    """A rated life area. `label` doubles as the score lookup key."""
    id: str
    label: str
    description: str = ""


DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category(
        id="health",
        label="Health & Energy",
        description="Physical health, sleep, energy, and overall wellbeing.",
    ),
    Category(
        id="career",
        label="Career & Work",
        description="Progress, fulfillment, and alignment at work or in studies.",
    ),
    Category(
        id="relationships",
        label="Relationships",
        description="Family, friends, partner, and social support.",
    ),
    Category(
        id="finance",
        label="Finances",
        description="Income, savings, security, and money habits.",
    ),
    Category(
        id="growth",
        label="Personal Growth",
        description="Learning, mindset, and self-development.",
    ),
    Category(
        id="fun",
        label="Fun & Recreation",
        description="Play, hobbies, and activities that recharge you.",
    ),
    Category(
        id="environment",
        label="Environment",
        description="Home, workspace, and surroundings.",
    ),
    Category(
        id="spirituality",
        label="Meaning & Spirituality",
        description="Purpose, values, and connection to something bigger.",
    ),
)


def slugify(label: str) -> str:
    """'Side Projects!!' -> 'side-projects'"""
    slug = re.sub(r"[^a-z0-9]+", "-", label.lower())
    return slug.strip("-")


class CategoryRegistry(StateModel):
    """
    Ordered set of categories.

    Insertion order is display order and sets each area's angle on the chart.
    """
    categories: list[Category] = Field(default_factory=lambda: list(DEFAULT_CATEGORIES))

    @property
    def labels(self) -> list[str]:
        return [c.label for c in self.categories]

    def get(self, category_id: str) -> Optional[Category]:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def find_label(self, label: str) -> Optional[Category]:
        """Case-insensitive label lookup."""
        wanted = label.strip().lower()
        for category in self.categories:
            if category.label.lower() == wanted:
                return category
        return None

    def add(self, label: str, description: str = "") -> Optional[Category]:
        """
        Append a category. Returns None (no-op) for a blank or duplicate label.
        """
        trimmed = (label or "").strip()
        if not trimmed or self.find_label(trimmed):
            return None

        category = Category(
            id=self._unique_id(slugify(trimmed)),
            label=trimmed,
            description=(description or "").strip() or DEFAULT_DESCRIPTION,
        )
        self.categories.append(category)
        return category

    def remove(self, category_id: str) -> Optional[Category]:
        """Drop a category by id. No floor is enforced here, see can_remove()."""
        category = self.get(category_id)
        if category is None:
            return None
        self.categories.remove(category)
        return category

    def can_remove(self) -> bool:
        """Whether one more removal keeps the wheel at MIN_CATEGORIES."""
        return len(self.categories) > MIN_CATEGORIES

    def _unique_id(self, slug: str) -> str:
        base = slug or f"custom-{int(time.time() * 1000)}"
        taken = {c.id for c in self.categories}
        candidate = base
        suffix = 2
        while candidate in taken:
            candidate = f"{base}-{suffix}"
            suffix += 1
        return candidate
