"""
ScoreStore - current 0-10 rating per category label.
"""

import math
from typing import Optional
from pydantic import Field

from config import DEFAULT_SCORE, MAX_SCORE, MIN_SCORE
from .base import StateModel
from .category import Category

PRIORITY_THRESHOLD = 3
STRENGTH_THRESHOLD = 8


def clamp_score(value: float) -> int:
    """
    Round to the nearest integer and pin to [MIN_SCORE, MAX_SCORE].

    Infinities pin to the nearest bound. NaN has no position on the scale
    and raises ValueError; ScoreStore.set_score screens it out first.
    """
    if isinstance(value, float):
        if math.isnan(value):
            raise ValueError("score must not be NaN")
        if math.isinf(value):
            return MAX_SCORE if value > 0 else MIN_SCORE
    return max(MIN_SCORE, min(MAX_SCORE, int(round(value))))


def score_badge(value: int) -> Optional[str]:
    """UI tag for a score: 'priority' when low, 'strength' when high."""
    if value <= PRIORITY_THRESHOLD:
        return "priority"
    if value >= STRENGTH_THRESHOLD:
        return "strength"
    return None


class ScoreStore(StateModel):
    """
    Mapping label -> score, kept in step with the CategoryRegistry.

    Keyed by display label, so a label change would detach the score.
    """
    scores: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def for_categories(cls, categories: list[Category]) -> "ScoreStore":
        return cls(scores={c.label: DEFAULT_SCORE for c in categories})

    def get(self, label: str) -> Optional[int]:
        return self.scores.get(label)

    def set_score(self, label: str, value: float) -> bool:
        """Clamp and store. Labels without an entry, and NaN values, are ignored."""
        if label not in self.scores or (isinstance(value, float) and math.isnan(value)):
            return False
        self.scores[label] = clamp_score(value)
        return True

    def seed(self, label: str) -> None:
        self.scores[label] = DEFAULT_SCORE

    def discard(self, label: str) -> None:
        self.scores.pop(label, None)

    def copy_scores(self) -> dict[str, int]:
        return dict(self.scores)
