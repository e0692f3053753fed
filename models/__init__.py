"""
Domain models - single source of truth for the wheel's state and records.

Design principles:
- Every entity defined once
- Records (categories, snapshots) are immutable
- Session state mutates only through model methods
- Backend-agnostic (repository handles persistence)
"""

from .base import StateModel, RecordModel
from .category import Category, CategoryRegistry, DEFAULT_CATEGORIES, DEFAULT_DESCRIPTION, slugify
from .scores import ScoreStore, clamp_score, score_badge
from .snapshot import Snapshot, new_snapshot_id, default_snapshot_name
from .insights import InsightResult, ChartDataset, ChartSeries, SeriesStyle

__all__ = [
    # Base
    "StateModel",
    "RecordModel",
    # Categories
    "Category",
    "CategoryRegistry",
    "DEFAULT_CATEGORIES",
    "DEFAULT_DESCRIPTION",
    "slugify",
    # Scores
    "ScoreStore",
    "clamp_score",
    "score_badge",
    # Snapshots
    "Snapshot",
    "new_snapshot_id",
    "default_snapshot_name",
    # Derived
    "InsightResult",
    "ChartDataset",
    "ChartSeries",
    "SeriesStyle",
]
