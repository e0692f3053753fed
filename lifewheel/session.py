"""
WheelSession - the one owner of mutable state for a user session.

Registry, scores, snapshot history and the comparison pointer all live
here and change only through these methods. Insights and chart data are
derived fresh on every call.
"""

import logging
from typing import Optional

from plotly.graph_objects import Figure

from models import (
    Category,
    CategoryRegistry,
    ChartDataset,
    InsightResult,
    ScoreStore,
    Snapshot,
    score_badge,
)
from repositories import Repository, get_repository
from .chart_data import build_chart_dataset
from .insights import generate_insights
from .render import ChartRenderer
from .snapshots import SnapshotManager

logger = logging.getLogger(__name__)


class WheelSession:
    """Live wheel for one user, backed by a snapshot repository."""

    def __init__(self, repository: Repository = None, registry: CategoryRegistry = None):
        self.repository = repository or get_repository()
        self.registry = registry or CategoryRegistry()
        self.scores = ScoreStore.for_categories(self.registry.categories)
        self.snapshots = SnapshotManager(self.repository.snapshots)
        self.renderer = ChartRenderer()

    # === Categories & scores ===

    @property
    def categories(self) -> list[Category]:
        return list(self.registry.categories)

    def add_category(self, label: str, description: str = "") -> Optional[Category]:
        """Append an area seeded at the default score. None if rejected."""
        category = self.registry.add(label, description)
        if category is None:
            logger.debug("Ignored category add for %r", label)
            return None
        self.scores.seed(category.label)
        return category

    def can_remove_category(self) -> bool:
        return self.registry.can_remove()

    def remove_category(self, category_id: str) -> Optional[Category]:
        """Drop the area and its score entry. Floor is the caller's call."""
        category = self.registry.remove(category_id)
        if category is not None:
            self.scores.discard(category.label)
        return category

    def set_score(self, label: str, value: float) -> bool:
        return self.scores.set_score(label, value)

    # === Derived views ===

    def insights(self) -> InsightResult:
        return generate_insights(self.registry.categories, self.scores.scores)

    def chart_dataset(self) -> ChartDataset:
        return build_chart_dataset(
            self.registry.labels,
            self.scores.scores,
            self.snapshots.comparison_snapshot(),
        )

    def render_chart(self, user_name: Optional[str] = None) -> Figure:
        return self.renderer.render(self.chart_dataset(), user_name=user_name)

    def export_chart(self, fmt: str = "png") -> Optional[bytes]:
        """Image of the last rendered chart; None before the first render."""
        return self.renderer.export_image(fmt)

    # === Snapshots ===

    def save_snapshot(self, name: Optional[str] = None) -> Snapshot:
        """Save the current wheel and make it the comparison target."""
        snapshot = self.snapshots.create_snapshot(
            self.registry.categories, self.scores.scores, name=name
        )
        self.snapshots.clear_comparison()
        self.snapshots.select_for_comparison(snapshot.id)
        return snapshot

    def list_snapshots(self) -> list[Snapshot]:
        return self.snapshots.list_snapshots()

    def select_for_comparison(self, snapshot_id: str) -> Optional[str]:
        return self.snapshots.select_for_comparison(snapshot_id)

    def clear_comparison(self) -> None:
        self.snapshots.clear_comparison()

    # === Serialization ===

    def state(self) -> dict:
        """JSON-safe view of everything the UI shows."""
        areas = []
        for c in self.registry.categories:
            score = self.scores.get(c.label)
            areas.append({
                **c.model_dump(),
                "score": score,
                "badge": score_badge(score) if score is not None else None,
            })
        return {
            "categories": areas,
            "can_remove": self.can_remove_category(),
            "insights": self.insights().model_dump(),
            "chart": self.chart_dataset().model_dump(),
            "snapshots": [s.to_record() for s in self.list_snapshots()],
            "active_comparison_id": self.snapshots.active_comparison_id,
        }
