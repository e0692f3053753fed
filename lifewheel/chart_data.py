"""
Chart data adapter - live scores (and an optional snapshot) as radar series.

Both series follow the *current* label order. A label added since the
snapshot compares against 0; a label that only exists in the snapshot is
dropped, since comparisons only make sense for areas that still exist.
"""

from typing import Mapping, Optional, Sequence

from models import ChartDataset, ChartSeries, SeriesStyle, Snapshot

CURRENT_SERIES_NAME = "Current Assessment"
COMPARISON_FALLBACK_NAME = "Previous Assessment"

CURRENT_STYLE = SeriesStyle(
    background_color="rgba(59, 130, 246, 0.25)",
    border_color="rgba(37, 99, 235, 1)",
    point_background_color="rgba(37, 99, 235, 1)",
    point_radius=4,
)

COMPARISON_STYLE = SeriesStyle(
    background_color="rgba(16, 185, 129, 0.2)",
    border_color="rgba(5, 150, 105, 1)",
    point_background_color="rgba(5, 150, 105, 1)",
    point_radius=3,
)


def series_values(labels: Sequence[str], scores: Mapping[str, float]) -> list[float]:
    """Scores in label order, 0 for anything missing."""
    return [scores.get(label, 0) for label in labels]


def build_chart_dataset(
    labels: Sequence[str],
    scores: Mapping[str, float],
    comparison: Optional[Snapshot] = None,
) -> ChartDataset:
    """Current series, plus the comparison series when a snapshot is active."""
    labels = list(labels)
    series = [
        ChartSeries(
            name=CURRENT_SERIES_NAME,
            values=series_values(labels, scores),
            style=CURRENT_STYLE,
        )
    ]

    if comparison is not None:
        series.append(
            ChartSeries(
                name=comparison.name or COMPARISON_FALLBACK_NAME,
                values=series_values(labels, comparison.scores),
                style=COMPARISON_STYLE,
            )
        )

    return ChartDataset(labels=labels, series=series)
