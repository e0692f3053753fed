"""
Lifewheel - scoring, insight and comparison pipeline for the Wheel of Life.

Modules:
- insights: Rank the lowest areas and derive summary/highlights/actions
- chart_data: Align live scores and a snapshot into radar series
- snapshots: Saved history and the active comparison target
- render: Plotly radar figure and image export
- session: Owns the live state and wires the pieces together
"""

from .insights import (
    ACTION_SUGGESTIONS,
    FALLBACK_ACTION_TEMPLATE,
    PLACEHOLDER_SUMMARY,
    generate_insights,
    rank_priorities,
    suggest_for_category,
)
from .chart_data import build_chart_dataset, series_values
from .snapshots import SnapshotManager
from .render import ChartRenderer, build_wheel_figure, export_caption
from .session import WheelSession

__all__ = [
    # insights
    'ACTION_SUGGESTIONS',
    'FALLBACK_ACTION_TEMPLATE',
    'PLACEHOLDER_SUMMARY',
    'generate_insights',
    'rank_priorities',
    'suggest_for_category',
    # chart_data
    'build_chart_dataset',
    'series_values',
    # snapshots
    'SnapshotManager',
    # render
    'ChartRenderer',
    'build_wheel_figure',
    'export_caption',
    # session
    'WheelSession',
]
