"""
Derived views - insight panel content and chart datasets.

Never persisted; recomputed from session state on demand.
"""

from typing import Optional
from pydantic import Field

from config import CHART_AXIS_MAX, CHART_AXIS_MIN, CHART_TICK_STEP
from .base import RecordModel


class InsightResult(RecordModel):
    """Summary sentence plus the ranked highlights/actions for the priority set."""
    summary: str
    highlights: list[str] = Field(default_factory=list)
    actions: list[str] = Field(default_factory=list)


class SeriesStyle(RecordModel):
    """Colours and point sizing handed to the renderer."""
    background_color: str
    border_color: str
    point_background_color: str
    point_border_color: str = "#ffffff"
    border_width: int = 2
    point_radius: int = 4


class ChartSeries(RecordModel):
    """One polygon on the wheel, aligned 1:1 with ChartDataset.labels."""
    name: str
    values: list[float]
    style: SeriesStyle


class ChartDataset(RecordModel):
    """Labels (angular order) plus one or two series."""
    labels: list[str]
    series: list[ChartSeries]
    axis_min: int = CHART_AXIS_MIN
    axis_max: int = CHART_AXIS_MAX
    tick_step: int = CHART_TICK_STEP

    @property
    def current(self) -> ChartSeries:
        return self.series[0]

    @property
    def comparison(self) -> Optional[ChartSeries]:
        return self.series[1] if len(self.series) > 1 else None
