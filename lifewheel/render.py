"""
Wheel chart renderer - ChartDataset -> Plotly radar figure -> image bytes.

Pure figure building; no Flask or CLI imports. PNG export goes through
Plotly's static image engine (kaleido). When nothing has been rendered,
or the engine is unavailable, export is a no-op returning None.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

import plotly.graph_objects as go

from models import ChartDataset, ChartSeries

logger = logging.getLogger(__name__)

LABEL_COLOR = "#0f172a"
TICK_COLOR = "#64748b"
GRID_COLOR = "rgba(148, 163, 184, 0.4)"
FONT_FAMILY = 'system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif'


def export_caption(user_name: Optional[str] = None, today: Optional[date] = None) -> str:
    """'Ada · Jan 15, 2024', or just the date when no name is given."""
    today = today or date.today()
    date_string = f"{today:%b} {today.day:02d}, {today.year}"
    trimmed = (user_name or "").strip()
    return f"{trimmed} · {date_string}" if trimmed else date_string


def _closed(values: list, labels: list[str]) -> tuple[list, list[str]]:
    """Repeat the first point so the polygon closes."""
    if not labels:
        return values, labels
    return values + values[:1], labels + labels[:1]


def _trace(series: ChartSeries, labels: list[str]) -> go.Scatterpolar:
    r, theta = _closed(list(series.values), list(labels))
    style = series.style
    return go.Scatterpolar(
        r=r,
        theta=theta,
        name=series.name,
        fill="toself",
        fillcolor=style.background_color,
        mode="lines+markers",
        line=dict(color=style.border_color, width=style.border_width),
        marker=dict(
            color=style.point_background_color,
            size=style.point_radius * 2,
            line=dict(color=style.point_border_color, width=1),
        ),
        hovertemplate="%{theta}: %{r}/10<extra>" + series.name + "</extra>",
    )


def build_wheel_figure(
    dataset: ChartDataset,
    user_name: Optional[str] = None,
    today: Optional[date] = None,
) -> go.Figure:
    """
    Build the radar figure.

    Radial axis is pinned to [axis_min, axis_max] with ticks every
    tick_step, whatever the data, so two renders are always comparable.
    """
    fig = go.Figure()
    for series in dataset.series:
        fig.add_trace(_trace(series, dataset.labels))

    fig.update_layout(
        polar=dict(
            radialaxis=dict(
                range=[dataset.axis_min, dataset.axis_max],
                dtick=dataset.tick_step,
                tick0=dataset.axis_min,
                tickfont=dict(color=TICK_COLOR),
                gridcolor=GRID_COLOR,
            ),
            angularaxis=dict(
                tickfont=dict(size=12, color=LABEL_COLOR),
                gridcolor=GRID_COLOR,
                direction="clockwise",
                rotation=90,
            ),
        ),
        legend=dict(orientation="h", yanchor="top", y=-0.1, xanchor="center", x=0.5),
        font=dict(family=FONT_FAMILY, color=LABEL_COLOR),
        margin=dict(t=48),
        template="plotly_white",
    )
    fig.add_annotation(
        text=export_caption(user_name, today),
        xref="paper",
        yref="paper",
        x=1,
        y=1.08,
        showarrow=False,
        xanchor="right",
        font=dict(size=12, color=LABEL_COLOR),
    )
    return fig


class ChartRenderer:
    """Keeps the last rendered figure so it can be exported on demand."""

    def __init__(self):
        self._figure: Optional[go.Figure] = None

    @property
    def figure(self) -> Optional[go.Figure]:
        return self._figure

    def render(self, dataset: ChartDataset, user_name: Optional[str] = None) -> go.Figure:
        self._figure = build_wheel_figure(dataset, user_name=user_name)
        return self._figure

    def export_image(self, fmt: str = "png") -> Optional[bytes]:
        """Rasterize the last figure. None if nothing to export."""
        if self._figure is None:
            return None
        try:
            return self._figure.to_image(format=fmt)
        except Exception as e:  # kaleido missing, no browser, bad format
            logger.warning("Chart export unavailable: %s", e)
            return None
