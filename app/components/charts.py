"""Plotly chart helpers for Streamlit UI."""

from __future__ import annotations

from typing import Sequence

import plotly.graph_objects as go

from insights.models.analytics import PropertyTypeCount, RentTrendPoint

PIE_COLORS = ["#3b82f6", "#10b981", "#f59e0b", "#ef4444"]


def render_rent_trend_chart(points: Sequence[RentTrendPoint], title: str = "Rent Trends (6 Months)") -> go.Figure:
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=[p.month for p in points],
            y=[p.avg_rent for p in points],
            name="Avg Rent ($)",
            mode="lines+markers",
            line=dict(color="#3b82f6", width=2, shape="spline"),
        )
    )
    fig.update_layout(
        title=title,
        margin=dict(l=10, r=10, t=40, b=30),
        height=300,
        yaxis_title="Avg Rent ($)",
        template="plotly_white",
        showlegend=True,
    )
    return fig


def render_distribution_chart(counts: Sequence[PropertyTypeCount], title: str = "Portfolio Distribution") -> go.Figure:
    colors = [PIE_COLORS[idx % len(PIE_COLORS)] for idx in range(len(counts))]
    fig = go.Figure(
        go.Pie(
            labels=[c.name for c in counts],
            values=[c.value for c in counts],
            marker=dict(colors=colors),
            textinfo="label+percent",
            texttemplate="%{label} %{percent:.0%}",
            sort=False,
        )
    )
    fig.update_layout(
        title=title,
        margin=dict(l=10, r=10, t=40, b=30),
        height=300,
        template="plotly_white",
        showlegend=False,
    )
    return fig
