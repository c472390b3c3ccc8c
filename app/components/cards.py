"""Streamlit components for stat cards and record badges."""

from __future__ import annotations

import html
from typing import List, NamedTuple, Optional

import streamlit as st

from insights.models.analytics import AnalyticsSummary
from insights.models.property import OccupancyStatus, PropertyRecord, ScoreTier

_TIER_TONE = {
    ScoreTier.STRONG: "success",
    ScoreTier.FAIR: "warning",
    ScoreTier.WEAK: "danger",
}

_STATUS_ICON = {
    OccupancyStatus.OCCUPIED: "🟢",
    OccupancyStatus.AVAILABLE: "⚠️",
}

# Static captions carried over from the first dashboard; not computed from data.
REVENUE_TREND = "+12% from last month"
OCCUPANCY_TREND = "+5% from last month"


class StatCard(NamedTuple):
    label: str
    value: str
    trend: Optional[str] = None


def score_badge(tier: ScoreTier) -> str:
    return f"score-badge score-{_TIER_TONE[tier]}"


def status_label(status: OccupancyStatus) -> str:
    return f"{_STATUS_ICON[status]} {status.value}"


def stat_cards(analytics: AnalyticsSummary) -> List[StatCard]:
    return [
        StatCard("Total Monthly Revenue", f"${analytics.total_revenue:,.0f}", REVENUE_TREND),
        StatCard("Total Properties", str(analytics.total_properties)),
        StatCard("Avg Occupancy Rate", f"{analytics.avg_occupancy}%", OCCUPANCY_TREND),
        StatCard("Avg Performance Score", analytics.avg_score),
    ]


def render_stat_card(card: StatCard) -> None:
    with st.container(border=True):
        st.metric(card.label, card.value, delta=card.trend)


def detail_card_html(record: PropertyRecord) -> str:
    address = html.escape(record.address)
    property_type = html.escape(record.property_type)
    return f"""
        <div class="property-card">
            <div class="property-card__header">
                <span class="{score_badge(record.score_tier)}">{record.performance_score:g}</span>
                <span>{status_label(record.status)}</span>
            </div>
            <h3>{address}</h3>
            <p class="property-card__meta">{property_type} · {record.occupancy}% occupied</p>
            <p class="property-card__value">${record.rent:,}/mo</p>
        </div>
    """


def render_detail_card(record: PropertyRecord) -> None:
    st.markdown(detail_card_html(record), unsafe_allow_html=True)
