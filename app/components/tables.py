"""Tabular component for the property performance table."""

from __future__ import annotations

from typing import Optional, Sequence

import pandas as pd
import streamlit as st

from insights.models.property import PropertyRecord, ScoreTier

from .cards import status_label

_TIER_STYLE = {
    ScoreTier.STRONG: "background-color: #d1fae5; color: #065f46",
    ScoreTier.FAIR: "background-color: #fef3c7; color: #92400e",
    ScoreTier.WEAK: "background-color: #fee2e2; color: #991b1b",
}


def _fmt_currency(value: Optional[float]) -> str:
    if value is None:
        return "—"
    return f"${value:,.0f}"


def _fmt_percent(value: Optional[float]) -> str:
    if value is None:
        return "—"
    return f"{value:g}%"


def records_frame(records: Sequence[PropertyRecord]) -> pd.DataFrame:
    rows = [
        {
            "Address": record.address,
            "Type": record.property_type,
            "Rent": _fmt_currency(record.rent),
            "Occupancy": _fmt_percent(record.occupancy),
            "Score": record.performance_score,
            "Status": status_label(record.status),
        }
        for record in records
    ]
    return pd.DataFrame(rows, columns=["Address", "Type", "Rent", "Occupancy", "Score", "Status"])


def render_property_table(records: Sequence[PropertyRecord]) -> None:
    if not records:
        st.info("No properties match the current search and filter.")
        return
    df = records_frame(records)
    tiers = [record.score_tier for record in records]
    styled = df.style.apply(
        lambda column: [_TIER_STYLE[tier] for tier in tiers],
        subset=["Score"],
    ).format({"Score": "{:g}"})
    st.dataframe(styled, hide_index=True, width="stretch")
