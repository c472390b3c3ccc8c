"""Streamlit UI for the Property Insights dashboard."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import sys

import streamlit as st

try:
    from dotenv import load_dotenv
except ImportError:  # pragma: no cover - optional dependency
    load_dotenv = None

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

if load_dotenv is not None:
    load_dotenv(dotenv_path=ROOT_DIR / ".env", override=False)

from app.components.cards import render_detail_card, render_stat_card, stat_cards
from app.components.charts import render_distribution_chart, render_rent_trend_chart
from app.components.forms import render_delete_confirmation, render_property_form
from app.components.tables import render_property_table
from insights.config import SORT_KEYS
from insights.db.api_client import PropertiesAPIClient
from insights.models.state import LoadStatus, NoticeLevel
from insights.services.controller import DashboardController

st.set_page_config(page_title="AI Property Insights", layout="wide", page_icon="🏠")

SORT_LABELS = {"address": "Address", "rent": "Rent", "occupancy": "Occupancy", "score": "Score"}


@st.cache_resource(show_spinner=False)
def get_api_client() -> PropertiesAPIClient:
    return PropertiesAPIClient()


def get_controller() -> DashboardController:
    controller = st.session_state.get("controller")
    if controller is None:
        controller = DashboardController(get_api_client())
        st.session_state["controller"] = controller
    if controller.state.status is LoadStatus.LOADING:
        with st.spinner("Loading Property Analytics..."):
            controller.refresh()
    return controller


def load_styles() -> None:
    css_path = Path(__file__).resolve().parent / "assets" / "styles.css"
    if css_path.exists():
        st.markdown(f"<style>{css_path.read_text()}</style>", unsafe_allow_html=True)


def render_header(controller: DashboardController) -> None:
    title_col, refresh_col = st.columns([5, 1])
    with title_col:
        st.title("🏠 AI Property Insights")
        st.caption("Real-time analytics for your rental portfolio")
    with refresh_col:
        if st.button("🔄 Refresh", width="stretch"):
            with st.spinner("Refreshing..."):
                controller.refresh()
            st.rerun()


def render_error_screen(controller: DashboardController) -> None:
    st.error(f"Could not load the portfolio: {controller.state.error}")
    if st.button("Retry", type="primary"):
        with st.spinner("Retrying..."):
            controller.refresh()
        st.rerun()


def render_notice(controller: DashboardController) -> None:
    notice = controller.state.notice
    if notice is None:
        return
    message_col, dismiss_col = st.columns([8, 1])
    with message_col:
        if notice.level is NoticeLevel.SUCCESS:
            st.success(notice.message)
        else:
            st.error(notice.message)
    with dismiss_col:
        st.button("Dismiss", key="dismiss-notice", on_click=controller.dismiss_notice)


def render_summary(controller: DashboardController) -> None:
    analytics = controller.state.analytics
    if analytics is None:
        return
    for col, card in zip(st.columns(4), stat_cards(analytics)):
        with col:
            render_stat_card(card)

    trend_col, mix_col = st.columns(2)
    with trend_col:
        st.plotly_chart(render_rent_trend_chart(analytics.rent_trends), use_container_width=True)
    with mix_col:
        st.plotly_chart(render_distribution_chart(analytics.property_types), use_container_width=True)


def render_filters(controller: DashboardController) -> None:
    criteria = controller.state.criteria
    options = controller.filter_options
    search_col, type_col, sort_col = st.columns([3, 1, 1])
    with search_col:
        st.text_input(
            "Search by address",
            value=criteria.search_term,
            key="search_term",
            on_change=lambda: controller.set_search(st.session_state["search_term"]),
        )
    with type_col:
        st.selectbox(
            "Type",
            options,
            index=options.index(criteria.filter_type) if criteria.filter_type in options else 0,
            key="filter_type",
            on_change=lambda: controller.set_filter_type(st.session_state["filter_type"]),
        )
    with sort_col:
        st.selectbox(
            "Sort by",
            SORT_KEYS,
            index=SORT_KEYS.index(criteria.sort_by) if criteria.sort_by in SORT_KEYS else 0,
            format_func=SORT_LABELS.get,
            key="sort_by",
            on_change=lambda: controller.set_sort_by(st.session_state["sort_by"]),
        )


def render_table_section(controller: DashboardController) -> None:
    state = controller.state
    header_col, add_col, export_col = st.columns([4, 1, 1])
    with header_col:
        st.subheader("Property Performance Details")
    with add_col:
        st.button("➕ Add Property", on_click=controller.open_create_form, width="stretch")
    with export_col:
        st.download_button(
            "📥 Export CSV",
            data=controller.export_csv(),
            file_name=f"properties_{datetime.now().strftime('%Y%m%d_%H%M%S')}.csv",
            mime="text/csv",
            width="stretch",
        )

    render_filters(controller)
    render_property_form(controller)
    render_delete_confirmation(controller)
    render_property_table(state.visible)

    if not state.visible:
        return
    labels = {record.id: record.address for record in state.visible}
    pick_col, view_col, edit_col, delete_col = st.columns([3, 1, 1, 1])
    with pick_col:
        selected = st.selectbox("Selected property", list(labels), format_func=labels.get, key="selected_property")
    with view_col:
        st.button("Details", on_click=controller.open_detail, args=(selected,), width="stretch")
    with edit_col:
        st.button("Edit", on_click=controller.open_edit_form, args=(selected,), width="stretch")
    with delete_col:
        st.button("Delete", on_click=controller.request_delete, args=(selected,), width="stretch")


def render_detail_panel(controller: DashboardController) -> None:
    record = controller.state.detail_record
    if record is None:
        return
    with st.sidebar:
        st.markdown("## Property Details")
        render_detail_card(record)
        st.button("Close", key="close-detail", on_click=controller.close_detail)


def render_dashboard() -> None:
    controller = get_controller()
    render_header(controller)
    if controller.state.status is LoadStatus.ERROR:
        render_error_screen(controller)
        return
    st.success("✅ Connected to Live Backend API")
    render_notice(controller)
    render_summary(controller)
    render_table_section(controller)
    render_detail_panel(controller)


load_styles()
render_dashboard()
