"""Create/edit form and delete confirmation for the property table."""

from __future__ import annotations

from typing import Optional

import streamlit as st

from insights.config import PROPERTY_TYPES
from insights.errors import FormValidationError
from insights.models.property import PropertyRecord
from insights.models.state import FormMode
from insights.services.controller import DashboardController


def render_property_form(controller: DashboardController) -> None:
    state = controller.state
    if state.form_mode is FormMode.CLOSED:
        return
    editing: Optional[PropertyRecord] = state.find(state.form_target_id) if state.form_mode is FormMode.EDIT else None
    title = "Edit Property" if editing else "Add Property"
    type_index = PROPERTY_TYPES.index(editing.property_type) if editing and editing.property_type in PROPERTY_TYPES else 0

    with st.form(key=f"property-form-{state.form_target_id or 'new'}", border=True):
        st.markdown(f"### {title}")
        address = st.text_input("Address", value=editing.address if editing else "")
        property_type = st.selectbox("Type", PROPERTY_TYPES, index=type_index)
        rent = st.number_input("Monthly Rent ($)", min_value=0, step=50, value=editing.rent if editing else 0)
        occupancy = st.number_input(
            "Occupancy (%)", min_value=0, max_value=100, step=1, value=editing.occupancy if editing else 0
        )
        save_col, cancel_col = st.columns(2)
        submitted = save_col.form_submit_button("Save", type="primary")
        cancelled = cancel_col.form_submit_button("Cancel")

    if cancelled:
        controller.close_form()
        st.rerun()
    if submitted:
        try:
            controller.submit_form(address, property_type, rent, occupancy)
        except FormValidationError as exc:
            for field, reason in exc.errors.items():
                st.error(f"{field.replace('_', ' ').capitalize()}: {reason}")
            return
        st.rerun()


def render_delete_confirmation(controller: DashboardController) -> None:
    state = controller.state
    target = state.find(state.pending_delete_id)
    if target is None:
        return
    with st.container(border=True):
        st.warning(f"Delete **{target.address}**? This cannot be undone.")
        confirm_col, cancel_col = st.columns(2)
        if confirm_col.button("Delete", type="primary", key="confirm-delete"):
            controller.confirm_delete()
            st.rerun()
        if cancel_col.button("Keep", key="cancel-delete"):
            controller.cancel_delete()
            st.rerun()
