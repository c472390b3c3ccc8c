"""Pure state transitions for the dashboard.

``reduce`` never mutates its input; it returns the same snapshot when an
action does not apply and a new one otherwise. The visible rows are rebuilt
from scratch whenever records or criteria change.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from ..models.analytics import AnalyticsSummary
from ..models.property import PropertyRecord
from ..models.state import DashboardState, FormMode, LoadStatus, Notice, NoticeLevel
from .mutation_service import MutationResult
from .view_filter import derive_visible

_PAST_TENSE = {"create": "created", "update": "updated", "delete": "deleted"}


@dataclass(frozen=True)
class FetchStarted:
    generation: int


@dataclass(frozen=True)
class FetchSucceeded:
    generation: int
    records: Tuple[PropertyRecord, ...]
    analytics: AnalyticsSummary


@dataclass(frozen=True)
class FetchFailed:
    generation: int
    detail: str


@dataclass(frozen=True)
class SearchChanged:
    search_term: str


@dataclass(frozen=True)
class FilterTypeChanged:
    filter_type: str


@dataclass(frozen=True)
class SortChanged:
    sort_by: str


@dataclass(frozen=True)
class DetailOpened:
    property_id: str


@dataclass(frozen=True)
class DetailClosed:
    pass


@dataclass(frozen=True)
class FormOpened:
    mode: FormMode
    target_id: Optional[str] = None


@dataclass(frozen=True)
class FormClosed:
    pass


@dataclass(frozen=True)
class DeleteRequested:
    property_id: str


@dataclass(frozen=True)
class DeleteCancelled:
    pass


@dataclass(frozen=True)
class MutationSucceeded:
    result: MutationResult


@dataclass(frozen=True)
class MutationFailed:
    result: MutationResult


@dataclass(frozen=True)
class NoticeDismissed:
    pass


Action = Union[
    FetchStarted,
    FetchSucceeded,
    FetchFailed,
    SearchChanged,
    FilterTypeChanged,
    SortChanged,
    DetailOpened,
    DetailClosed,
    FormOpened,
    FormClosed,
    DeleteRequested,
    DeleteCancelled,
    MutationSucceeded,
    MutationFailed,
    NoticeDismissed,
]


def _with_criteria(state: DashboardState, **changes) -> DashboardState:
    criteria = replace(state.criteria, **changes)
    return replace(state, criteria=criteria, visible=derive_visible(state.records, criteria))


def _fetch_succeeded(state: DashboardState, action: FetchSucceeded) -> DashboardState:
    records = tuple(action.records)
    ids = {record.id for record in records}
    return replace(
        state,
        status=LoadStatus.READY,
        records=records,
        visible=derive_visible(records, state.criteria),
        analytics=action.analytics,
        error=None,
        detail_id=state.detail_id if state.detail_id in ids else None,
    )


def _mutation_succeeded(state: DashboardState, result: MutationResult) -> DashboardState:
    detail_id = state.detail_id
    if result.action == "delete" and detail_id == result.property_id:
        detail_id = None
    verb = _PAST_TENSE.get(result.action, result.action)
    return replace(
        state,
        detail_id=detail_id,
        pending_delete_id=None,
        notice=Notice(NoticeLevel.SUCCESS, f"Property {verb}"),
    )


def _mutation_failed(state: DashboardState, result: MutationResult) -> DashboardState:
    detail = result.error.detail if result.error is not None else "unknown error"
    return replace(
        state,
        pending_delete_id=None,
        notice=Notice(NoticeLevel.ERROR, f"Could not {result.action} property: {detail}"),
    )


def reduce(state: DashboardState, action: Action) -> DashboardState:
    if isinstance(action, FetchStarted):
        return replace(state, status=LoadStatus.LOADING, generation=action.generation, error=None)
    if isinstance(action, FetchSucceeded):
        if action.generation != state.generation:
            return state
        return _fetch_succeeded(state, action)
    if isinstance(action, FetchFailed):
        if action.generation != state.generation:
            return state
        return replace(state, status=LoadStatus.ERROR, error=action.detail)
    if isinstance(action, SearchChanged):
        return _with_criteria(state, search_term=action.search_term)
    if isinstance(action, FilterTypeChanged):
        return _with_criteria(state, filter_type=action.filter_type)
    if isinstance(action, SortChanged):
        return _with_criteria(state, sort_by=action.sort_by)
    if isinstance(action, DetailOpened):
        if state.find(action.property_id) is None:
            return state
        return replace(state, detail_id=action.property_id)
    if isinstance(action, DetailClosed):
        return replace(state, detail_id=None)
    if isinstance(action, FormOpened):
        target = action.target_id if action.mode is FormMode.EDIT else None
        return replace(state, form_mode=action.mode, form_target_id=target)
    if isinstance(action, FormClosed):
        return replace(state, form_mode=FormMode.CLOSED, form_target_id=None)
    if isinstance(action, DeleteRequested):
        return replace(state, pending_delete_id=action.property_id)
    if isinstance(action, DeleteCancelled):
        return replace(state, pending_delete_id=None)
    if isinstance(action, MutationSucceeded):
        return _mutation_succeeded(state, action.result)
    if isinstance(action, MutationFailed):
        return _mutation_failed(state, action.result)
    if isinstance(action, NoticeDismissed):
        return replace(state, notice=None)
    raise TypeError(f"Unknown dashboard action: {action!r}")


__all__ = [
    "Action",
    "reduce",
    "FetchStarted",
    "FetchSucceeded",
    "FetchFailed",
    "SearchChanged",
    "FilterTypeChanged",
    "SortChanged",
    "DetailOpened",
    "DetailClosed",
    "FormOpened",
    "FormClosed",
    "DeleteRequested",
    "DeleteCancelled",
    "MutationSucceeded",
    "MutationFailed",
    "NoticeDismissed",
]
