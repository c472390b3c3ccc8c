"""Application state controller: fetch cycle, filter changes and mutations."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Optional, Tuple

import requests
from pydantic import ValidationError

from ..config import FILTER_ALL, PROPERTY_TYPES
from ..db.api_client import PropertiesAPIClient, response_detail
from ..db.mappers import map_aggregates_row, map_property_row
from ..errors import FetchError, MutationError
from ..models.analytics import AnalyticsSummary, ServerAggregates
from ..models.property import PropertyInput, PropertyRecord
from ..models.state import DashboardState, FormMode
from ..utils.logging import get_logger
from .analytics_service import compute_analytics
from .export_service import visible_to_csv
from .mutation_service import MutationResult, MutationService
from .reducer import (
    Action,
    DeleteCancelled,
    DeleteRequested,
    DetailClosed,
    DetailOpened,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    FilterTypeChanged,
    FormClosed,
    FormOpened,
    MutationFailed,
    MutationSucceeded,
    NoticeDismissed,
    SearchChanged,
    SortChanged,
    reduce,
)

LOGGER = get_logger("services.controller")


class DashboardController:
    """Owns the dashboard snapshot and routes every change through ``reduce``.

    Worker threads only perform HTTP calls; the snapshot is replaced on the
    caller's thread once both fetch requests have finished.
    """

    def __init__(
        self,
        client: PropertiesAPIClient,
        mutations: Optional[MutationService] = None,
        state: Optional[DashboardState] = None,
    ) -> None:
        self.client = client
        self.mutations = mutations or MutationService(client)
        self._state = state or DashboardState()

    @property
    def state(self) -> DashboardState:
        return self._state

    def dispatch(self, action: Action) -> DashboardState:
        self._state = reduce(self._state, action)
        return self._state

    # ------------------------------------------------------------------
    # Fetch cycle
    def refresh(self) -> DashboardState:
        generation = self._state.generation + 1
        self.dispatch(FetchStarted(generation))
        try:
            records, analytics = self._fetch_all()
        except FetchError as exc:
            LOGGER.warning("fetch_failed generation=%s status=%s detail=%s", generation, exc.status_code, exc.detail)
            return self.dispatch(FetchFailed(generation, exc.detail))
        LOGGER.info("fetch_succeeded generation=%s records=%s", generation, len(records))
        return self.dispatch(FetchSucceeded(generation, records, analytics))

    def _fetch_all(self) -> Tuple[Tuple[PropertyRecord, ...], AnalyticsSummary]:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="insights-fetch") as pool:
            records_future = pool.submit(self.client.list_properties)
            analytics_future = pool.submit(self.client.get_analytics)
        # Leaving the executor waits for both; a failure in either discards the pair.
        try:
            raw_records = records_future.result()
            raw_analytics = analytics_future.result()
            records = tuple(self._parse_record(row) for row in raw_records)
            aggregates = ServerAggregates.model_validate(map_aggregates_row(raw_analytics))
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise FetchError(response_detail(exc), status_code=status) from exc
        except (requests.RequestException, ValueError) as exc:
            raise FetchError(str(exc) or exc.__class__.__name__) from exc
        return records, compute_analytics(records, aggregates)

    @staticmethod
    def _parse_record(row: Any) -> PropertyRecord:
        if not isinstance(row, dict):
            raise ValueError(f"Property row is not an object: {row!r}")
        try:
            return PropertyRecord.model_validate(map_property_row(row))
        except ValidationError as exc:
            raise ValueError(f"Invalid property {row.get('id')!r}: {exc.error_count()} field error(s)") from exc

    # ------------------------------------------------------------------
    # Filter criteria
    def set_search(self, search_term: str) -> DashboardState:
        return self.dispatch(SearchChanged(search_term))

    def set_filter_type(self, filter_type: str) -> DashboardState:
        return self.dispatch(FilterTypeChanged(filter_type))

    def set_sort_by(self, sort_by: str) -> DashboardState:
        return self.dispatch(SortChanged(sort_by))

    @property
    def filter_options(self) -> List[str]:
        options = [FILTER_ALL, *PROPERTY_TYPES]
        for record in self._state.records:
            if record.property_type not in options:
                options.append(record.property_type)
        return options

    def export_csv(self) -> str:
        return visible_to_csv(self._state.visible)

    # ------------------------------------------------------------------
    # Detail view, form and confirmation flags
    def open_detail(self, property_id: str) -> DashboardState:
        return self.dispatch(DetailOpened(property_id))

    def close_detail(self) -> DashboardState:
        return self.dispatch(DetailClosed())

    def open_create_form(self) -> DashboardState:
        return self.dispatch(FormOpened(FormMode.CREATE))

    def open_edit_form(self, property_id: str) -> DashboardState:
        return self.dispatch(FormOpened(FormMode.EDIT, property_id))

    def close_form(self) -> DashboardState:
        return self.dispatch(FormClosed())

    def request_delete(self, property_id: str) -> DashboardState:
        return self.dispatch(DeleteRequested(property_id))

    def cancel_delete(self) -> DashboardState:
        return self.dispatch(DeleteCancelled())

    def dismiss_notice(self) -> DashboardState:
        return self.dispatch(NoticeDismissed())

    # ------------------------------------------------------------------
    # Mutations
    def submit_form(self, address: Any, property_type: Any, rent: Any, occupancy: Any) -> MutationResult:
        """Validate the open form and send it.

        Raises ``FormValidationError`` and leaves the form open when the input
        is rejected locally; otherwise the form closes before the request goes out.
        """

        data = PropertyInput.from_form(address, property_type, rent, occupancy)
        mode, target_id = self._state.form_mode, self._state.form_target_id
        self.dispatch(FormClosed())
        if mode is FormMode.EDIT and target_id is not None:
            return self.update(target_id, data)
        return self.create(data)

    def create(self, data: PropertyInput) -> MutationResult:
        return self._complete(self.mutations.create(data))

    def update(self, property_id: str, data: PropertyInput) -> MutationResult:
        return self._complete(self.mutations.update(property_id, data))

    def confirm_delete(self) -> MutationResult:
        property_id = self._state.pending_delete_id
        if property_id is None:
            return self._complete(MutationResult("delete", error=MutationError("No delete is awaiting confirmation")))
        return self._complete(self.mutations.delete(property_id, confirmed=True))

    def _complete(self, result: MutationResult) -> MutationResult:
        if not result.ok:
            self.dispatch(MutationFailed(result))
            return result
        if result.refresh_required:
            self.refresh()
        self.dispatch(MutationSucceeded(result))
        return result


__all__ = ["DashboardController"]
