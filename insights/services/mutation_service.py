"""Create, update and delete properties against the backend.

Every operation returns a ``MutationResult`` instead of raising. A successful
result has ``refresh_required`` set: the caller must then run a full refresh
of records and analytics. Nothing here patches local state, so the dashboard
can never show a list or summary that diverges from the server after a write.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import requests
from pydantic import ValidationError

from ..db.api_client import PropertiesAPIClient, response_detail
from ..db.mappers import map_property_row
from ..errors import MutationError, PropertyNotFoundError
from ..models.property import PropertyInput, PropertyRecord
from ..utils.logging import get_logger

LOGGER = get_logger("services.mutations")

CONFIRMATION_REQUIRED = "Delete requires explicit confirmation"


@dataclass(frozen=True)
class MutationResult:
    action: str
    property_id: Optional[str] = None
    record: Optional[PropertyRecord] = None
    error: Optional[MutationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def refresh_required(self) -> bool:
        return self.ok


class MutationService:
    def __init__(self, client: PropertiesAPIClient) -> None:
        self.client = client

    def create(self, data: PropertyInput) -> MutationResult:
        return self._run("create", None, lambda: self.client.create_property(data.to_payload()))

    def update(self, property_id: str, data: PropertyInput) -> MutationResult:
        return self._run("update", property_id, lambda: self.client.update_property(property_id, data.to_payload()))

    def delete(self, property_id: str, confirmed: bool = False) -> MutationResult:
        if not confirmed:
            LOGGER.warning("delete_unconfirmed property_id=%s", property_id)
            return MutationResult("delete", property_id, error=MutationError(CONFIRMATION_REQUIRED))
        return self._run("delete", property_id, lambda: self.client.delete_property(property_id))

    # ------------------------------------------------------------------
    def _run(
        self,
        action: str,
        property_id: Optional[str],
        call: Callable[[], Optional[Dict[str, Any]]],
    ) -> MutationResult:
        try:
            body = call()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            detail = response_detail(exc)
            error_cls = PropertyNotFoundError if status == 404 and property_id is not None else MutationError
            LOGGER.warning("mutation_rejected action=%s property_id=%s status=%s", action, property_id, status)
            return MutationResult(action, property_id, error=error_cls(detail, status_code=status))
        except (requests.RequestException, ValueError) as exc:
            LOGGER.warning("mutation_failed action=%s property_id=%s error=%s", action, property_id, exc)
            return MutationResult(action, property_id, error=MutationError(str(exc) or exc.__class__.__name__))

        record = self._record_from(body)
        if record is not None and property_id is None:
            property_id = record.id
        LOGGER.info("mutation_succeeded action=%s property_id=%s", action, property_id)
        return MutationResult(action, property_id, record=record)

    @staticmethod
    def _record_from(body: Optional[Dict[str, Any]]) -> Optional[PropertyRecord]:
        if not body:
            return None
        try:
            return PropertyRecord.model_validate(map_property_row(body))
        except ValidationError as exc:
            # The write landed; the refresh that follows shows the server's version.
            LOGGER.warning("mutation_response_unparsed errors=%s", exc.error_count())
            return None


__all__ = ["MutationResult", "MutationService", "CONFIRMATION_REQUIRED"]
