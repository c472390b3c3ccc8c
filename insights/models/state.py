"""Immutable dashboard state snapshot and the interactive filter criteria."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from ..config import FILTER_ALL
from .analytics import AnalyticsSummary
from .property import PropertyRecord


class LoadStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class FormMode(str, Enum):
    CLOSED = "closed"
    CREATE = "create"
    EDIT = "edit"


class NoticeLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class FilterCriteria:
    search_term: str = ""
    filter_type: str = FILTER_ALL
    sort_by: str = "address"


@dataclass(frozen=True)
class Notice:
    """Transient acknowledgement shown after a mutation attempt."""

    level: NoticeLevel
    message: str


@dataclass(frozen=True)
class DashboardState:
    status: LoadStatus = LoadStatus.LOADING
    records: Tuple[PropertyRecord, ...] = ()
    visible: Tuple[PropertyRecord, ...] = ()
    analytics: Optional[AnalyticsSummary] = None
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    error: Optional[str] = None
    notice: Optional[Notice] = None
    detail_id: Optional[str] = None
    form_mode: FormMode = FormMode.CLOSED
    form_target_id: Optional[str] = None
    pending_delete_id: Optional[str] = None
    generation: int = 0

    def find(self, property_id: Optional[str]) -> Optional[PropertyRecord]:
        if property_id is None:
            return None
        for record in self.records:
            if record.id == property_id:
                return record
        return None

    @property
    def detail_record(self) -> Optional[PropertyRecord]:
        return self.find(self.detail_id)


__all__ = ["LoadStatus", "FormMode", "NoticeLevel", "FilterCriteria", "Notice", "DashboardState"]
