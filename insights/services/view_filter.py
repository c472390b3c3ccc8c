"""Search, type filter and sort applied to the raw records for the table."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Tuple

from ..config import FILTER_ALL
from ..models.property import PropertyRecord
from ..models.state import FilterCriteria

# Numeric sort keys run descending; anything unrecognised falls back to address.
_DESCENDING_KEYS: Dict[str, Callable[[PropertyRecord], float]] = {
    "rent": lambda record: record.rent,
    "occupancy": lambda record: record.occupancy,
    "score": lambda record: record.performance_score,
}


def _address_key(record: PropertyRecord) -> Tuple[str, str]:
    return (record.address.casefold(), record.address)


def matches_search(record: PropertyRecord, search_term: str) -> bool:
    if not search_term:
        return True
    return search_term.lower() in record.address.lower()


def matches_type(record: PropertyRecord, filter_type: str) -> bool:
    return filter_type == FILTER_ALL or record.property_type == filter_type


def sort_records(records: Iterable[PropertyRecord], sort_by: str) -> List[PropertyRecord]:
    key = _DESCENDING_KEYS.get(sort_by)
    if key is not None:
        return sorted(records, key=key, reverse=True)
    return sorted(records, key=_address_key)


def derive_visible(records: Iterable[PropertyRecord], criteria: FilterCriteria) -> Tuple[PropertyRecord, ...]:
    """Return the rows the table shows for ``criteria``.

    Builds a fresh tuple on every call; ``records`` is never modified.
    """

    kept = [
        record
        for record in records
        if matches_search(record, criteria.search_term) and matches_type(record, criteria.filter_type)
    ]
    return tuple(sort_records(kept, criteria.sort_by))


__all__ = ["derive_visible", "sort_records", "matches_search", "matches_type"]
