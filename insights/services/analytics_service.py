"""Derive the portfolio summary shown in the stat cards and charts."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

from ..models.analytics import AnalyticsSummary, PropertyTypeCount, RentTrendPoint, ServerAggregates
from ..models.property import PropertyRecord

DEFAULT_AVERAGE_RENT = 2750

# (month, offset below the live average, floor). The last month is the live value.
TREND_SHAPE = (
    ("Jan", 350, 2400),
    ("Feb", 300, 2450),
    ("Mar", 250, 2500),
    ("Apr", 150, 2600),
    ("May", 50, 2700),
)
LIVE_MONTH = "Jun"


def _one_decimal(value: Optional[float]) -> str:
    if value is None:
        return "0"
    return f"{value:.1f}"


def rent_trends(average_rent: Optional[float]) -> List[RentTrendPoint]:
    """Placeholder six-month trend anchored on the live average rent.

    This is not historical data: earlier months are the live value minus a
    fixed offset, never below a fixed floor.
    """

    live = average_rent or DEFAULT_AVERAGE_RENT
    points = [RentTrendPoint(month=month, avg_rent=max(floor, live - offset)) for month, offset, floor in TREND_SHAPE]
    points.append(RentTrendPoint(month=LIVE_MONTH, avg_rent=live))
    return points


def property_type_counts(records: Iterable[PropertyRecord]) -> List[PropertyTypeCount]:
    counts: Dict[str, int] = {}
    for record in records:
        counts[record.property_type] = counts.get(record.property_type, 0) + 1
    return [PropertyTypeCount(name=name, value=value) for name, value in counts.items()]


def compute_analytics(
    records: Sequence[PropertyRecord],
    server_aggregates: Union[ServerAggregates, Mapping, None] = None,
) -> AnalyticsSummary:
    if server_aggregates is None:
        aggregates = ServerAggregates()
    elif isinstance(server_aggregates, ServerAggregates):
        aggregates = server_aggregates
    else:
        aggregates = ServerAggregates.model_validate(dict(server_aggregates))

    return AnalyticsSummary(
        total_revenue=aggregates.total_revenue or 0,
        avg_occupancy=_one_decimal(aggregates.average_occupancy),
        avg_score=_one_decimal(aggregates.average_score),
        total_properties=aggregates.total_properties or 0,
        rent_trends=rent_trends(aggregates.average_rent),
        property_types=property_type_counts(records),
    )


__all__ = ["compute_analytics", "rent_trends", "property_type_counts", "DEFAULT_AVERAGE_RENT"]
