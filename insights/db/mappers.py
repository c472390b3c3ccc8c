from typing import Any, Dict

from ..utils.coerce import to_float, to_int, to_str


def map_property_row(r: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": to_str(r.get("id")),
        "address": to_str(r.get("address")),
        "propertyType": to_str(r.get("propertyType") or r.get("property_type")),
        "rent": to_int(r.get("rent")),
        "occupancy": to_int(r.get("occupancy")),
        "performanceScore": to_float(r.get("performanceScore", r.get("performance_score"))) or 0.0,
    }


def map_aggregates_row(r: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "totalRevenue": to_float(r.get("totalRevenue")),
        "averageOccupancy": to_float(r.get("averageOccupancy")),
        "averageScore": to_float(r.get("averageScore")),
        "totalProperties": to_int(r.get("totalProperties")),
        "averageRent": to_float(r.get("averageRent")),
    }
