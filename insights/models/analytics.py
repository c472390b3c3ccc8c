"""Models for server aggregates and the summary derived from them."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ServerAggregates(BaseModel):
    """Payload of ``GET /properties/analytics``; every field may be absent."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    total_revenue: Optional[float] = Field(None, alias="totalRevenue")
    average_occupancy: Optional[float] = Field(None, alias="averageOccupancy")
    average_score: Optional[float] = Field(None, alias="averageScore")
    total_properties: Optional[int] = Field(None, alias="totalProperties")
    average_rent: Optional[float] = Field(None, alias="averageRent")


class RentTrendPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: str
    avg_rent: float


class PropertyTypeCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: int


class AnalyticsSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_revenue: float = 0
    avg_occupancy: str = "0"
    avg_score: str = "0"
    total_properties: int = 0
    rent_trends: List[RentTrendPoint] = Field(default_factory=list)
    property_types: List[PropertyTypeCount] = Field(default_factory=list)
