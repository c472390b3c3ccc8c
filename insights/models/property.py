"""Pydantic models representing property records and form input."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import FormValidationError
from ..utils.coerce import to_strict_int

FormPropertyType = Literal["Apartment", "House", "Studio"]

STRONG_SCORE = 85
FAIR_SCORE = 75


class OccupancyStatus(str, Enum):
    OCCUPIED = "Occupied"
    AVAILABLE = "Available"


class ScoreTier(str, Enum):
    STRONG = "strong"
    FAIR = "fair"
    WEAK = "weak"


def score_tier(score: Optional[float]) -> ScoreTier:
    if score is None:
        return ScoreTier.WEAK
    if score >= STRONG_SCORE:
        return ScoreTier.STRONG
    if score >= FAIR_SCORE:
        return ScoreTier.FAIR
    return ScoreTier.WEAK


class PropertyRecord(BaseModel):
    """One managed unit as mirrored from the backend."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    address: str = Field(..., min_length=1)
    property_type: str = Field(..., alias="propertyType")
    rent: int = Field(..., ge=0)
    occupancy: int = Field(..., ge=0, le=100)
    performance_score: float = Field(0.0, alias="performanceScore")

    @property
    def status(self) -> OccupancyStatus:
        if self.occupancy == 100:
            return OccupancyStatus.OCCUPIED
        return OccupancyStatus.AVAILABLE

    @property
    def score_tier(self) -> ScoreTier:
        return score_tier(self.performance_score)


class PropertyInput(BaseModel):
    """Body of a create or update request.

    The server computes ``performanceScore`` itself, so the field does not
    exist here and can never leak into an outgoing payload.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    address: str = Field(..., min_length=1)
    property_type: FormPropertyType = Field(..., alias="propertyType")
    rent: int = Field(..., ge=0)
    occupancy: int = Field(..., ge=0, le=100)

    @field_validator("address", mode="before")
    @classmethod
    def _strip_address(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

    @classmethod
    def from_form(cls, address: Any, property_type: Any, rent: Any, occupancy: Any) -> "PropertyInput":
        """Build an input from raw form values, raising ``FormValidationError``."""

        errors: Dict[str, str] = {}
        rent_value = to_strict_int(rent)
        if rent_value is None:
            errors["rent"] = "must be a whole number"
        occupancy_value = to_strict_int(occupancy)
        if occupancy_value is None:
            errors["occupancy"] = "must be a whole number"
        if errors:
            raise FormValidationError(errors)
        try:
            return cls(
                address=address,
                property_type=property_type,
                rent=rent_value,
                occupancy=occupancy_value,
            )
        except ValidationError as exc:
            raise FormValidationError(
                {str(err["loc"][0]) if err["loc"] else "form": err["msg"] for err in exc.errors()}
            ) from exc


__all__ = [
    "FormPropertyType",
    "OccupancyStatus",
    "ScoreTier",
    "score_tier",
    "PropertyRecord",
    "PropertyInput",
]
