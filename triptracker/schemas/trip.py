"""
Pydantic schemas for trip records.
"""

import math
from datetime import date as Date
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from triptracker.schemas.base import WireModel


class VehicleType(str, Enum):
    CAR = "car"
    BIKE = "bike"
    BUS = "bus"
    TRAIN = "train"
    MOTORCYCLE = "motorcycle"


class TripCreate(BaseModel):
    """Draft produced by TripForm; the controller fills in the rest."""
    vehicle_type: VehicleType = VehicleType.CAR
    route: str = Field(..., min_length=1)
    distance: float = Field(..., gt=0, allow_inf_nan=False)
    date: Date
    notes: str = ""
    images: list[str] = Field(default_factory=list)


class TripUpdate(BaseModel):
    """Partial edit. Only fields that were set are merged."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    vehicle_type: Optional[VehicleType] = None
    route: Optional[str] = Field(None, min_length=1)
    distance: Optional[float] = Field(None, gt=0, allow_inf_nan=False)
    date: Optional[Date] = None
    notes: Optional[str] = None
    images: Optional[list[str]] = None
    highlight_image: Optional[int] = Field(None, ge=0)
    is_favorite: Optional[bool] = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        # omit a field to keep it; null is never written through
        if value is None:
            raise ValueError("field cannot be cleared")
        return value


class Trip(WireModel):
    id: str
    user_id: str
    vehicle_type: VehicleType
    route: str = ""
    distance: Optional[float] = None  # km; None counts as 0
    date: Optional[Date] = None
    notes: str = ""
    images: list[str] = Field(default_factory=list)
    highlight_image: int = 0  # meaningless while images is empty
    is_favorite: bool = False
    created_at: Optional[str] = None

    @field_validator("distance", mode="before")
    @classmethod
    def coerce_distance(cls, value: Any) -> Optional[float]:
        """Anything that is not a finite number reads as missing."""
        if isinstance(value, bool):
            return None
        try:
            distance = float(value)
        except (TypeError, ValueError):
            return None
        return distance if math.isfinite(distance) else None

    @property
    def highlight_url(self) -> Optional[str]:
        if 0 <= self.highlight_image < len(self.images):
            return self.images[self.highlight_image]
        return None


class TripStats(BaseModel):
    total: int = 0
    total_distance: float = 0.0
    favorites: int = 0
    by_type: dict[str, int] = Field(default_factory=dict)  # first-seen order
