"""Trip request — the plain-data input to the fare calculator.

``service_type`` and ``vehicle_category`` stay plain strings so that a
request can cross the dispatch channel unchanged; the calculator resolves
them (``InvalidServiceType`` for a bad service, sedan for a bad vehicle).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cab_fare.config.tariff import LocalPackage


class ServiceType(str, Enum):
    ONE_WAY = "one_way"
    ROUND_TRIP = "round_trip"
    LOCAL_HOURLY = "local_hourly"


class FareRequest(BaseModel):
    """Everything the engine needs to price one trip.

    Toll, permit and parking are not fields here: they are estimated and
    billed outside the engine.
    """

    model_config = ConfigDict(frozen=True)

    service_type: str = Field(description="one_way | round_trip | local_hourly")
    vehicle_category: str = Field(default="sedan", description="Tariff id; unknown ids price as sedan")
    distance_km: float = Field(default=0.0, ge=0, description="Actual trip distance (km)")
    days: int = Field(default=1, ge=1, description="Days booked (round trips)")
    extra_hours: float = Field(
        default=0.0, ge=0,
        description="Hours beyond the local package, when actual_hours is not given",
    )
    force_hill_station: bool = Field(default=False, description="Apply the default hill-station charge")
    rate_override: float | None = Field(default=None, description="Per-km rate; used only when positive")
    driver_bata_override: float | None = Field(default=None, ge=0, description="Replaces computed driver bata")
    hill_station_override: float | None = Field(default=None, ge=0, description="Replaces default hill charge")
    pet_charge: float = Field(default=0.0, ge=0, description="Pass-through pet charge (₹)")
    night_charge: float = Field(default=0.0, ge=0, description="Pass-through night charge (₹)")
    local_package_id: LocalPackage | None = Field(
        default=None,
        description="Local hourly package; defaults to 8hr_80km",
    )
    actual_hours: float | None = Field(
        default=None, ge=0,
        description="Hours actually used on a local trip; extra hours are derived from it",
    )

    @field_validator("service_type", "vehicle_category", mode="before")
    @classmethod
    def _enum_to_value(cls, v: Any) -> Any:
        return v.value if isinstance(v, Enum) else v

    def to_args(self) -> list[Any]:
        """Positional, JSON-safe form used on the dispatch wire."""
        return list(self.model_dump(mode="json").values())

    @classmethod
    def from_args(cls, args: Sequence[Any]) -> "FareRequest":
        """Inverse of ``to_args``."""
        names = list(cls.model_fields)
        if len(args) > len(names):
            raise TypeError(f"FareRequest takes at most {len(names)} positional args, got {len(args)}")
        return cls(**dict(zip(names, args)))
