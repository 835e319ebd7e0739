"""Vehicle tariff table — static per-category pricing (Chennai market rates 2025).

The table is loaded once at import time and never mutated.  Lookups go
through ``VehicleCategory.parse`` so that an unknown id resolves to the
documented default category (sedan) in exactly one place.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class VehicleCategory(str, Enum):
    """Closed set of bookable vehicle categories."""

    HATCHBACK = "hatchback"
    SEDAN = "sedan"
    SUV = "suv"
    PREMIUM_SUV = "premium_suv"
    TEMPO = "tempo"
    MINIBUS = "minibus"
    BUS = "bus"

    @classmethod
    def parse(cls, value: "VehicleCategory | str | None") -> "VehicleCategory":
        """Resolve a raw category id.  Unknown or empty ids fall back to SEDAN.

        Callers that need strict validation must check the id before calling.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.debug("Unknown vehicle category %r, using %s", value, DEFAULT_CATEGORY.value)
            return DEFAULT_CATEGORY


DEFAULT_CATEGORY = VehicleCategory.SEDAN


class LocalPackage(str, Enum):
    """Bundled time + distance rental packages for local hourly trips."""

    HR2_KM20 = "2hr_20km"
    HR4_KM40 = "4hr_40km"
    HR8_KM80 = "8hr_80km"
    HR12_KM120 = "12hr_120km"

    @property
    def hours(self) -> int:
        return int(self.value.split("hr_")[0])

    @property
    def km(self) -> int:
        return int(self.value.split("hr_")[1].removesuffix("km"))

    @property
    def label(self) -> str:
        return f"{self.hours} Hr / {self.km} Km"


DEFAULT_LOCAL_PACKAGE = LocalPackage.HR8_KM80


class TripLimits(BaseModel):
    """Operational limits used for day estimation on round trips."""

    model_config = ConfigDict(frozen=True)

    max_km_per_day: float = Field(
        default=600.0, gt=0,
        description="Distance one driver can cover in a day; drives the minimum day count",
    )


DEFAULT_LIMITS = TripLimits()


class VehicleTariff(BaseModel):
    """Pricing parameters for one vehicle category."""

    model_config = ConfigDict(frozen=True)

    category: VehicleCategory
    name: str = Field(description="Display name")
    is_heavy_vehicle: bool = Field(
        default=False,
        description="Tempo / bus class: always pays drop bata and the heavy hill-station rate",
    )
    min_km_per_day: float = Field(gt=0, description="Minimum billable km per round-trip day")
    round_trip_rate: float = Field(gt=0, description="Per-km rate for round trips (₹)")
    one_way_rate: float = Field(gt=0, description="Per-km rate for one-way drops (₹)")
    driver_bata: float = Field(ge=0, description="Driver allowance per day (₹)")
    local_2hr_pkg: float = Field(gt=0, description="2 Hr / 20 Km package price (₹)")
    local_4hr_pkg: float = Field(gt=0, description="4 Hr / 40 Km package price (₹)")
    local_8hr_pkg: float = Field(gt=0, description="8 Hr / 80 Km package price (₹)")
    local_12hr_pkg: float = Field(gt=0, description="12 Hr / 120 Km package price (₹)")
    extra_hr_rate: float = Field(ge=0, description="Charge per hour beyond the package (₹)")
    min_drop_km: float = Field(ge=0, description="Minimum billable km for a one-way drop")

    def package_price(self, package: LocalPackage) -> float:
        """Base price of a local hourly package for this vehicle."""
        return {
            LocalPackage.HR2_KM20: self.local_2hr_pkg,
            LocalPackage.HR4_KM40: self.local_4hr_pkg,
            LocalPackage.HR8_KM80: self.local_8hr_pkg,
            LocalPackage.HR12_KM120: self.local_12hr_pkg,
        }[package]


def _tariff(category: VehicleCategory, name: str, heavy: bool, min_km: float,
            round_rate: float, drop_rate: float, bata: float,
            packages: tuple[float, float, float, float],
            extra_hr: float, min_drop: float) -> VehicleTariff:
    return VehicleTariff(
        category=category,
        name=name,
        is_heavy_vehicle=heavy,
        min_km_per_day=min_km,
        round_trip_rate=round_rate,
        one_way_rate=drop_rate,
        driver_bata=bata,
        local_2hr_pkg=packages[0],
        local_4hr_pkg=packages[1],
        local_8hr_pkg=packages[2],
        local_12hr_pkg=packages[3],
        extra_hr_rate=extra_hr,
        min_drop_km=min_drop,
    )


_TARIFFS: dict[VehicleCategory, VehicleTariff] = {
    t.category: t
    for t in (
        _tariff(VehicleCategory.HATCHBACK, "Hatchback", False, 250, 13, 15, 300, (700, 1100, 2000, 2900), 200, 130),
        _tariff(VehicleCategory.SEDAN, "Sedan", False, 250, 14, 16, 300, (800, 1200, 2200, 3200), 250, 130),
        _tariff(VehicleCategory.SUV, "SUV (Innova/Ertiga)", False, 250, 18, 20, 500, (1100, 1800, 3200, 4600), 350, 130),
        _tariff(VehicleCategory.PREMIUM_SUV, "Innova Crysta", False, 300, 22, 25, 600, (1500, 2500, 4500, 6500), 450, 130),
        _tariff(VehicleCategory.TEMPO, "Tempo Traveller (12s)", True, 250, 24, 24, 800, (2000, 3200, 5500, 8000), 600, 250),
        _tariff(VehicleCategory.MINIBUS, "Mini Bus (18s)", True, 250, 30, 30, 1000, (2800, 4400, 7500, 10800), 800, 250),
        _tariff(VehicleCategory.BUS, "Bus (24s+)", True, 300, 55, 55, 1500, (3500, 5500, 9500, 13800), 1200, 300),
    )
}

TARIFFS: Mapping[VehicleCategory, VehicleTariff] = MappingProxyType(_TARIFFS)


def get_tariff(category: VehicleCategory | str | None) -> VehicleTariff:
    """Look up the tariff for a category id (unknown ids → sedan)."""
    return TARIFFS[VehicleCategory.parse(category)]


def iter_tariffs() -> Iterator[VehicleTariff]:
    """All tariffs in table order."""
    return iter(TARIFFS.values())


def rate_card() -> pd.DataFrame:
    """Whole tariff table as a DataFrame, one row per category, indexed by id."""
    rows = [t.model_dump(mode="json") for t in iter_tariffs()]
    return pd.DataFrame(rows).set_index("category")
