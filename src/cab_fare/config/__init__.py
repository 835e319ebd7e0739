"""Configuration — static tariff table and runtime settings."""

from cab_fare.config.tariff import (
    DEFAULT_CATEGORY,
    DEFAULT_LIMITS,
    DEFAULT_LOCAL_PACKAGE,
    TARIFFS,
    LocalPackage,
    TripLimits,
    VehicleCategory,
    VehicleTariff,
    get_tariff,
    iter_tariffs,
    rate_card,
)
from cab_fare.config.settings import Settings, get_settings

__all__ = [
    "DEFAULT_CATEGORY",
    "DEFAULT_LIMITS",
    "DEFAULT_LOCAL_PACKAGE",
    "TARIFFS",
    "LocalPackage",
    "TripLimits",
    "VehicleCategory",
    "VehicleTariff",
    "get_tariff",
    "iter_tariffs",
    "rate_card",
    "Settings",
    "get_settings",
]
