"""Request and result models."""

from cab_fare.models.trip import FareRequest, ServiceType
from cab_fare.models.results import (
    FareDetails,
    FareLineItem,
    FareResult,
    GSTBreakdown,
)

__all__ = [
    "FareRequest",
    "ServiceType",
    "FareDetails",
    "FareLineItem",
    "FareResult",
    "GSTBreakdown",
]
