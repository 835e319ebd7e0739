"""Cab fare engine — tariff table, fare calculator, GST split and async dispatch."""

from cab_fare.config import Settings, TripLimits, VehicleCategory, get_settings, get_tariff
from cab_fare.dispatch import FareDispatcher
from cab_fare.engine import calculate_gst, compute_fare, determine_gst_type
from cab_fare.errors import FareComputationError, FareEngineError, InvalidServiceType, WorkerUnavailable
from cab_fare.logging_setup import setup_logging
from cab_fare.models import FareRequest, FareResult, GSTBreakdown, ServiceType

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "TripLimits",
    "VehicleCategory",
    "get_settings",
    "get_tariff",
    "FareDispatcher",
    "calculate_gst",
    "compute_fare",
    "determine_gst_type",
    "FareComputationError",
    "FareEngineError",
    "InvalidServiceType",
    "WorkerUnavailable",
    "setup_logging",
    "FareRequest",
    "FareResult",
    "GSTBreakdown",
    "ServiceType",
]
