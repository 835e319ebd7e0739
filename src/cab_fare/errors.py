"""Exception taxonomy for the fare engine.

Unknown vehicle categories and malformed GSTINs never raise: the former
resolve to the sedan tariff, the latter are read as an
arbitrary two-character state prefix.
"""

from __future__ import annotations


class FareEngineError(Exception):
    """Base class for every error raised by this package."""


class InvalidServiceType(FareEngineError, ValueError):
    """Service type outside ``one_way`` / ``round_trip`` / ``local_hourly``."""

    def __init__(self, service_type: object, message: str | None = None):
        self.service_type = service_type
        super().__init__(message or f"Unsupported service type: {service_type!r}")


class WorkerUnavailable(FareEngineError):
    """The worker channel could not be constructed.

    Raised for every call made on a dispatcher whose channel failed; the
    dispatcher never retries.
    """


class FareComputationError(FareEngineError):
    """Worker-side failure that is not one of the known error types."""
