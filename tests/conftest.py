"""Shared test fixtures — tariffs, sample trip requests, a hand-driven channel."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from cab_fare.config import VehicleTariff, get_tariff
from cab_fare.dispatch.worker import handle_message
from cab_fare.models import FareRequest


@pytest.fixture
def sedan() -> VehicleTariff:
    return get_tariff("sedan")


@pytest.fixture
def tempo() -> VehicleTariff:
    return get_tariff("tempo")


@pytest.fixture
def sedan_drop_20km() -> FareRequest:
    return FareRequest(service_type="one_way", vehicle_category="sedan", distance_km=20)


@pytest.fixture
def sedan_round_trip_700km() -> FareRequest:
    return FareRequest(service_type="round_trip", vehicle_category="sedan", distance_km=700, days=1)


@pytest.fixture
def sedan_local_8hr() -> FareRequest:
    return FareRequest(
        service_type="local_hourly",
        vehicle_category="sedan",
        distance_km=75,
        local_package_id="8hr_80km",
        actual_hours=10,
    )


class ManualChannel:
    """Channel that holds posted envelopes until the test answers them."""

    def __init__(self, on_reply: Callable[[dict[str, Any]], None]):
        self.on_reply = on_reply
        self.posted: list[dict[str, Any]] = []
        self.closed = False
        self.joined = False

    def post(self, message: dict[str, Any]) -> None:
        self.posted.append(message)

    def close(self) -> None:
        self.closed = True

    def join(self, timeout: float | None = None) -> None:
        self.joined = True

    def answer(self, message: dict[str, Any]) -> None:
        """Run the real worker handler for ``message`` and deliver its reply."""
        self.on_reply(handle_message(message))

    def reply(self, envelope: dict[str, Any]) -> None:
        """Deliver an arbitrary reply envelope."""
        self.on_reply(envelope)


@pytest.fixture
def manual_channels() -> list[ManualChannel]:
    """Every ManualChannel built by ``manual_factory``, in creation order."""
    return []


@pytest.fixture
def manual_factory(manual_channels: list[ManualChannel]):
    def factory(on_reply):
        channel = ManualChannel(on_reply)
        manual_channels.append(channel)
        return channel

    return factory
