"""Fare calculator — trip request + vehicle tariff → priced breakdown.

Pure arithmetic, no I/O.  Three service types:

  one_way       max(distance, min_drop_km) × one-way rate
                + bata per driving day, only past 40 km or for heavy vehicles
  round_trip    max(distance, days' × min_km_per_day) × round-trip rate
                + bata × days', where days' = max(days, ⌈distance / max_km_per_day⌉)
  local_hourly  package price + extra hours × extra_hr_rate

Hill-station, pet and night charges are added on top.  Toll, permit and
parking never enter here.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal

from cab_fare.config.tariff import (
    DEFAULT_LIMITS,
    DEFAULT_LOCAL_PACKAGE,
    TripLimits,
    VehicleTariff,
    get_tariff,
)
from cab_fare.errors import InvalidServiceType
from cab_fare.models.results import FareDetails, FareLineItem, FareResult
from cab_fare.models.trip import FareRequest, ServiceType

logger = logging.getLogger(__name__)

# Drops at or below this distance carry no driver bata (light vehicles only).
DROP_BATA_THRESHOLD_KM = 40.0

HILL_STATION_CHARGE_LIGHT = 500.0
HILL_STATION_CHARGE_HEAVY = 1000.0


def compute_fare(request: FareRequest, limits: TripLimits = DEFAULT_LIMITS) -> FareResult:
    """Price one trip.

    Raises ``InvalidServiceType`` when ``request.service_type`` is not one
    of the three supported kinds.  An unknown vehicle category is priced
    with the sedan tariff.
    """
    service = _resolve_service_type(request.service_type)
    tariff = get_tariff(request.vehicle_category)

    # ── Rate, effective distance, base charge ─────────────────────────
    extra_hour_charge = 0.0
    extra_hours = 0.0
    if service is ServiceType.LOCAL_HOURLY:
        rate_used = 0.0
        days = 1
        effective_distance = request.distance_km
        package = request.local_package_id or DEFAULT_LOCAL_PACKAGE
        if request.actual_hours is not None:
            extra_hours = max(0.0, request.actual_hours - package.hours)
        else:
            extra_hours = request.extra_hours
        package_price = tariff.package_price(package)
        extra_hour_charge = _money(extra_hours * tariff.extra_hr_rate)
        base_charge = _money(package_price)
        base_text = f"Base Package ({package.label}): ₹{_fmt(base_charge)}"
        base_label = "Base Package"
    else:
        rate_used = _select_rate(request, tariff, service)
        if service is ServiceType.ROUND_TRIP:
            days = max(request.days, math.ceil(request.distance_km / limits.max_km_per_day))
            effective_distance = max(request.distance_km, days * tariff.min_km_per_day)
        else:
            days = max(1, _driving_days(request.distance_km, limits))
            effective_distance = max(request.distance_km, tariff.min_drop_km)
        base_charge = _money(effective_distance * rate_used)
        base_label = "Distance Charge"
        base_text = (
            f"Distance Charge ({_fmt(effective_distance)} km x ₹{_fmt(rate_used)}/km): "
            f"₹{_fmt(base_charge)}"
        )

    # ── Driver bata ───────────────────────────────────────────────────
    if request.driver_bata_override is not None:
        driver_bata = _money(request.driver_bata_override)
        bata_text = f"Driver Bata: ₹{_fmt(driver_bata)}"
    else:
        bata_days = _bata_days(request, tariff, service, days, limits)
        driver_bata = _money(tariff.driver_bata * bata_days)
        unit = "day" if bata_days == 1 else "days"
        bata_text = f"Driver Bata ({bata_days} {unit} x ₹{_fmt(tariff.driver_bata)}): ₹{_fmt(driver_bata)}"

    # ── Surcharges ────────────────────────────────────────────────────
    hill_station = _money(_hill_station_charge(request, tariff))
    pet_charge = _money(request.pet_charge)
    night_charge = _money(request.night_charge)

    # ── Breakdown, fixed order, nonzero only ──────────────────────────
    candidates = [
        (base_label, base_charge, base_text),
        ("Driver Bata", driver_bata, bata_text),
        ("Hill Station Charge", hill_station, f"Hill Station Charge: ₹{_fmt(hill_station)}"),
        ("Pet Charge", pet_charge, f"Pet Charge: ₹{_fmt(pet_charge)}"),
        ("Night Charge", night_charge, f"Night Charge: ₹{_fmt(night_charge)}"),
        (
            "Extra Hours",
            extra_hour_charge,
            f"Extra Hours ({_fmt(extra_hours)} hr x ₹{_fmt(tariff.extra_hr_rate)}/hr): "
            f"₹{_fmt(extra_hour_charge)}",
        ),
    ]
    line_items = [
        FareLineItem(label=label, amount=amount, text=text)
        for label, amount, text in candidates
        if amount != 0
    ]
    total_fare = _money(sum(item.amount for item in line_items))

    logger.debug(
        "Priced %s/%s: %.1f km effective, %d day(s), total %.2f",
        service.value, tariff.category.value, effective_distance, days, total_fare,
    )

    return FareResult(
        service_type=service.value,
        vehicle_category=tariff.category.value,
        total_fare=total_fare,
        breakdown=[item.text for item in line_items],
        line_items=line_items,
        effective_distance=effective_distance,
        effective_days=days,
        rate_used=rate_used,
        details=FareDetails(
            distance_charge=_money(base_charge + extra_hour_charge),
            driver_batta=driver_bata,
            hill_station=hill_station,
            pet_charge=pet_charge,
            night_charge=night_charge,
            extra_hour_charge=extra_hour_charge,
        ),
    )


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _resolve_service_type(value: object) -> ServiceType:
    if isinstance(value, ServiceType):
        return value
    try:
        return ServiceType(value)
    except ValueError:
        raise InvalidServiceType(value) from None


def _select_rate(request: FareRequest, tariff: VehicleTariff, service: ServiceType) -> float:
    if request.rate_override is not None and request.rate_override > 0:
        return request.rate_override
    if service is ServiceType.ROUND_TRIP:
        return tariff.round_trip_rate
    return tariff.one_way_rate


def _driving_days(distance_km: float, limits: TripLimits) -> int:
    return math.ceil(distance_km / limits.max_km_per_day)


def _bata_days(
    request: FareRequest,
    tariff: VehicleTariff,
    service: ServiceType,
    days: int,
    limits: TripLimits,
) -> int:
    if service is ServiceType.ROUND_TRIP:
        return days
    if service is ServiceType.ONE_WAY:
        if request.distance_km > DROP_BATA_THRESHOLD_KM or tariff.is_heavy_vehicle:
            return _driving_days(request.distance_km, limits)
        return 0
    return 0


def _hill_station_charge(request: FareRequest, tariff: VehicleTariff) -> float:
    if request.hill_station_override is not None:
        return request.hill_station_override
    if request.force_hill_station:
        return HILL_STATION_CHARGE_HEAVY if tariff.is_heavy_vehicle else HILL_STATION_CHARGE_LIGHT
    return 0.0


def _money(value: float) -> float:
    """Round to paise, half-up."""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:.2f}".rstrip("0").rstrip(".")
