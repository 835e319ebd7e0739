"""Tests for config/tariff.py."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cab_fare.config import (
    DEFAULT_CATEGORY,
    TARIFFS,
    LocalPackage,
    VehicleCategory,
    VehicleTariff,
    get_tariff,
    iter_tariffs,
    rate_card,
)


def test_sedan_values(sedan: VehicleTariff):
    assert sedan.category is VehicleCategory.SEDAN
    assert sedan.is_heavy_vehicle is False
    assert sedan.min_km_per_day == 250
    assert sedan.round_trip_rate == 14
    assert sedan.one_way_rate == 16
    assert sedan.driver_bata == 300
    assert sedan.local_8hr_pkg == 2200
    assert sedan.extra_hr_rate == 250
    assert sedan.min_drop_km == 130


def test_every_category_has_a_tariff():
    assert set(TARIFFS) == set(VehicleCategory)
    for category, tariff in TARIFFS.items():
        assert tariff.category is category


def test_heavy_vehicles():
    heavy = {t.category for t in iter_tariffs() if t.is_heavy_vehicle}
    assert heavy == {VehicleCategory.TEMPO, VehicleCategory.MINIBUS, VehicleCategory.BUS}


@pytest.mark.parametrize("raw", ["rickshaw", "", None, "sedan_xl", 42])
def test_unknown_category_falls_back_to_sedan(raw):
    assert DEFAULT_CATEGORY is VehicleCategory.SEDAN
    assert get_tariff(raw).category is VehicleCategory.SEDAN


def test_category_lookup_is_case_insensitive():
    assert get_tariff(" SUV ").category is VehicleCategory.SUV
    assert get_tariff(VehicleCategory.BUS).category is VehicleCategory.BUS


def test_table_is_read_only(sedan: VehicleTariff):
    with pytest.raises(TypeError):
        TARIFFS[VehicleCategory.SEDAN] = sedan  # type: ignore[index]
    with pytest.raises(ValidationError):
        sedan.one_way_rate = 1


def test_package_prices_increase_with_package(tempo: VehicleTariff):
    for tariff in iter_tariffs():
        prices = [tariff.package_price(p) for p in LocalPackage]
        assert prices == sorted(prices)
    assert tempo.package_price(LocalPackage.HR8_KM80) == 5500


@pytest.mark.parametrize(
    "package, hours, km",
    [("2hr_20km", 2, 20), ("4hr_40km", 4, 40), ("8hr_80km", 8, 80), ("12hr_120km", 12, 120)],
)
def test_local_package_hours_and_km(package: str, hours: int, km: int):
    p = LocalPackage(package)
    assert p.hours == hours
    assert p.km == km
    assert p.label == f"{hours} Hr / {km} Km"


def test_rate_card():
    card = rate_card()
    assert len(card) == len(VehicleCategory)
    assert list(card.index) == [c.value for c in VehicleCategory]
    assert card.loc["sedan", "one_way_rate"] == 16
    assert bool(card.loc["bus", "is_heavy_vehicle"]) is True
