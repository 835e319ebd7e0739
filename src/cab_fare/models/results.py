"""Result types — the contract between the engine and its callers."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class FareLineItem(BaseModel):
    """One priced line of the fare breakdown."""

    label: str
    amount: float
    text: str
    """Display form, e.g. ``"Driver Bata (2 days x ₹300): ₹600"``."""


class FareDetails(BaseModel):
    """Per-component amounts.  Zero when the component does not apply."""

    distance_charge: float = 0.0
    """Distance charge, or package price + extra hours for local trips."""
    driver_batta: float = 0.0
    hill_station: float = 0.0
    pet_charge: float = 0.0
    night_charge: float = 0.0
    extra_hour_charge: float = 0.0


class FareResult(BaseModel):
    """Priced trip.

    ``total_fare`` is exactly the sum of ``line_items`` amounts; external
    charges (toll, permit, parking) are never included.
    """

    service_type: str
    vehicle_category: str
    total_fare: float
    breakdown: list[str] = Field(default_factory=list)
    line_items: list[FareLineItem] = Field(default_factory=list)
    effective_distance: float
    """Billable km after minimums (actual km for local trips)."""
    effective_days: int = 1
    """Billable days after the max-km-per-day estimate (round trips)."""
    rate_used: float
    """Per-km rate applied; 0 for local hourly trips."""
    details: FareDetails = Field(default_factory=FareDetails)


class GSTBreakdown(BaseModel):
    """GST split for one taxable amount."""

    taxable_amount: float
    rate: Literal[5, 12]
    cgst: float
    sgst: float
    igst: float
    total_tax: float
    total_amount: float
    is_inter_state: bool
    type: Literal["IGST", "CGST_SGST"]
