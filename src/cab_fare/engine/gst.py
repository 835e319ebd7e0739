"""GST for passenger transport — IGST vs CGST + SGST.

Supply type is read from the first two characters (state code) of the
supplier and customer GSTINs:

  - no supplier GSTIN                         → CGST_SGST
  - registered customer in a different state  → IGST
  - same state, or unregistered customer      → CGST_SGST

Unregistered (B2C) customers are always treated as intra-state; the real
place-of-supply rule for passenger transport (where the trip starts) is
not modelled.

CGST and SGST are each computed from half the rate and rounded on their
own, so ``cgst + sgst`` can differ by ₹1 from the rounded total tax.
"""

from __future__ import annotations

import re
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Literal

from cab_fare.models.results import GSTBreakdown

GSTType = Literal["IGST", "CGST_SGST"]

SUPPORTED_RATES = (5, 12)

GST_STATE_CODES: dict[str, str] = {
    "01": "Jammu and Kashmir",
    "02": "Himachal Pradesh",
    "03": "Punjab",
    "04": "Chandigarh",
    "05": "Uttarakhand",
    "06": "Haryana",
    "07": "Delhi",
    "08": "Rajasthan",
    "09": "Uttar Pradesh",
    "10": "Bihar",
    "11": "Sikkim",
    "12": "Arunachal Pradesh",
    "13": "Nagaland",
    "14": "Manipur",
    "15": "Mizoram",
    "16": "Tripura",
    "17": "Meghalaya",
    "18": "Assam",
    "19": "West Bengal",
    "20": "Jharkhand",
    "21": "Odisha",
    "22": "Chhattisgarh",
    "23": "Madhya Pradesh",
    "24": "Gujarat",
    "25": "Daman and Diu",
    "26": "Dadra and Nagar Haveli",
    "27": "Maharashtra",
    "28": "Andhra Pradesh (Old)",
    "29": "Karnataka",
    "30": "Goa",
    "31": "Lakshadweep",
    "32": "Kerala",
    "33": "Tamil Nadu",
    "34": "Puducherry",
    "35": "Andaman and Nicobar Islands",
    "36": "Telangana",
    "37": "Andhra Pradesh",
    "38": "Ladakh",
    "97": "Other Territory",
}

_GSTIN_RE = re.compile(r"^[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][1-9A-Z]Z[0-9A-Z]$")


def get_state_code(gstin: str | None) -> str | None:
    """Leading two characters of a GSTIN, or ``None`` if it is too short."""
    if not gstin or len(gstin) < 2:
        return None
    return gstin[:2]


def get_state_name(code: str | None) -> str:
    return GST_STATE_CODES.get(code or "", "Unknown State")


def is_valid_gstin(gstin: str | None) -> bool:
    """Strict 15-character GSTIN format check.

    Not applied by ``calculate_gst``; callers that want to reject bad ids
    must call this first.
    """
    if not gstin:
        return False
    return bool(_GSTIN_RE.match(gstin.strip().upper()))


def determine_gst_type(supplier_gstin: str | None, customer_gstin: str | None = None) -> GSTType:
    """IGST for a registered customer in another state, otherwise CGST_SGST."""
    supplier_code = get_state_code(supplier_gstin)
    if supplier_code is None:
        return "CGST_SGST"
    customer_code = get_state_code(customer_gstin)
    if customer_code is None:
        return "CGST_SGST"
    return "IGST" if supplier_code != customer_code else "CGST_SGST"


def calculate_gst(
    amount: float,
    rate: int = 5,
    supplier_gstin: str | None = None,
    customer_gstin: str | None = None,
) -> GSTBreakdown:
    """Split GST on ``amount`` into IGST or CGST + SGST (rounded to ₹1, half-up)."""
    if rate not in SUPPORTED_RATES:
        raise ValueError(f"GST rate must be one of {SUPPORTED_RATES}, got {rate!r}")
    rate = int(rate)

    gst_type = determine_gst_type(supplier_gstin, customer_gstin)
    is_inter_state = gst_type == "IGST"
    base = Decimal(str(amount))

    cgst = sgst = igst = 0
    if is_inter_state:
        igst = _rupees(base * rate / 100)
        total_tax = igst
    else:
        cgst = _rupees(base * rate / 200)
        sgst = _rupees(base * rate / 200)
        total_tax = cgst + sgst

    return GSTBreakdown(
        taxable_amount=amount,
        rate=rate,
        cgst=cgst,
        sgst=sgst,
        igst=igst,
        total_tax=total_tax,
        total_amount=amount + total_tax,
        is_inter_state=is_inter_state,
        type=gst_type,
    )


def financial_year(day: date) -> str:
    """Indian financial year label (April–March), e.g. Feb 2026 → ``"25-26"``."""
    start = day.year if day.month >= 4 else day.year - 1
    return f"{start % 100:02d}-{(start + 1) % 100:02d}"


def _rupees(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
