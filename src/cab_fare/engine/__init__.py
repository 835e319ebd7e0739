"""Engine — fare calculation and GST determination."""

from cab_fare.engine.fare import compute_fare
from cab_fare.engine.gst import (
    GST_STATE_CODES,
    calculate_gst,
    determine_gst_type,
    financial_year,
    get_state_code,
    get_state_name,
    is_valid_gstin,
)

__all__ = [
    "compute_fare",
    "GST_STATE_CODES",
    "calculate_gst",
    "determine_gst_type",
    "financial_year",
    "get_state_code",
    "get_state_name",
    "is_valid_gstin",
]
