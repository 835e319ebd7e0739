"""Worker side of the dispatch channel.

``handle_message`` turns one ``{"id", "args"}`` envelope into exactly one
reply envelope: ``{"id", "result"}`` on success, ``{"id", "error",
"error_type"}`` on failure.  It never raises.
"""

from __future__ import annotations

import logging
from typing import Any

from cab_fare.config.tariff import DEFAULT_LIMITS, TripLimits
from cab_fare.engine.fare import compute_fare
from cab_fare.models.trip import FareRequest

logger = logging.getLogger(__name__)


def handle_message(message: dict[str, Any], limits: TripLimits = DEFAULT_LIMITS) -> dict[str, Any]:
    """Run the fare calculator for one request envelope."""
    call_id = message.get("id")
    try:
        request = FareRequest.from_args(message.get("args") or [])
        result = compute_fare(request, limits)
    except Exception as exc:
        logger.warning("Fare computation %s failed: %s", call_id, exc)
        return {"id": call_id, "error": str(exc), "error_type": type(exc).__name__}
    return {"id": call_id, "result": result.model_dump(mode="json")}
