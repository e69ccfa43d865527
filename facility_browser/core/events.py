"""Browser event payloads - Pure functions.

Formats selection and directions events for external observers (the
event webhook). Delivery is handled by the shell layer.
"""

from typing import Any

from facility_browser.core.directions import DirectionsRequest
from facility_browser.core.facility import Facility


def format_select_event(facility: Facility) -> dict[str, Any]:
    """Format a facility selection as an event payload.

    Pure function.
    """
    return {
        "event": "facility_selected",
        "facility_id": facility.id,
        "name": facility.name,
        "waste_types": list(facility.waste_types),
    }


def format_directions_event(
    request: DirectionsRequest,
    url: str | None = None,
) -> dict[str, Any]:
    """Format a directions request as an event payload.

    Pure function.

    Args:
        request: Directions request emitted by the browser
        url: Map service URL the host opened, if any

    Returns:
        Event payload dict
    """
    payload: dict[str, Any] = {
        "event": "directions_requested",
        "facility_id": request.facility_id,
        "name": request.name,
        "destination": {"lat": request.latitude, "lng": request.longitude},
    }
    if url:
        payload["url"] = url
    return payload
