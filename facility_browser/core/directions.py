"""Directions requests - Pure functions.

The core never opens a map service itself. It emits a DirectionsRequest
and the host decides what to do with it (the shell's DirectionsClient
opens it in a web browser).
"""

from dataclasses import dataclass

from facility_browser.core.facility import Facility


DEFAULT_DIRECTIONS_URL = "https://maps.google.com/"


@dataclass(frozen=True)
class DirectionsRequest:
    """Outbound request for wayfinding to a facility.

    Attributes:
        facility_id: Target facility identifier
        name: Target facility display name
        latitude: Destination latitude
        longitude: Destination longitude
    """
    facility_id: str
    name: str
    latitude: float
    longitude: float


def create_directions_request(facility: Facility) -> DirectionsRequest:
    """Build a directions request for a facility.

    Pure function.
    """
    return DirectionsRequest(
        facility_id=facility.id,
        name=facility.name,
        latitude=facility.latitude,
        longitude=facility.longitude,
    )


def build_directions_url(
    request: DirectionsRequest,
    base_url: str = DEFAULT_DIRECTIONS_URL,
) -> str:
    """Build the map service URL for a directions request.

    Pure function.

    Args:
        request: Directions request
        base_url: Map service base URL

    Returns:
        URL with the destination as a "lat,lng" query
        (e.g., "https://maps.google.com/?q=34.052,-118.243")
    """
    return f"{base_url}?q={request.latitude},{request.longitude}"
