"""Map and list view models - Pure functions.

This module turns (facilities, state) into what the two rendering
surfaces need. Both views are built from a single project() call so
they can never disagree about which facilities are visible.
All functions are pure with no side effects.
"""

from dataclasses import dataclass
from typing import Any, Sequence

from facility_browser.core.facility import Coordinate, Facility
from facility_browser.core.filters import project
from facility_browser.core.selection import is_selected
from facility_browser.core.state import BrowserState


EMPTY_MESSAGE = "No collection points match your filter criteria."
RECOVERY_ACTION = "Show all points"


@dataclass(frozen=True)
class MapMarker:
    """A facility marker on the map view.

    Attributes:
        facility_id: Facility identifier (marker key)
        latitude: Marker latitude
        longitude: Marker longitude
        active: Whether the marker is highlighted as selected
    """
    facility_id: str
    latitude: float
    longitude: float
    active: bool


@dataclass(frozen=True)
class ListEntry:
    """A facility card in the list view.

    Attributes:
        facility_id: Facility identifier (card key)
        name: Display name
        address: Display address
        operating_hours: Opening hours text
        waste_types: Waste type badges
        distance: Display-only distance text
        active: Whether the card is highlighted as selected
    """
    facility_id: str
    name: str
    address: str
    operating_hours: str
    waste_types: tuple[str, ...]
    distance: str
    active: bool

    @property
    def directions_label(self) -> str:
        """Label for the card's directions button."""
        if not self.distance:
            return "Directions"
        return f"Directions ({self.distance})"


@dataclass(frozen=True)
class BrowserView:
    """Everything both views render for one state.

    Attributes:
        category: Active filter shown in the filter control
        selected_id: Current selection (may be hidden or stale)
        markers: Map markers for the visible facilities
        entries: List cards for the visible facilities
        user_location: Reference point marker, if any
    """
    category: str
    selected_id: str | None
    markers: tuple[MapMarker, ...]
    entries: tuple[ListEntry, ...]
    user_location: Coordinate | None = None

    @property
    def is_empty(self) -> bool:
        """Returns True if the filter left nothing to show."""
        return len(self.entries) == 0

    @property
    def empty_message(self) -> str | None:
        """Message for the empty-result state, None when not empty."""
        return EMPTY_MESSAGE if self.is_empty else None

    @property
    def recovery_action(self) -> str | None:
        """Label of the show-all action offered in the empty state."""
        return RECOVERY_ACTION if self.is_empty else None


def _to_marker(facility: Facility, state: BrowserState) -> MapMarker:
    return MapMarker(
        facility_id=facility.id,
        latitude=facility.latitude,
        longitude=facility.longitude,
        active=is_selected(facility, state.selected_id),
    )


def _to_entry(facility: Facility, state: BrowserState) -> ListEntry:
    return ListEntry(
        facility_id=facility.id,
        name=facility.name,
        address=facility.address,
        operating_hours=facility.operating_hours,
        waste_types=facility.waste_types,
        distance=facility.distance,
        active=is_selected(facility, state.selected_id),
    )


def build_map_markers(
    facilities: Sequence[Facility],
    state: BrowserState,
) -> list[MapMarker]:
    """Build map markers for the visible facilities.

    Pure function.
    """
    return [_to_marker(f, state) for f in project(facilities, state.category)]


def build_list_entries(
    facilities: Sequence[Facility],
    state: BrowserState,
) -> list[ListEntry]:
    """Build list cards for the visible facilities.

    Pure function.
    """
    return [_to_entry(f, state) for f in project(facilities, state.category)]


def build_browser_view(
    facilities: Sequence[Facility],
    state: BrowserState,
    user_location: Coordinate | None = None,
) -> BrowserView:
    """Build both views from one projection.

    Pure function.

    Args:
        facilities: Full facility list
        state: Current filter/selection state
        user_location: Optional reference point for the map

    Returns:
        BrowserView with markers and entries for the same visible subset
    """
    visible = project(facilities, state.category)

    return BrowserView(
        category=state.category,
        selected_id=state.selected_id,
        markers=tuple(_to_marker(f, state) for f in visible),
        entries=tuple(_to_entry(f, state) for f in visible),
        user_location=user_location,
    )


def view_to_dict(view: BrowserView) -> dict[str, Any]:
    """Convert a BrowserView to a JSON-serializable dict.

    Pure function.
    """
    return {
        "category": view.category,
        "selected_id": view.selected_id,
        "markers": [
            {
                "id": m.facility_id,
                "lat": m.latitude,
                "lng": m.longitude,
                "active": m.active,
            }
            for m in view.markers
        ],
        "entries": [
            {
                "id": e.facility_id,
                "name": e.name,
                "address": e.address,
                "operating_hours": e.operating_hours,
                "waste_types": list(e.waste_types),
                "distance": e.distance,
                "active": e.active,
                "directions_label": e.directions_label,
            }
            for e in view.entries
        ],
        "user_location": (
            {"lat": view.user_location.latitude, "lng": view.user_location.longitude}
            if view.user_location is not None
            else None
        ),
        "is_empty": view.is_empty,
        "empty_message": view.empty_message,
        "recovery_action": view.recovery_action,
    }
