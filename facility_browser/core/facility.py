"""Facility data models and parsing - Pure functions.

This module handles turning raw collection point records into typed
Facility objects. All functions are pure with no side effects.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterable


# Enumerated waste type domain, in the order the filter control lists them
WASTE_TYPES: tuple[str, ...] = (
    "Plastic",
    "Paper",
    "Glass",
    "Metal",
    "Electronics",
    "Batteries",
    "Organic",
)


@dataclass(frozen=True)
class Coordinate:
    """A geographic point.

    Attributes:
        latitude: Point latitude
        longitude: Point longitude
    """
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Facility:
    """Immutable collection point data model.

    Attributes:
        id: Unique identifier, stable across renders
        name: Display name
        address: Display address
        latitude: Location latitude
        longitude: Location longitude
        operating_hours: Free-text opening hours
        waste_types: Accepted waste types (non-empty)
        distance: Display-only distance text (e.g., "0.8 km")
    """
    id: str
    name: str
    address: str
    latitude: float
    longitude: float
    operating_hours: str
    waste_types: tuple[str, ...]
    distance: str = ""

    @property
    def coordinates(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)


DEFAULT_USER_LOCATION = Coordinate(latitude=34.05, longitude=-118.245)

DEFAULT_FACILITIES: tuple[Facility, ...] = (
    Facility(
        id="1",
        name="Central Recycling Facility",
        address="123 Green Street, Eco District",
        latitude=34.052,
        longitude=-118.243,
        operating_hours="Mon-Fri: 8AM-6PM, Sat: 9AM-4PM",
        waste_types=("Plastic", "Paper", "Glass"),
        distance="0.8 km",
    ),
    Facility(
        id="2",
        name="Community Collection Center",
        address="456 Recycle Avenue, Green Zone",
        latitude=34.055,
        longitude=-118.248,
        operating_hours="Mon-Sat: 7AM-7PM",
        waste_types=("Electronics", "Metal", "Batteries"),
        distance="1.2 km",
    ),
    Facility(
        id="3",
        name="Neighborhood Drop-off Point",
        address="789 Sustainability Road",
        latitude=34.048,
        longitude=-118.25,
        operating_hours="24/7 Access",
        waste_types=("Plastic", "Paper", "Organic"),
        distance="1.5 km",
    ),
)


def _parse_coordinates(record: dict[str, Any]) -> tuple[float, float]:
    """Read latitude/longitude from either flat or nested record shapes."""
    coords = record.get("coordinates")
    if isinstance(coords, dict):
        return float(coords["lat"]), float(coords["lng"])
    return float(record["latitude"]), float(record["longitude"])


def parse_facility(record: Any) -> Facility | None:
    """Parse a single raw record into a Facility.

    Pure function: takes a raw record, returns typed Facility or None if invalid.

    Accepts snake_case keys (operating_hours, waste_types, latitude,
    longitude) as well as the camelCase shape used by web clients
    (operatingHours, wasteTypes, coordinates: {lat, lng}).

    Args:
        record: Raw facility record (anything that is not a dict is invalid)

    Returns:
        Facility object or None if parsing fails
    """
    if not isinstance(record, dict):
        return None

    try:
        facility_id = record.get("id")
        name = record.get("name")
        if facility_id is None or not name:
            return None

        latitude, longitude = _parse_coordinates(record)

        waste_types = record.get("waste_types", record.get("wasteTypes")) or []
        if isinstance(waste_types, str):
            waste_types = [waste_types]
        if not waste_types:
            return None

        return Facility(
            id=str(facility_id),
            name=str(name),
            address=str(record.get("address", "")),
            latitude=latitude,
            longitude=longitude,
            operating_hours=str(
                record.get("operating_hours", record.get("operatingHours", ""))
            ),
            waste_types=tuple(str(t) for t in waste_types),
            distance=str(record.get("distance", "")),
        )
    except (KeyError, TypeError, ValueError):
        return None


def parse_facilities(records: Iterable[Any]) -> list[Facility]:
    """Parse raw records into a list of Facilities.

    Pure function: drops invalid records and keeps the supplier's order.

    Args:
        records: Raw facility dicts

    Returns:
        List of valid Facility objects, in input order
    """
    facilities = []

    for record in records:
        facility = parse_facility(record)
        if facility is not None:
            facilities.append(facility)

    return facilities


def facility_ids(facilities: Iterable[Facility]) -> list[str]:
    """Extract IDs from facilities, in order.

    Pure function.
    """
    return [f.id for f in facilities]


def find_duplicate_ids(facilities: Iterable[Facility]) -> set[str]:
    """Find identifiers that appear more than once.

    Pure function. Identifier uniqueness is trusted downstream; this is
    only used to warn about bad input.

    Args:
        facilities: Facilities to check

    Returns:
        Set of duplicated IDs (empty if all unique)
    """
    counts = Counter(facility_ids(facilities))
    return {facility_id for facility_id, count in counts.items() if count > 1}
