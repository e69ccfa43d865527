"""Facility selection - Pure functions.

Selection is tracked by facility identifier, never by value, so a
refreshed or reordered copy of the same facility still counts as
selected and a selection whose facility disappeared can be detected.
All functions are pure with no side effects.
"""

from typing import Iterable

from facility_browser.core.facility import Facility


def select(facility: Facility) -> str:
    """Compute the selection state for a user selecting a facility.

    Pure function. Single-selection model: the result replaces whatever
    was selected before. The facility is not checked against the current
    facility list.

    Args:
        facility: Facility the user activated

    Returns:
        New selection (the facility's identifier)
    """
    return facility.id


def is_selected(facility: Facility, selected_id: str | None) -> bool:
    """Check if a facility is the selected one.

    Pure function. Compares identifiers only.
    """
    if selected_id is None:
        return False
    return facility.id == selected_id


def find_facility(
    facilities: Iterable[Facility],
    facility_id: str,
) -> Facility | None:
    """Look up a facility by identifier.

    Pure function.

    Args:
        facilities: Facilities to search
        facility_id: Identifier to find

    Returns:
        First facility with that identifier, or None
    """
    for facility in facilities:
        if facility.id == facility_id:
            return facility
    return None


def resolve_selection(
    facilities: Iterable[Facility],
    selected_id: str | None,
) -> Facility | None:
    """Get the selected facility from the current facility list.

    Pure function.

    Returns:
        The selected Facility, or None if nothing is selected or the
        selection is stale
    """
    if selected_id is None:
        return None
    return find_facility(facilities, selected_id)


def is_stale(facilities: Iterable[Facility], selected_id: str | None) -> bool:
    """Check if a selection points at a facility no longer supplied.

    Pure function.
    """
    if selected_id is None:
        return False
    return find_facility(facilities, selected_id) is None
