"""Waste type filtering - Pure functions.

This module projects the full facility list onto the visible subset for
the active waste type filter. Both the map view and the list view read
their facilities through project(), so they always show the same subset.
All functions are pure with no side effects.
"""

from typing import Iterable, Sequence

from facility_browser.core.facility import WASTE_TYPES, Facility


# Filter sentinel meaning "no waste type restriction"
ALL = "all"


def is_known_category(category: str) -> bool:
    """Check if a category belongs to the waste type domain."""
    return category in WASTE_TYPES


def matches_category(facility: Facility, category: str) -> bool:
    """Check if a facility passes a waste type filter.

    Pure function.

    Args:
        facility: Facility to check
        category: Waste type, or ALL

    Returns:
        True if the facility accepts the waste type (always True for ALL)
    """
    if category == ALL:
        return True
    return category in facility.waste_types


def project(facilities: Sequence[Facility], category: str) -> list[Facility]:
    """Project facilities onto the visible subset for a filter.

    Pure function. The result is a stable subsequence of the input:
    relative order is never changed.

    A category outside the waste type domain matches nothing and yields an
    empty list rather than an error.

    Args:
        facilities: Full facility list, in supplier order
        category: Active filter (waste type or ALL)

    Returns:
        Visible facilities, in input order
    """
    if category == ALL:
        return list(facilities)

    if not is_known_category(category):
        return []

    return [f for f in facilities if matches_category(f, category)]


def set_filter(category: str | None) -> str:
    """Compute the filter state for a user filter change.

    Pure function. An empty choice falls back to ALL; any other value is
    kept as-is (unknown values simply project to nothing).
    """
    if not category:
        return ALL
    return category


def clear_filter() -> str:
    """Return the filter state that shows every facility."""
    return ALL


def available_filters() -> list[str]:
    """Options offered by the filter control, ALL first."""
    return [ALL, *WASTE_TYPES]


def count_by_category(facilities: Iterable[Facility]) -> dict[str, int]:
    """Count how many facilities each filter option would show.

    Pure function.

    Args:
        facilities: Full facility list

    Returns:
        Dict of filter option -> visible count, in available_filters() order
    """
    facilities = list(facilities)
    return {
        option: len(project(facilities, option))
        for option in available_filters()
    }
