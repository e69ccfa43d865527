"""Functional Core - Pure functions with no side effects.

This module contains all browser logic as pure functions:
- Facility data parsing
- Waste type filtering (the visible subset)
- Selection tracking by identifier
- Map/list view models
- Directions requests
- Health impact progress

All functions here are deterministic and have no I/O.
"""

from facility_browser.core.facility import (
    WASTE_TYPES,
    Coordinate,
    Facility,
    parse_facilities,
)
from facility_browser.core.filters import ALL, clear_filter, project, set_filter
from facility_browser.core.selection import is_selected, select
from facility_browser.core.state import BrowserState
from facility_browser.core.views import BrowserView, build_browser_view
from facility_browser.core.directions import DirectionsRequest, build_directions_url
from facility_browser.core.progress import HealthMetric, progress_percent

__all__ = [
    # Facility
    "WASTE_TYPES",
    "Coordinate",
    "Facility",
    "parse_facilities",
    # Filters
    "ALL",
    "project",
    "set_filter",
    "clear_filter",
    # Selection
    "select",
    "is_selected",
    "BrowserState",
    # Views
    "BrowserView",
    "build_browser_view",
    # Directions
    "DirectionsRequest",
    "build_directions_url",
    # Progress
    "HealthMetric",
    "progress_percent",
]
