"""Browser state transitions - Pure functions.

The browser has exactly two independent state variables: the active
waste type filter and the selected facility identifier. Every transition
returns a new BrowserState; nothing is mutated in place.
"""

from dataclasses import dataclass, replace

from facility_browser.core.facility import Facility
from facility_browser.core.filters import ALL, clear_filter, set_filter
from facility_browser.core.selection import select


@dataclass(frozen=True)
class BrowserState:
    """Immutable filter/selection state.

    Attributes:
        category: Active waste type filter, or ALL
        selected_id: Identifier of the selected facility, or None
    """
    category: str = ALL
    selected_id: str | None = None

    @property
    def is_filtered(self) -> bool:
        """Returns True if a waste type filter is active."""
        return self.category != ALL

    @property
    def has_selection(self) -> bool:
        """Returns True if a facility is selected."""
        return self.selected_id is not None


def apply_filter(state: BrowserState, category: str | None) -> BrowserState:
    """Change the active filter.

    Pure function. Selection is left untouched, even when the selected
    facility is no longer visible.
    """
    return replace(state, category=set_filter(category))


def reset_filter(state: BrowserState) -> BrowserState:
    """Show every facility again. Selection is left untouched."""
    return replace(state, category=clear_filter())


def select_facility(state: BrowserState, facility: Facility) -> BrowserState:
    """Replace the selection with a facility. Filter is left untouched."""
    return replace(state, selected_id=select(facility))
