"""Facility Browser - Wires Functional Core and the Action Dispatcher.

This module holds the only mutable piece of the system: the current
BrowserState for one session. Every user action replaces it with the
result of a pure core transition, and user-initiated events are
forwarded through the ActionDispatcher.
"""

import logging
from typing import Iterable

from facility_browser.core.config import Config
from facility_browser.core.directions import DirectionsRequest
from facility_browser.core.facility import DEFAULT_FACILITIES, Coordinate, Facility
from facility_browser.core.filters import ALL, matches_category, project
from facility_browser.core.selection import find_facility, is_selected, is_stale, resolve_selection
from facility_browser.core.state import (
    BrowserState,
    apply_filter,
    reset_filter,
    select_facility,
)
from facility_browser.core.views import BrowserView, build_browser_view
from facility_browser.dispatcher import ActionDispatcher, DirectionsHandler, SelectHandler
from facility_browser.shell.webhook_client import WebhookClient


logger = logging.getLogger(__name__)


class FacilityBrowser:
    """Filter/selection session over a list of facilities.

    Attributes:
        facilities: Current facility list (replaced each render cycle)
        user_location: Reference point for the map, display only
        dispatcher: Receives selection and directions events
        state: Current filter/selection state
    """

    def __init__(
        self,
        facilities: Iterable[Facility] | None = None,
        user_location: Coordinate | None = None,
        dispatcher: ActionDispatcher | None = None,
        initial_category: str = ALL,
    ) -> None:
        """Initialize browser session.

        Args:
            facilities: Facilities to browse (sample collection points if
                not provided)
            user_location: Optional reference point
            dispatcher: Event dispatcher (no-op handlers if not provided)
            initial_category: Filter to start with
        """
        if facilities is None:
            facilities = DEFAULT_FACILITIES
        self.facilities: tuple[Facility, ...] = tuple(facilities)
        self.user_location = user_location
        self.dispatcher = dispatcher or ActionDispatcher()
        self.state = apply_filter(BrowserState(), initial_category)

    @property
    def category(self) -> str:
        return self.state.category

    @property
    def selected_id(self) -> str | None:
        return self.state.selected_id

    @property
    def selected(self) -> Facility | None:
        """The selected facility, or None if nothing selected or stale."""
        return resolve_selection(self.facilities, self.state.selected_id)

    @property
    def visible(self) -> list[Facility]:
        """Facilities shown in both views for the current filter."""
        return project(self.facilities, self.state.category)

    @property
    def selection_hidden(self) -> bool:
        """True if the selected facility exists but the filter hides it."""
        if not (self.state.has_selection and self.state.is_filtered):
            return False
        selected = self.selected
        return selected is not None and not matches_category(selected, self.state.category)

    def set_filter(self, category: str | None) -> BrowserState:
        """Apply a waste type filter. Selection is kept."""
        self.state = apply_filter(self.state, category)
        logger.debug(
            "Filter set to %s (%d visible)",
            self.state.category,
            len(self.visible),
        )
        return self.state

    def clear_filter(self) -> BrowserState:
        """Show every facility again. Selection is kept."""
        self.state = reset_filter(self.state)
        logger.debug("Filter cleared")
        return self.state

    def select(self, facility: Facility) -> BrowserState:
        """Select a facility from either view.

        Replaces the previous selection and notifies the selection
        observer once.
        """
        self.state = select_facility(self.state, facility)
        logger.debug("Selected facility %s", facility.id)
        self.dispatcher.on_select(facility)
        return self.state

    def select_by_id(self, facility_id: str) -> Facility | None:
        """Select a facility by identifier.

        Args:
            facility_id: Identifier from a view key

        Returns:
            The selected Facility, or None if the id is not in the current
            facility list (state is left unchanged)
        """
        facility = find_facility(self.facilities, facility_id)
        if facility is None:
            logger.warning("Cannot select unknown facility %s", facility_id)
            return None

        self.select(facility)
        return facility

    def request_directions(self, facility: Facility) -> DirectionsRequest:
        """Ask the host for directions to a facility.

        Does not select the facility.
        """
        return self.dispatcher.on_directions(facility)

    def is_selected(self, facility: Facility) -> bool:
        return is_selected(facility, self.state.selected_id)

    def replace_facilities(self, facilities: Iterable[Facility]) -> None:
        """Start a new render cycle with a refreshed facility list.

        The selection is kept by identifier and may become stale.
        """
        self.facilities = tuple(facilities)
        if is_stale(self.facilities, self.state.selected_id):
            logger.info(
                "Selected facility %s is not in the refreshed list",
                self.state.selected_id,
            )

    def snapshot(self) -> BrowserView:
        """Build the map and list views for the current state."""
        return build_browser_view(self.facilities, self.state, self.user_location)


def create_browser(
    config: Config,
    on_select: SelectHandler | None = None,
    on_directions: DirectionsHandler | None = None,
    webhook_client: WebhookClient | None = None,
) -> FacilityBrowser:
    """Create a browser session from configuration.

    When the config names an event webhook, selection and directions
    events are also posted there (after the given handlers). Each handler
    runs on its own: one that raises is logged and the rest still run.

    Args:
        config: Application configuration
        on_select: Host selection observer
        on_directions: Host directions handler
        webhook_client: Webhook client (created if needed and not provided)

    Returns:
        New FacilityBrowser in its initial state
    """
    select_handlers = [h for h in (on_select,) if h is not None]
    directions_handlers = [h for h in (on_directions,) if h is not None]

    if config.event_webhook_url:
        webhook_client = webhook_client or WebhookClient()
        select_handlers.append(webhook_client.selection_handler(config.event_webhook_url))
        directions_handlers.append(webhook_client.directions_handler(config.event_webhook_url))

    def handle_select(facility: Facility) -> None:
        for handler in select_handlers:
            try:
                handler(facility)
            except Exception:
                logger.exception("Selection handler %r failed for facility %s", handler, facility.id)

    def handle_directions(request: DirectionsRequest) -> None:
        for handler in directions_handlers:
            try:
                handler(request)
            except Exception:
                logger.exception(
                    "Directions handler %r failed for facility %s", handler, request.facility_id
                )

    return FacilityBrowser(
        facilities=config.facilities,
        user_location=config.user_location,
        dispatcher=ActionDispatcher(
            on_select=handle_select if select_handlers else None,
            on_directions=handle_directions if directions_handlers else None,
        ),
        initial_category=config.initial_category,
    )
