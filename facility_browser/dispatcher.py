"""Action Dispatcher - forwards browser events to external handlers.

The dispatcher does not know what its handlers do. Selection changes go
to the selection observer, directions requests go to the directions
handler, and both are fire-and-forget: a failing handler is logged and
never reported back to the browser.
"""

import logging
from typing import Callable

from facility_browser.core.directions import DirectionsRequest, create_directions_request
from facility_browser.core.facility import Facility


logger = logging.getLogger(__name__)


SelectHandler = Callable[[Facility], None]
DirectionsHandler = Callable[[DirectionsRequest], None]


def _noop(*_args) -> None:
    """Default handler."""


class ActionDispatcher:
    """Forwards selection and directions events.

    Attributes:
        select_count: Selection events forwarded so far
        directions_count: Directions requests forwarded so far
    """

    def __init__(
        self,
        on_select: SelectHandler | None = None,
        on_directions: DirectionsHandler | None = None,
    ) -> None:
        """Initialize dispatcher.

        Args:
            on_select: Selection observer (no-op if not provided)
            on_directions: Directions handler (no-op if not provided)
        """
        self._select_handler = on_select or _noop
        self._directions_handler = on_directions or _noop
        self.select_count = 0
        self.directions_count = 0

    def on_select(self, facility: Facility) -> None:
        """Forward a user selection to the selection observer."""
        self.select_count += 1
        logger.debug("Dispatching selection of facility %s", facility.id)

        try:
            self._select_handler(facility)
        except Exception:
            logger.exception("Selection handler failed for facility %s", facility.id)

    def on_directions(self, facility: Facility) -> DirectionsRequest:
        """Forward a directions request to the directions handler.

        Never touches the selection observer.

        Args:
            facility: Destination facility

        Returns:
            The DirectionsRequest that was emitted
        """
        request = create_directions_request(facility)
        self.directions_count += 1
        logger.debug("Dispatching directions request for facility %s", facility.id)

        try:
            self._directions_handler(request)
        except Exception:
            logger.exception("Directions handler failed for facility %s", facility.id)

        return request
