"""Directions Client - Imperative Shell.

This module opens directions in the user's web browser. The directions
request itself is built in the core module.
"""

import logging
import webbrowser
from dataclasses import dataclass

from facility_browser.core.directions import (
    DEFAULT_DIRECTIONS_URL,
    DirectionsRequest,
    build_directions_url,
)


logger = logging.getLogger(__name__)


@dataclass
class DirectionsResult:
    """Result of opening directions.

    Attributes:
        success: Whether a browser accepted the URL
        url: The map service URL
        error: Error message if failed
    """
    success: bool
    url: str
    error: str | None = None


class DirectionsClient:
    """Client for opening directions in a map service.

    This is part of the imperative shell - it launches a web browser.
    """

    def __init__(self, base_url: str = DEFAULT_DIRECTIONS_URL) -> None:
        """Initialize directions client.

        Args:
            base_url: Map service base URL
        """
        self.base_url = base_url

    def open(self, request: DirectionsRequest) -> DirectionsResult:
        """Open directions to a facility in a new browser tab.

        This method performs I/O (launches a browser).

        Args:
            request: Directions request from the dispatcher

        Returns:
            DirectionsResult indicating success or failure
        """
        url = build_directions_url(request, self.base_url)
        logger.info("Getting directions to %s: %s", request.name, url)

        try:
            opened = webbrowser.open(url, new=2)
        except webbrowser.Error as e:
            logger.error("Failed to open browser: %s", str(e))
            return DirectionsResult(success=False, url=url, error=str(e))

        if not opened:
            logger.warning("No browser available to open %s", url)
            return DirectionsResult(
                success=False,
                url=url,
                error="No browser available",
            )

        return DirectionsResult(success=True, url=url)

    def __call__(self, request: DirectionsRequest) -> None:
        """Directions handler form, for ActionDispatcher(on_directions=...)."""
        self.open(request)
