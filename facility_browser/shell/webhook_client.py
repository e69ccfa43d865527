"""Event Webhook Client - Imperative Shell.

This module handles HTTP delivery of browser events (selections and
directions requests) to an external observer. All I/O is contained here;
payload formatting is in the core module.

One client is created per browser session and keeps a requests.Session
open, so every event of that session reuses the same connection.
"""

import logging
from dataclasses import dataclass
from typing import Any

import requests

from facility_browser.core.directions import DirectionsRequest
from facility_browser.core.events import format_directions_event, format_select_event
from facility_browser.core.facility import Facility


logger = logging.getLogger(__name__)


# Default timeout for webhook requests (seconds)
DEFAULT_TIMEOUT = 10

USER_AGENT = "collection-point-browser/1.0"


@dataclass
class WebhookResponse:
    """Outcome of delivering one event.

    Attributes:
        event: Event name from the payload
        success: Whether the observer accepted the event
        status_code: HTTP status code (0 if no response was received)
        error: Error message if failed
    """
    event: str
    success: bool
    status_code: int
    error: str | None = None


class WebhookClient:
    """Posts browser events to an observer webhook.

    This is part of the imperative shell - it handles HTTP I/O.

    Attributes:
        delivered: Events the observer accepted
        failed: Events that were rejected or never arrived
    """

    def __init__(
        self,
        timeout: int = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize webhook client.

        Args:
            timeout: Request timeout in seconds
            session: HTTP session to post through (a new one if not provided)
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})
        self.delivered = 0
        self.failed = 0

    def send_event(self, webhook_url: str, payload: dict[str, Any]) -> WebhookResponse:
        """Post an event payload to a webhook.

        Failures are logged and returned, never raised; the browser does
        not wait on its observers.

        Args:
            webhook_url: Observer endpoint URL
            payload: Event payload (from core.events)

        Returns:
            WebhookResponse for this event
        """
        event = payload.get("event", "unknown")
        logger.debug("Posting %s event to %s", event, webhook_url)

        try:
            response = self.session.post(webhook_url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            result = WebhookResponse(
                event=event,
                success=False,
                status_code=e.response.status_code,
                error=e.response.text,
            )
        except requests.Timeout:
            result = WebhookResponse(event=event, success=False, status_code=0, error="Request timed out")
        except requests.RequestException as e:
            result = WebhookResponse(event=event, success=False, status_code=0, error=str(e))
        else:
            self.delivered += 1
            return WebhookResponse(event=event, success=True, status_code=response.status_code)

        self.failed += 1
        logger.warning(
            "Event webhook rejected %s event (status %d): %s",
            event,
            result.status_code,
            result.error,
        )
        return result

    def post_selection(self, webhook_url: str, facility: Facility) -> WebhookResponse:
        return self.send_event(webhook_url, format_select_event(facility))

    def post_directions(self, webhook_url: str, request: DirectionsRequest) -> WebhookResponse:
        return self.send_event(webhook_url, format_directions_event(request))

    def selection_handler(self, webhook_url: str):
        """Build an on_select handler bound to one webhook URL."""
        def handle(facility: Facility) -> None:
            self.post_selection(webhook_url, facility)
        return handle

    def directions_handler(self, webhook_url: str):
        """Build an on_directions handler bound to one webhook URL."""
        def handle(request: DirectionsRequest) -> None:
            self.post_directions(webhook_url, request)
        return handle
