"""Tests for the FacilityBrowser session.

Tests the coordination between the functional core and the dispatcher.
Uses mocks for the external handlers.
"""

from dataclasses import replace
from unittest.mock import Mock

import pytest

from facility_browser.browser import FacilityBrowser, create_browser
from facility_browser.core.config import Config
from facility_browser.core.facility import DEFAULT_FACILITIES, DEFAULT_USER_LOCATION
from facility_browser.core.filters import ALL
from facility_browser.dispatcher import ActionDispatcher


@pytest.fixture
def on_select():
    return Mock()


@pytest.fixture
def on_directions():
    return Mock()


@pytest.fixture
def browser(on_select, on_directions):
    """Browser over the sample facilities with mock handlers."""
    return FacilityBrowser(
        facilities=DEFAULT_FACILITIES,
        user_location=DEFAULT_USER_LOCATION,
        dispatcher=ActionDispatcher(on_select=on_select, on_directions=on_directions),
    )


def _ids(facilities):
    return [f.id for f in facilities]


class TestInitialState:
    """Tests for a fresh session."""

    def test_defaults(self):
        """Unfiltered, nothing selected, sample facilities."""
        browser = FacilityBrowser()

        assert browser.category == ALL
        assert browser.selected_id is None
        assert browser.selected is None
        assert _ids(browser.visible) == ["1", "2", "3"]

    def test_initial_category(self):
        """A starting filter can be configured."""
        browser = FacilityBrowser(initial_category="Glass")
        assert _ids(browser.visible) == ["1"]


class TestFiltering:
    """Tests for set_filter() and clear_filter()."""

    def test_electronics(self, browser):
        """Electronics shows only the second facility."""
        browser.set_filter("Electronics")
        assert _ids(browser.visible) == ["2"]

    def test_paper(self, browser):
        """Paper shows first and third, in order."""
        browser.set_filter("Paper")
        assert _ids(browser.visible) == ["1", "3"]

    def test_clear_filter(self, browser):
        """Show all restores every facility."""
        browser.set_filter("Uranium")
        assert browser.visible == []

        browser.clear_filter()

        assert browser.category == ALL
        assert _ids(browser.visible) == ["1", "2", "3"]

    def test_filter_does_not_notify(self, browser, on_select, on_directions):
        """Filtering is not an event for the dispatcher."""
        browser.set_filter("Paper")
        browser.clear_filter()

        on_select.assert_not_called()
        on_directions.assert_not_called()


class TestSelection:
    """Tests for select() and friends."""

    def test_select_notifies_once(self, browser, on_select):
        """Each user selection notifies the observer exactly once."""
        browser.select(DEFAULT_FACILITIES[0])

        on_select.assert_called_once_with(DEFAULT_FACILITIES[0])
        assert browser.selected_id == "1"

    def test_render_does_not_notify(self, browser, on_select):
        """Rendering views is not a selection event."""
        browser.select(DEFAULT_FACILITIES[0])
        browser.snapshot()
        browser.snapshot()
        _ = browser.visible

        assert on_select.call_count == 1

    def test_selection_survives_filter(self, browser):
        """Filtering out the selected facility keeps it selected."""
        browser.select(DEFAULT_FACILITIES[0])
        browser.set_filter("Electronics")

        assert browser.selected_id == "1"
        assert DEFAULT_FACILITIES[0] not in browser.visible

        view = browser.snapshot()
        assert not any(e.active for e in view.entries)

        browser.clear_filter()
        assert browser.snapshot().entries[0].active is True

    def test_selection_hidden(self, browser):
        """Reports when the filter hides the selected facility."""
        assert browser.selection_hidden is False

        browser.select(DEFAULT_FACILITIES[0])
        assert browser.selection_hidden is False

        browser.set_filter("Paper")
        assert browser.selection_hidden is False

        browser.set_filter("Electronics")
        assert browser.selection_hidden is True

        browser.clear_filter()
        assert browser.selection_hidden is False

    def test_stale_selection_is_not_hidden(self, browser):
        """A selection missing from the list is stale, not hidden."""
        browser.select(DEFAULT_FACILITIES[0])
        browser.set_filter("Electronics")
        browser.replace_facilities(DEFAULT_FACILITIES[1:])

        assert browser.selection_hidden is False

    def test_batteries_scenario(self, browser, on_select):
        """Filter by Batteries, then select the only result."""
        browser.set_filter("Batteries")
        (only,) = browser.visible

        browser.select(only)

        assert browser.selected_id == "2"
        on_select.assert_called_once_with(only)

    def test_is_selected_by_identifier(self, browser):
        """Copies sharing the identifier count as selected."""
        browser.select(DEFAULT_FACILITIES[1])
        copy = replace(DEFAULT_FACILITIES[1], name="Renamed")

        assert browser.is_selected(copy) is True
        assert browser.is_selected(DEFAULT_FACILITIES[0]) is False
        assert browser.is_selected(DEFAULT_FACILITIES[2]) is False

    def test_select_by_id(self, browser, on_select):
        """Selecting by view key looks the facility up."""
        facility = browser.select_by_id("3")

        assert facility is DEFAULT_FACILITIES[2]
        assert browser.selected_id == "3"
        on_select.assert_called_once()

    def test_select_by_unknown_id(self, browser, on_select):
        """Unknown ids leave the state unchanged."""
        browser.select(DEFAULT_FACILITIES[0])
        assert browser.select_by_id("nope") is None

        assert browser.selected_id == "1"
        assert on_select.call_count == 1

    def test_select_outside_list(self, browser):
        """select() itself does not validate membership."""
        outsider = replace(DEFAULT_FACILITIES[0], id="99")
        browser.select(outsider)

        assert browser.selected_id == "99"
        assert browser.selected is None


class TestDirections:
    """Tests for request_directions()."""

    def test_does_not_select(self, browser, on_select, on_directions):
        """Directions on a non-selected facility do not select it."""
        request = browser.request_directions(DEFAULT_FACILITIES[1])

        assert browser.selected_id is None
        on_select.assert_not_called()
        on_directions.assert_called_once_with(request)

    def test_keeps_existing_selection(self, browser, on_directions):
        """Directions leave another facility selected."""
        browser.select(DEFAULT_FACILITIES[0])
        browser.request_directions(DEFAULT_FACILITIES[2])
        browser.request_directions(DEFAULT_FACILITIES[2])

        assert browser.selected_id == "1"
        assert on_directions.call_count == 2
        assert browser.dispatcher.directions_count == 2


class TestReplaceFacilities:
    """Tests for replace_facilities()."""

    def test_selection_follows_identifier(self, browser):
        """A refreshed copy is still the selected one."""
        browser.select(DEFAULT_FACILITIES[1])
        refreshed = [replace(f, distance="9 km") for f in reversed(DEFAULT_FACILITIES)]

        browser.replace_facilities(refreshed)

        assert browser.selected is refreshed[1]
        assert browser.snapshot().entries[1].active is True

    def test_stale_selection_kept(self, browser):
        """A selection whose facility vanished stays as state."""
        browser.select(DEFAULT_FACILITIES[0])
        browser.replace_facilities(DEFAULT_FACILITIES[1:])

        assert browser.selected_id == "1"
        assert browser.selected is None


class TestSnapshot:
    """Tests for snapshot()."""

    def test_includes_user_location(self, browser):
        """Reference point is passed through for display."""
        assert browser.snapshot().user_location == DEFAULT_USER_LOCATION

    def test_empty_state(self, browser):
        """Over-filtering yields the empty view."""
        browser.set_filter("Uranium")
        assert browser.snapshot().is_empty is True


class TestCreateBrowser:
    """Tests for create_browser()."""

    def test_from_config(self, on_select, on_directions):
        """Wires config and handlers."""
        config = Config(initial_category="Paper")
        browser = create_browser(config, on_select=on_select, on_directions=on_directions)

        assert _ids(browser.visible) == ["1", "3"]
        browser.select(browser.visible[0])
        browser.request_directions(browser.visible[1])

        on_select.assert_called_once()
        on_directions.assert_called_once()

    def test_webhook_handlers_added(self, on_select):
        """Configured webhook receives events after the host handler."""
        webhook_client = Mock()
        config = Config(event_webhook_url="https://hooks.example.com/events")
        browser = create_browser(config, on_select=on_select, webhook_client=webhook_client)

        browser.select(DEFAULT_FACILITIES[0])

        on_select.assert_called_once_with(DEFAULT_FACILITIES[0])
        webhook_client.selection_handler.assert_called_once_with("https://hooks.example.com/events")
        webhook_client.selection_handler.return_value.assert_called_once_with(DEFAULT_FACILITIES[0])

    def test_failing_host_observer_does_not_block_webhook(self):
        """Webhook still receives the selection when the host observer raises."""
        webhook_client = Mock()
        config = Config(event_webhook_url="https://hooks.example.com/events")
        browser = create_browser(
            config,
            on_select=Mock(side_effect=RuntimeError("observer down")),
            webhook_client=webhook_client,
        )

        browser.select(DEFAULT_FACILITIES[0])

        assert webhook_client.selection_handler.return_value.call_count == 1
        assert browser.selected_id == "1"

    def test_failing_host_directions_handler_does_not_block_webhook(self):
        """Webhook still receives the directions request when the host handler raises."""
        webhook_client = Mock()
        config = Config(event_webhook_url="https://hooks.example.com/events")
        browser = create_browser(
            config,
            on_directions=Mock(side_effect=RuntimeError("browser closed")),
            webhook_client=webhook_client,
        )

        request = browser.request_directions(DEFAULT_FACILITIES[2])

        webhook_client.directions_handler.return_value.assert_called_once_with(request)

    def test_no_handlers(self):
        """Without handlers the browser still works."""
        browser = create_browser(Config())
        browser.select(DEFAULT_FACILITIES[0])
        browser.request_directions(DEFAULT_FACILITIES[0])
        assert browser.selected_id == "1"
