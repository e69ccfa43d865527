"""Tests for the Cloud Function entry points.

Config loading is patched and requests are mocked.
"""

from unittest.mock import Mock, patch

from facility_browser.core.config import Config
from facility_browser.main import facility_view, health_impact, render_view


def _request(**args):
    request = Mock()
    request.args = args
    return request


class TestRenderView:
    """Tests for render_view()."""

    def test_defaults(self):
        """No arguments renders every facility."""
        response = render_view(Config(), {})

        assert response["category"] == "all"
        assert len(response["entries"]) == 3
        assert response["filters"]["all"] == 3

    def test_category_and_selection(self):
        """Query arguments rebuild filter and selection."""
        response = render_view(Config(), {"category": "Batteries", "selected": "2"})

        assert [e["id"] for e in response["entries"]] == ["2"]
        assert response["entries"][0]["active"] is True
        assert response["selected_id"] == "2"

    def test_unknown_selection_ignored(self):
        """Unknown selected id leaves nothing selected."""
        response = render_view(Config(), {"selected": "99"})
        assert response["selected_id"] is None

    def test_config_initial_category(self):
        """Config starting filter applies when no category is given."""
        response = render_view(Config(initial_category="Organic"), {})
        assert [e["id"] for e in response["entries"]] == ["3"]


class TestFacilityView:
    """Tests for the facility_view HTTP function."""

    @patch("facility_browser.main._get_config", return_value=Config())
    def test_success(self, mock_config):
        """Returns the view with status 200."""
        response, status = facility_view(_request(category="Paper"))

        assert status == 200
        assert [e["id"] for e in response["entries"]] == ["1", "3"]

    @patch("facility_browser.main._get_config", side_effect=RuntimeError("bad config"))
    def test_error(self, mock_config):
        """Unexpected errors return 500."""
        response, status = facility_view(_request())

        assert status == 500
        assert response["message"] == "bad config"


class TestHealthImpact:
    """Tests for the health_impact HTTP function."""

    @patch("facility_browser.main._get_config", return_value=Config())
    def test_success(self, mock_config):
        """Returns metric summaries."""
        response, status = health_impact(_request())

        assert status == 200
        assert [m["percent"] for m in response["metrics"]] == [68.0, 42.0, 78.0]
