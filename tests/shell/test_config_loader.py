"""Tests for the Configuration Loader module.

Tests configuration loading from YAML files and environment variables.
"""

import os
from unittest.mock import patch

import pytest
import yaml

from facility_browser.core.config import Config
from facility_browser.core.facility import DEFAULT_FACILITIES, DEFAULT_USER_LOCATION, Coordinate
from facility_browser.core.filters import ALL
from facility_browser.shell.config_loader import (
    _parse_location,
    _parse_metric,
    _resolve_value,
    load_config,
    load_config_from_dict,
    load_config_from_env,
)


@pytest.fixture
def config_data():
    """Minimal config with two facilities."""
    return {
        "user_location": {"latitude": 40.0, "longitude": -74.0},
        "initial_category": "Glass",
        "facilities": [
            {
                "id": "a",
                "name": "Depot A",
                "latitude": 40.1,
                "longitude": -74.1,
                "waste_types": ["Glass"],
            },
            {
                "id": "b",
                "name": "Depot B",
                "coordinates": {"lat": 40.2, "lng": -74.2},
                "wasteTypes": ["Metal", "Glass"],
            },
        ],
    }


class TestResolveValue:
    """Tests for _resolve_value function."""

    def test_returns_non_string_unchanged(self):
        """Non-string values are returned unchanged."""
        assert _resolve_value(123) == 123
        assert _resolve_value(None) is None

    def test_returns_plain_string_unchanged(self):
        """Plain strings without placeholders are returned unchanged."""
        assert _resolve_value("https://example.com") == "https://example.com"

    def test_resolves_env_var_placeholder(self):
        """Resolves ${VAR} placeholders from environment."""
        with patch.dict(os.environ, {"TEST_VAR": "test_value"}):
            assert _resolve_value("${TEST_VAR}") == "test_value"

    def test_returns_placeholder_if_env_var_not_set(self):
        """Returns original placeholder if env var not set."""
        with patch.dict(os.environ, {}, clear=True):
            assert _resolve_value("${UNDEFINED_VAR}") == "${UNDEFINED_VAR}"


class TestParseLocation:
    """Tests for _parse_location function."""

    def test_latitude_longitude_keys(self):
        """Parses {latitude, longitude}."""
        assert _parse_location({"latitude": 1.0, "longitude": 2.0}) == Coordinate(1.0, 2.0)

    def test_lat_lng_keys(self):
        """Parses {lat, lng}."""
        assert _parse_location({"lat": 1.0, "lng": 2.0}) == Coordinate(1.0, 2.0)

    def test_string(self):
        """Parses "lat,lng"."""
        assert _parse_location("34.05, -118.245") == Coordinate(34.05, -118.245)

    def test_bad_string_raises(self):
        """Wrong number of parts raises ValueError."""
        with pytest.raises(ValueError):
            _parse_location("1,2,3")


class TestParseMetric:
    """Tests for _parse_metric function."""

    def test_defaults(self):
        """Target defaults to 100 and unit to %."""
        metric = _parse_metric({"title": "Score", "value": 50})
        assert metric.target == 100
        assert metric.unit == "%"


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict function."""

    def test_parses_full_config(self, config_data):
        """Parses facilities, location and filter."""
        config = load_config_from_dict(config_data)

        assert [f.id for f in config.facilities] == ["a", "b"]
        assert config.facilities[1].waste_types == ("Metal", "Glass")
        assert config.user_location == Coordinate(40.0, -74.0)
        assert config.initial_category == "Glass"

    def test_empty_dict_uses_defaults(self):
        """Missing sections fall back to defaults."""
        config = load_config_from_dict({})

        assert config.facilities == list(DEFAULT_FACILITIES)
        assert config.user_location == DEFAULT_USER_LOCATION
        assert config.initial_category == ALL
        assert config.event_webhook_url is None

    def test_skips_invalid_facilities(self, config_data):
        """Invalid facility records are dropped."""
        config_data["facilities"].append({"id": "c", "name": "No types", "latitude": 1, "longitude": 2})
        config = load_config_from_dict(config_data)
        assert [f.id for f in config.facilities] == ["a", "b"]

    def test_skips_non_dict_facility_entries(self, config_data):
        """Null and scalar entries in the facility list are dropped."""
        config_data["facilities"].extend([None, "oops"])
        config = load_config_from_dict(config_data)
        assert [f.id for f in config.facilities] == ["a", "b"]

    def test_explicit_empty_facilities(self):
        """An explicit empty list is kept empty."""
        assert load_config_from_dict({"facilities": []}).facilities == []

    def test_resolves_webhook_placeholder(self):
        """Webhook URL placeholders resolve from the environment."""
        with patch.dict(os.environ, {"EVENT_WEBHOOK_URL": "https://hooks.example.com/x"}):
            config = load_config_from_dict({"event_webhook_url": "${EVENT_WEBHOOK_URL}"})
        assert config.event_webhook_url == "https://hooks.example.com/x"

    def test_metrics(self):
        """Metrics are parsed in order."""
        config = load_config_from_dict({"metrics": [{"title": "Recycled", "value": 3, "target": 4, "unit": " t"}]})
        assert config.metrics[0].title == "Recycled"
        assert config.metrics[0].unit == " t"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_missing_file_returns_defaults(self, tmp_path):
        """Missing file gives a default Config."""
        config = load_config(tmp_path / "missing.yaml")
        assert config == Config()

    def test_empty_file_returns_defaults(self, tmp_path):
        """Empty file gives a default Config."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_loads_yaml(self, tmp_path, config_data):
        """Loads a YAML file."""
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(config_data))

        config = load_config(path)

        assert [f.id for f in config.facilities] == ["a", "b"]

    def test_uses_config_path_env(self, tmp_path, config_data):
        """CONFIG_PATH is used when no path is given."""
        path = tmp_path / "from_env.yaml"
        path.write_text(yaml.safe_dump(config_data))

        with patch.dict(os.environ, {"CONFIG_PATH": str(path)}):
            config = load_config()

        assert config.initial_category == "Glass"

    def test_invalid_yaml_raises(self, tmp_path):
        """Invalid YAML propagates."""
        path = tmp_path / "config.yaml"
        path.write_text("facilities: [unclosed")

        with pytest.raises(yaml.YAMLError):
            load_config(path)

    def test_repository_config_loads(self):
        """The bundled config parses to the sample facilities."""
        config = load_config(os.path.join(os.path.dirname(__file__), "..", "..", "config", "config.yaml"))
        assert config.facilities == list(DEFAULT_FACILITIES)


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env function."""

    def test_no_env_uses_defaults(self):
        """Without variables the defaults are used."""
        with patch.dict(os.environ, {}, clear=True):
            config = load_config_from_env()
        assert config.facilities == list(DEFAULT_FACILITIES)

    def test_reads_variables(self, tmp_path, config_data):
        """Reads facilities file, location, filter and webhook."""
        path = tmp_path / "facilities.yaml"
        path.write_text(yaml.safe_dump(config_data["facilities"]))

        env = {
            "FACILITIES_FILE": str(path),
            "USER_LOCATION": "40.0,-74.0",
            "DEFAULT_WASTE_TYPE": "Metal",
            "EVENT_WEBHOOK_URL": "https://hooks.example.com/events",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_config_from_env()

        assert [f.id for f in config.facilities] == ["a", "b"]
        assert config.user_location == Coordinate(40.0, -74.0)
        assert config.initial_category == "Metal"
        assert config.event_webhook_url == "https://hooks.example.com/events"

    def test_missing_facilities_file(self, tmp_path):
        """Missing facilities file falls back to defaults."""
        with patch.dict(os.environ, {"FACILITIES_FILE": str(tmp_path / "nope.yaml")}, clear=True):
            config = load_config_from_env()
        assert config.facilities == list(DEFAULT_FACILITIES)
