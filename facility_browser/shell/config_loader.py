"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config) are defined in facility_browser/core/config.py
to avoid information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from facility_browser.core.config import Config
from facility_browser.core.directions import DEFAULT_DIRECTIONS_URL
from facility_browser.core.facility import (
    DEFAULT_FACILITIES,
    DEFAULT_USER_LOCATION,
    Coordinate,
    parse_facilities,
)
from facility_browser.core.filters import ALL
from facility_browser.core.progress import DEFAULT_METRICS, HealthMetric


logger = logging.getLogger(__name__)


def _resolve_value(value: Any) -> Any:
    """Resolve a value that may be a ${VAR} environment placeholder.

    Args:
        value: Value to resolve

    Returns:
        Environment value if the placeholder is set, otherwise the
        original value
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_location(data: Any) -> Coordinate:
    """Parse a reference point from config data.

    Accepts {latitude, longitude}, {lat, lng} or a "lat,lng" string.
    """
    if isinstance(data, str):
        parts = [float(p.strip()) for p in data.split(",")]
        if len(parts) != 2:
            raise ValueError(f"Expected 'lat,lng', got {data!r}")
        return Coordinate(latitude=parts[0], longitude=parts[1])

    if "lat" in data:
        return Coordinate(latitude=float(data["lat"]), longitude=float(data["lng"]))

    return Coordinate(
        latitude=float(data["latitude"]),
        longitude=float(data["longitude"]),
    )


def _parse_metric(data: dict[str, Any]) -> HealthMetric:
    """Parse a health metric from config data."""
    return HealthMetric(
        title=data["title"],
        value=float(data["value"]),
        target=float(data.get("target", 100)),
        unit=data.get("unit", "%"),
    )


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    raw_facilities = data.get("facilities")
    if raw_facilities is None:
        facilities = list(DEFAULT_FACILITIES)
    else:
        facilities = parse_facilities(raw_facilities)
        dropped = len(raw_facilities) - len(facilities)
        if dropped:
            logger.warning("Skipped %d invalid facility records", dropped)

    user_location = DEFAULT_USER_LOCATION
    if "user_location" in data:
        user_location = _parse_location(data["user_location"])

    metrics = list(DEFAULT_METRICS)
    if "metrics" in data:
        metrics = [_parse_metric(m) for m in data["metrics"]]

    event_webhook_url = data.get("event_webhook_url")
    if event_webhook_url:
        event_webhook_url = _resolve_value(event_webhook_url)

    return Config(
        facilities=facilities,
        user_location=user_location,
        initial_category=data.get("initial_category", ALL),
        directions_base_url=data.get("directions_base_url", DEFAULT_DIRECTIONS_URL),
        tile_url=data.get("tile_url"),
        event_webhook_url=event_webhook_url,
        metrics=metrics,
    )


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", "config/config.yaml")

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return Config()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return Config()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: %d facilities, %d metrics",
        len(config.facilities),
        len(config.metrics),
    )

    return config


def load_config_from_env() -> Config:
    """Load configuration from environment variables.

    Useful for simple deployments without a full YAML config.

    Environment variables:
        FACILITIES_FILE: YAML file containing a list of facility records
        USER_LOCATION: Reference point as "lat,lng"
        DEFAULT_WASTE_TYPE: Filter applied when a session starts
        EVENT_WEBHOOK_URL: Endpoint notified of browser events

    Returns:
        Config object from environment
    """
    data: dict[str, Any] = {}

    facilities_file = os.environ.get("FACILITIES_FILE")
    if facilities_file:
        path = Path(facilities_file)
        if path.exists():
            with open(path, "r") as f:
                records = yaml.safe_load(f) or []
            data["facilities"] = records
        else:
            logger.warning("Facilities file not found: %s, using defaults", path)

    user_location = os.environ.get("USER_LOCATION")
    if user_location:
        data["user_location"] = user_location

    default_waste_type = os.environ.get("DEFAULT_WASTE_TYPE")
    if default_waste_type:
        data["initial_category"] = default_waste_type

    webhook_url = os.environ.get("EVENT_WEBHOOK_URL")
    if webhook_url:
        data["event_webhook_url"] = webhook_url

    return load_config_from_dict(data)
