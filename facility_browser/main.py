"""Cloud Function Entry Point.

This module provides the entry point for Google Cloud Functions.
It's a thin, stateless wrapper: each request rebuilds the browser state
from its query arguments and returns the rendered views.
"""

import logging
import os
import json
from typing import Any

import functions_framework
from flask import Request

from facility_browser.browser import FacilityBrowser
from facility_browser.core.config import Config, validate_config
from facility_browser.core.filters import count_by_category
from facility_browser.core.progress import DEFAULT_COMMUNITY_IMPACT, summarize_metrics
from facility_browser.core.views import view_to_dict
from facility_browser.shell.config_loader import load_config, load_config_from_env


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _get_config() -> Config:
    """Load configuration from file or environment."""
    config_path = os.environ.get("CONFIG_PATH")

    if config_path:
        config = load_config(config_path)
    elif os.environ.get("FACILITIES_FILE"):
        config = load_config_from_env()
    else:
        config = load_config()

    result = validate_config(config)
    for warning in result.warnings:
        logger.warning("Config %s: %s", warning.field, warning.message)
    for error in result.critical_errors:
        logger.error("Config %s: %s", error.field, error.message)

    return config


def render_view(config: Config, args: Any) -> dict[str, Any]:
    """Render the browser views for a set of query arguments.

    Args:
        config: Application configuration
        args: Mapping with optional "category" and "selected" keys

    Returns:
        JSON-serializable view dict with filter option counts
    """
    browser = FacilityBrowser(
        facilities=config.facilities,
        user_location=config.user_location,
        initial_category=args.get("category") or config.initial_category,
    )

    selected = args.get("selected")
    if selected:
        browser.select_by_id(selected)

    response = view_to_dict(browser.snapshot())
    response["filters"] = count_by_category(browser.facilities)
    return response


@functions_framework.http
def facility_view(request: Request) -> tuple[dict[str, Any], int]:
    """HTTP Cloud Function entry point for the collection point views.

    Query arguments:
        category: Waste type filter (default: config initial_category)
        selected: Facility id to highlight

    Args:
        request: Flask request object

    Returns:
        Tuple of (response dict, HTTP status code)
    """
    try:
        config = _get_config()
        response = render_view(config, request.args)

        logger.info(
            "Rendered view: category=%s, %d visible",
            response["category"],
            len(response["entries"]),
        )

        return response, 200

    except Exception as e:
        logger.exception("Unexpected error rendering facility view")
        return {
            "status": "error",
            "message": str(e),
        }, 500


@functions_framework.http
def health_impact(request: Request) -> tuple[dict[str, Any], int]:
    """HTTP Cloud Function entry point for the health impact panel.

    Args:
        request: Flask request object (not used, but required by framework)

    Returns:
        Tuple of (response dict, HTTP status code)
    """
    try:
        config = _get_config()
        return {
            "community_impact": DEFAULT_COMMUNITY_IMPACT,
            "metrics": summarize_metrics(config.metrics),
        }, 200

    except Exception as e:
        logger.exception("Unexpected error rendering health impact")
        return {
            "status": "error",
            "message": str(e),
        }, 500


# For local testing
if __name__ == "__main__":
    import sys

    print("Rendering collection point view locally...")

    class MockRequest:
        args = dict(arg.split("=", 1) for arg in sys.argv[1:] if "=" in arg)

    response, status = facility_view(MockRequest())
    print(f"\nResponse ({status}):")
    print(json.dumps(response, indent=2))
