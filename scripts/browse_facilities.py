#!/usr/bin/env python3
"""Browse collection points from the command line.

Prints the list view for a waste type filter, optionally selecting a
facility, printing or opening directions, and rendering the map view as
a PNG.

Usage:
    # All collection points
    python scripts/browse_facilities.py

    # Only points that take batteries, with point 2 highlighted
    python scripts/browse_facilities.py --category Batteries --select 2

    # Print directions URL for point 3 (add --open to launch a browser)
    python scripts/browse_facilities.py --directions 3

    # Render the map view
    python scripts/browse_facilities.py --category Paper --map paper.png

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
"""

import argparse
import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from facility_browser.browser import create_browser
from facility_browser.core.config import validate_config
from facility_browser.core.directions import build_directions_url
from facility_browser.core.selection import find_facility
from facility_browser.core.static_map import create_map_config
from facility_browser.core.views import BrowserView
from facility_browser.shell.config_loader import load_config
from facility_browser.shell.directions_client import DirectionsClient
from facility_browser.shell.static_map_client import StaticMapClient

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def print_view(view: BrowserView) -> None:
    """Print the list view."""
    print(f"\nCollection Points (filter: {view.category})")
    print("=" * 60)

    if view.is_empty:
        print(view.empty_message)
        print(f"  -> {view.recovery_action}: rerun without --category")
        return

    for entry in view.entries:
        marker = "*" if entry.active else " "
        print(f"{marker} [{entry.facility_id}] {entry.name}")
        print(f"    {entry.address}")
        print(f"    {entry.operating_hours}")
        print(f"    {', '.join(entry.waste_types)}")
        print(f"    {entry.directions_label}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Browse waste collection points")
    parser.add_argument("--config", help="Path to config YAML")
    parser.add_argument("--category", help="Waste type filter (default: all)")
    parser.add_argument("--select", metavar="ID", help="Facility id to select")
    parser.add_argument("--directions", metavar="ID", help="Facility id to get directions to")
    parser.add_argument("--open", action="store_true", help="Open directions in a browser")
    parser.add_argument("--map", metavar="PATH", help="Write the map view to a PNG file")
    args = parser.parse_args()

    config = load_config(args.config)

    result = validate_config(config)
    for error in result.errors:
        logger.warning("%s: %s", error.field, error.message)
    if not result.valid:
        logger.error("Configuration is invalid")
        return 1

    directions_client = DirectionsClient(config.directions_base_url)
    browser = create_browser(
        config,
        on_directions=directions_client if args.open else None,
    )

    if args.category:
        browser.set_filter(args.category)

    if args.select and browser.select_by_id(args.select) is None:
        logger.error("Unknown facility id: %s", args.select)
        return 1

    view = browser.snapshot()
    print_view(view)
    if browser.selection_hidden:
        print(f"\nSelected point {browser.selected_id} is hidden by the {browser.category} filter.")

    if args.directions:
        facility = find_facility(browser.facilities, args.directions)
        if facility is None:
            logger.error("Unknown facility id: %s", args.directions)
            return 1
        request = browser.request_directions(facility)
        print(f"\nDirections to {request.name}: "
              f"{build_directions_url(request, config.directions_base_url)}")

    if args.map:
        map_result = StaticMapClient(config.tile_url).generate_map(create_map_config(view))
        if not map_result.success:
            logger.error("Failed to render map: %s", map_result.error)
            return 1
        with open(args.map, "wb") as f:
            f.write(map_result.image_bytes)
        logger.info("Map written to %s", args.map)

    return 0


if __name__ == "__main__":
    sys.exit(main())
