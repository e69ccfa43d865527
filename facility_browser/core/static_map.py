"""Static map configuration - Pure functions.

This module provides pure functions for turning a BrowserView into static
map parameters. The actual image generation (I/O) is handled by the shell
layer.
"""

from dataclasses import dataclass

from facility_browser.core.facility import DEFAULT_USER_LOCATION
from facility_browser.core.views import BrowserView


SELECTED_COLOR = "#16a34a"  # green-600 (primary)
DEFAULT_COLOR = "#6b7280"  # gray-500
USER_LOCATION_COLOR = "#3b82f6"  # blue-500


@dataclass(frozen=True)
class MarkerSpec:
    """A circle marker to draw.

    Attributes:
        latitude: Marker latitude
        longitude: Marker longitude
        color: Hex fill color
        radius: Radius in pixels
    """
    latitude: float
    longitude: float
    color: str
    radius: int


@dataclass(frozen=True)
class MapConfig:
    """Immutable configuration for a static map image.

    Attributes:
        latitude: Center latitude
        longitude: Center longitude
        zoom: Zoom level (1-18)
        width: Image width in pixels
        height: Image height in pixels
        markers: Markers in draw order (last drawn on top)
    """
    latitude: float
    longitude: float
    zoom: int
    width: int
    height: int
    markers: tuple[MarkerSpec, ...]


def get_marker_color(active: bool) -> str:
    """Get hex color for a facility marker.

    Pure function.
    """
    return SELECTED_COLOR if active else DEFAULT_COLOR


def get_marker_radius(active: bool) -> int:
    """Selected markers are drawn larger. Pure function."""
    return 12 if active else 8


def create_map_config(
    view: BrowserView,
    zoom: int = 14,
    width: int = 800,
    height: int = 400,
) -> MapConfig:
    """Create map configuration for a browser view.

    Pure function. Centers on the user location and draws the selected
    facility last so it is never hidden under another marker.

    Args:
        view: Browser view to render
        zoom: Zoom level (default: 14, neighborhood scale)
        width: Image width in pixels (default: 800)
        height: Image height in pixels (default: 400)

    Returns:
        MapConfig with all parameters set
    """
    center = view.user_location or DEFAULT_USER_LOCATION

    # Inactive first, active last
    ordered = sorted(view.markers, key=lambda m: m.active)
    markers = [
        MarkerSpec(
            latitude=m.latitude,
            longitude=m.longitude,
            color=get_marker_color(m.active),
            radius=get_marker_radius(m.active),
        )
        for m in ordered
    ]

    if view.user_location is not None:
        markers.append(MarkerSpec(
            latitude=view.user_location.latitude,
            longitude=view.user_location.longitude,
            color=USER_LOCATION_COLOR,
            radius=6,
        ))

    return MapConfig(
        latitude=center.latitude,
        longitude=center.longitude,
        zoom=zoom,
        width=width,
        height=height,
        markers=tuple(markers),
    )
