"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- Configuration loading (environment/files)
- Directions (launching a web browser)
- Static map rendering (map tiles)
- Event webhook (HTTP)

Keep this layer thin and simple. All browser logic should be in core.
"""

from facility_browser.shell.config_loader import load_config, Config
from facility_browser.shell.directions_client import DirectionsClient
from facility_browser.shell.static_map_client import StaticMapClient
from facility_browser.shell.webhook_client import WebhookClient

__all__ = [
    "load_config",
    "Config",
    "DirectionsClient",
    "StaticMapClient",
    "WebhookClient",
]
