"""Cloud Function Entry Point - Root Module.

This is the root-level entry point for Google Cloud Functions.
It imports from the facility_browser package.
"""

from facility_browser.main import (
    facility_view,
    health_impact,
)

__all__ = [
    "facility_view",
    "health_impact",
]
