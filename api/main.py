"""Collection Point API - FastAPI service for the facility browser.

Hosts in-memory browser sessions: each session keeps its own waste type
filter and selection for the lifetime of the process. Nothing is
persisted; restarting the service drops every session.
"""

import logging
import os
import uuid
from collections import OrderedDict
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from facility_browser.browser import FacilityBrowser, create_browser
from facility_browser.core.config import Config, validate_config
from facility_browser.core.directions import build_directions_url
from facility_browser.core.filters import available_filters, count_by_category
from facility_browser.core.progress import DEFAULT_COMMUNITY_IMPACT, summarize_metrics
from facility_browser.core.selection import find_facility
from facility_browser.core.views import view_to_dict
from facility_browser.shell.config_loader import load_config

logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Collection Point API",
    description="Browse waste collection points by waste type",
    version="1.0.0",
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:5173",
    ],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


# ===== Request Models =====

class FilterUpdate(BaseModel):
    category: str | None = None


class FacilityAction(BaseModel):
    facility_id: str


# ===== Session Store =====

# Least recently used sessions are evicted once the store is full
MAX_SESSIONS = int(os.environ.get("MAX_SESSIONS", "1000"))

_config: Config | None = None
_sessions: OrderedDict[str, FacilityBrowser] = OrderedDict()


def _get_config() -> Config:
    """Load configuration once per process."""
    global _config
    if _config is None:
        _config = load_config()
        result = validate_config(_config)
        for error in result.errors:
            logger.warning("Config %s: %s (%s)", error.field, error.message, error.severity)
    return _config


def _reset_sessions() -> None:
    """Drop all sessions and cached config."""
    global _config
    _config = None
    _sessions.clear()


def _get_session(session_id: str) -> FacilityBrowser:
    browser = _sessions.get(session_id)
    if browser is None:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")
    _sessions.move_to_end(session_id)
    return browser


def _store_session(session_id: str, browser: FacilityBrowser) -> None:
    """Add a session, evicting the least recently used ones past MAX_SESSIONS."""
    _sessions[session_id] = browser
    while len(_sessions) > MAX_SESSIONS:
        evicted_id, _ = _sessions.popitem(last=False)
        logger.info("Evicted idle session %s", evicted_id)


def _session_response(session_id: str, browser: FacilityBrowser) -> dict[str, Any]:
    return {
        "session_id": session_id,
        "view": view_to_dict(browser.snapshot()),
        "selection_hidden": browser.selection_hidden,
    }


# ===== Public Endpoints =====

@app.get("/health")
async def health_check():
    """Health check endpoint for Cloud Run."""
    return {"status": "healthy"}


@app.get("/api-filters")
async def get_filters():
    """List filter options with how many facilities each would show."""
    config = _get_config()
    counts = count_by_category(config.facilities)

    return {
        "filters": [
            {"value": option, "count": counts[option]}
            for option in available_filters()
        ],
    }


@app.get("/api-health-impact")
async def get_health_impact():
    """Health impact metrics with progress ratios."""
    config = _get_config()
    return {
        "community_impact": DEFAULT_COMMUNITY_IMPACT,
        "metrics": summarize_metrics(config.metrics),
    }


@app.post("/api-sessions", status_code=201)
async def create_session():
    """Start a browser session with the configured facilities."""
    config = _get_config()
    session_id = uuid.uuid4().hex

    browser = create_browser(config)
    _store_session(session_id, browser)
    logger.info("Created session %s", session_id)

    return _session_response(session_id, browser)


@app.get("/api-sessions/{session_id}")
async def get_session(session_id: str):
    """Current views for a session."""
    return _session_response(session_id, _get_session(session_id))


@app.delete("/api-sessions/{session_id}")
async def delete_session(session_id: str):
    """End a session."""
    _get_session(session_id)
    del _sessions[session_id]
    return {"message": f"Session '{session_id}' deleted"}


@app.put("/api-sessions/{session_id}/filter")
async def update_filter(session_id: str, update: FilterUpdate):
    """Apply a waste type filter. The selection is kept."""
    browser = _get_session(session_id)
    browser.set_filter(update.category)
    return _session_response(session_id, browser)


@app.delete("/api-sessions/{session_id}/filter")
async def clear_filter(session_id: str):
    """Show all points again."""
    browser = _get_session(session_id)
    browser.clear_filter()
    return _session_response(session_id, browser)


@app.put("/api-sessions/{session_id}/selection")
async def update_selection(session_id: str, action: FacilityAction):
    """Select a facility from either view."""
    browser = _get_session(session_id)

    if browser.select_by_id(action.facility_id) is None:
        raise HTTPException(
            status_code=404,
            detail=f"Facility '{action.facility_id}' not found",
        )

    return _session_response(session_id, browser)


@app.post("/api-sessions/{session_id}/directions")
async def request_directions(session_id: str, action: FacilityAction):
    """Get a directions URL for a facility. The selection is not changed."""
    browser = _get_session(session_id)
    facility = find_facility(browser.facilities, action.facility_id)

    if facility is None:
        raise HTTPException(
            status_code=404,
            detail=f"Facility '{action.facility_id}' not found",
        )

    request = browser.request_directions(facility)
    url = build_directions_url(request, _get_config().directions_base_url)

    return {
        "facility_id": request.facility_id,
        "name": request.name,
        "destination": {"lat": request.latitude, "lng": request.longitude},
        "url": url,
        "requests_made": browser.dispatcher.directions_count,
    }
