"""
Basic API routes.

This module contains the fundamental endpoints for serving the application
page, the published seed document and the map presentation settings.

Author: Bend Guide maintainers
Date: 2026-10-17
"""

import os

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse, HTMLResponse

from logic.config import BASE_DIR, SEED_PATH, get_map_config

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index():
    """Serve the main HTML page.

    Returns:
        HTML page from static/index.html.
    """
    return FileResponse(os.path.join(BASE_DIR, "static", "index.html"))


@router.get("/locations.json")
def get_seed():
    """Serve the published seed document.

    Raises:
        HTTPException: If the seed file is missing.
    """
    if not os.path.isfile(SEED_PATH):
        raise HTTPException(status_code=404, detail="Seed file not found")
    return FileResponse(SEED_PATH, media_type="application/json")


@router.get("/api/map/config")
def map_config():
    """Get the map centre, tile styles, categories and emoji suggestions."""
    return get_map_config()
