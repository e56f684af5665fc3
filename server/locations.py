"""
Location management API routes.

This module contains endpoints for browsing, creating, replacing and deleting
points of interest, and for exporting the collection as ``locations.json``.

Author: Bend Guide maintainers
Date: 2026-10-17
"""

import json
from typing import List, Tuple

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from pydantic import ValidationError

from logic.config import EXPORT_FILENAME
from logic.errors import LocationNotFoundError
from logic.filters import filter_locations, group_by_category
from logic.models import LocationPayload, LocationRecord, MapClick
from logic.store import LocationStore
from server.auth import get_store, get_visible_locations, require_admin

router = APIRouter()


def _to_record(payload: LocationPayload, location_id: int) -> LocationRecord:
    try:
        return payload.to_record(location_id)
    except ValidationError as e:
        raise HTTPException(400, f"Invalid location: {e.errors()[0]['msg']}")


@router.get("/api/locations")
def list_locations(
        search: str = "",
        category: List[str] = Query(default=[]),
        locations: Tuple[LocationRecord, ...] = Depends(get_visible_locations),
):
    """Get the locations matching the search box and category checkboxes.

    Args:
        search: Case-insensitive text matched against name or description.
        category: Selected categories; none selected means all.

    Returns:
        Dictionary with the filtered locations in display order.
    """
    return {"locations": filter_locations(locations, search, category)}


@router.get("/api/locations/grouped")
def list_locations_grouped(
        search: str = "",
        category: List[str] = Query(default=[]),
        locations: Tuple[LocationRecord, ...] = Depends(get_visible_locations),
):
    """Get the filtered locations bucketed by category for the list view."""
    return {"groups": group_by_category(filter_locations(locations, search, category))}


@router.get("/api/locations/export", dependencies=[Depends(require_admin)])
def export_locations(store: LocationStore = Depends(get_store)):
    """Download the working copy as ``locations.json``.

    The document has the same shape as the seed file so it can be committed
    back in its place.

    Returns:
        JSON attachment.
    """
    content = json.dumps(store.export(), indent=2, ensure_ascii=False)
    return Response(
        content=content.encode("utf-8"),
        media_type="application/json",
        headers={
            "Content-Disposition": f"attachment; filename={EXPORT_FILENAME}",
            "Cache-Control": "no-cache",
        },
    )


@router.post("/api/locations", dependencies=[Depends(require_admin)])
def create_location(payload: LocationPayload, store: LocationStore = Depends(get_store)):
    """Add a new location.

    A fresh id is generated; any id in the payload is ignored.

    Returns:
        Dictionary with success status, the stored location and whether it
        was persisted.
    """
    location = store.create(_to_record(payload, 0))
    return {"success": True, "location": location, "saved": store.authenticated}


@router.post("/api/locations/at", dependencies=[Depends(require_admin)])
def create_location_at(click: MapClick, store: LocationStore = Depends(get_store)):
    """Add a blank location where the admin clicked on the map.

    Raises:
        HTTPException: If the coordinates are out of range.
    """
    try:
        location = store.new_at([click.lat, click.lng])
    except ValidationError as e:
        raise HTTPException(400, f"Invalid location: {e.errors()[0]['msg']}")
    return {"success": True, "location": location, "saved": store.authenticated}


@router.put("/api/locations/{location_id}", dependencies=[Depends(require_admin)])
def replace_location(
        location_id: int,
        payload: LocationPayload,
        store: LocationStore = Depends(get_store),
):
    """Replace a location wholesale.

    Raises:
        HTTPException: 400 if the body id disagrees with the path, 404 if
            the location does not exist.
    """
    if payload.id is not None and payload.id != location_id:
        raise HTTPException(400, "Location id cannot be changed")

    try:
        location = store.update(_to_record(payload, location_id))
    except LocationNotFoundError as e:
        raise HTTPException(404, str(e))

    return {"success": True, "location": location, "saved": store.authenticated}


@router.delete("/api/locations/{location_id}", dependencies=[Depends(require_admin)])
def delete_location(location_id: int, store: LocationStore = Depends(get_store)):
    """Delete a location; deleting an unknown id is not an error."""
    deleted = store.delete(location_id)
    return {"success": True, "deleted": deleted, "saved": store.authenticated}
