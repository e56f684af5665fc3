"""
Admin routes for collection management.

This module provides the import endpoint that replaces the working copy with
a pasted or uploaded ``locations.json`` document, the inverse of export.

Author: Bend Guide maintainers
Date: 2026-10-17
"""

import json

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from logic.errors import InvalidCollectionError
from logic.store import LocationStore, parse_collection
from server.auth import get_store, require_admin

router = APIRouter()


class CollectionImport(BaseModel):
    """Request model for importing a collection."""

    content: str


@router.post("/api/admin/import", dependencies=[Depends(require_admin)])
def import_locations(data: CollectionImport, store: LocationStore = Depends(get_store)):
    """Replace the working copy with the given JSON document.

    Accepts either ``{"locations": [...]}`` or a bare list. Validates the
    whole document before touching the collection.

    Args:
        data: CollectionImport object containing the JSON text.

    Returns:
        Success message with the number of imported locations.

    Raises:
        HTTPException: If the JSON is invalid or any record fails validation.
    """
    try:
        parsed = json.loads(data.content)
    except json.JSONDecodeError as e:
        raise HTTPException(status_code=400, detail=f"Invalid JSON: {str(e)}")

    try:
        records = parse_collection(parsed)
        store.replace_all(records)
    except InvalidCollectionError as e:
        raise HTTPException(status_code=400, detail=f"Invalid locations: {str(e)}")

    return {
        "success": True,
        "message": "Locations imported successfully",
        "count": len(records),
        "saved": store.authenticated,
    }
