"""Admin session routes and request dependencies.

This module handles the password login flow and exposes the dependencies
routers use to reach the location store and to gate mutations on admin
state. The admin browser is identified by a signed cookie issued with
itsdangerous.
"""

import logging
from typing import Optional, Tuple

from fastapi import APIRouter, Cookie, Depends, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from logic.config import COOKIE_NAME, SESSION_MAX_AGE
from logic.models import LocationRecord
from logic.session import SessionGate
from logic.store import LocationStore

logger = logging.getLogger(__name__)

router = APIRouter()


class LoginRequest(BaseModel):
    """Request model for admin login."""

    password: str


def get_gate(request: Request) -> SessionGate:
    return request.app.state.gate


def get_store(request: Request) -> LocationStore:
    return request.app.state.store


def is_admin_request(
        gate: SessionGate = Depends(get_gate),
        session: Optional[str] = Cookie(None, alias=COOKIE_NAME),
) -> bool:
    """Whether the request carries a valid admin session cookie."""
    return gate.verify_token(session)


def require_admin(is_admin: bool = Depends(is_admin_request)) -> None:
    """Reject requests without an admin session.

    Raises:
        HTTPException: 403 if the caller is not admin.
    """
    if not is_admin:
        raise HTTPException(403, "Admin session required")


def get_visible_locations(
        store: LocationStore = Depends(get_store),
        is_admin: bool = Depends(is_admin_request),
) -> Tuple[LocationRecord, ...]:
    """Get the collection the caller should see.

    Admins see the working copy; everyone else sees the published seed.
    """
    if is_admin:
        return store.locations
    return tuple(store.load_seed())


@router.post("/api/session/login")
def login(
        data: LoginRequest,
        gate: SessionGate = Depends(get_gate),
        store: LocationStore = Depends(get_store),
):
    """Enter admin mode.

    On a correct password the working copy is loaded for the admin session
    and a signed session cookie is set.

    Args:
        data: LoginRequest carrying the password.

    Returns:
        JSONResponse with success status and the session cookie.

    Raises:
        HTTPException: 401 if the password is incorrect.
    """
    if not gate.login(data.password):
        raise HTTPException(401, "Incorrect password")

    store.load(authenticated=True)

    response = JSONResponse({"success": True, "authenticated": True})
    response.set_cookie(
        key=COOKIE_NAME,
        value=gate.issue_token(),
        max_age=SESSION_MAX_AGE,
        httponly=True,
        secure=False,  # Set to True in production with HTTPS
        samesite="lax",
    )
    return response


@router.post("/api/session/logout")
def logout(
        gate: SessionGate = Depends(get_gate),
        store: LocationStore = Depends(get_store),
        is_admin: bool = Depends(is_admin_request),
):
    """Leave admin mode.

    For the admin browser this clears the session marker and drops the
    cached working copy so the next load comes from the seed. Any other
    caller only has its cookie cleared.

    Returns:
        JSONResponse with success message and cleared cookie.
    """
    if is_admin:
        gate.logout()
        store.reset()

    response = JSONResponse({"success": True, "message": "Logged out successfully"})
    response.delete_cookie(key=COOKIE_NAME)
    return response


@router.get("/api/session")
def get_session(is_admin: bool = Depends(is_admin_request)):
    """Report whether the caller is in admin mode."""
    return {"authenticated": is_admin}
