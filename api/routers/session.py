"""
Session router.

This router contains endpoints for:
- /session - Current session state
- /session/login - Start a fresh (empty) session
- /session/logout - End the session and discard resident data
- /session/redirect - Navigation guard decision for a UI path
"""

import logging

from fastapi import APIRouter, Depends, Query

from api.deps import get_session_manager
from api.schemas import LoginRequest, RedirectResponse, SessionResponse
from application.services import SessionManager, match_view

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/session",
    tags=["Session"],
)


@router.get("", response_model=SessionResponse)
def get_session(session_manager: SessionManager = Depends(get_session_manager)):
    """Get the current session state."""
    return SessionResponse.from_state(session_manager.state)


@router.post("/login", response_model=SessionResponse)
def login(
    request: LoginRequest,
    session_manager: SessionManager = Depends(get_session_manager),
):
    """
    Log in as a username.

    No credentials are checked. The new session starts with no data; import
    a snapshot to restore previous work.
    """
    session_manager.login(request.username)
    return SessionResponse.from_state(session_manager.state)


@router.post("/logout", response_model=SessionResponse)
def logout(session_manager: SessionManager = Depends(get_session_manager)):
    """Log out. Templates and logged workouts not exported are lost."""
    session_manager.logout()
    return SessionResponse.from_state(session_manager.state)


@router.get("/redirect", response_model=RedirectResponse)
def redirect_for(
    path: str = Query(..., description="UI path the user is navigating to"),
    session_manager: SessionManager = Depends(get_session_manager),
):
    """
    Ask where navigation to ``path`` should go.

    ``redirect`` is null when the path may be shown as is.
    """
    view = match_view(path)
    return RedirectResponse(
        path=path,
        view=view.value if view else None,
        redirect=session_manager.redirect_for(path),
    )
