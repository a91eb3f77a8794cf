"""
Session request/response models.
"""

from typing import Optional

from pydantic import BaseModel, field_validator

from application.services import SessionState
from domain.models.user import normalize_username


class LoginRequest(BaseModel):
    """Request to start a session."""
    username: str

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        return normalize_username(v)


class SessionResponse(BaseModel):
    """Current session state."""
    authenticated: bool
    username: Optional[str] = None

    @classmethod
    def from_state(cls, state: SessionState) -> "SessionResponse":
        return cls(authenticated=state.is_authenticated, username=state.username)


class RedirectResponse(BaseModel):
    """Navigation decision for a requested path."""
    path: str
    view: Optional[str] = None
    redirect: Optional[str] = None
