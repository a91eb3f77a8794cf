"""
User value object. Identifies the active session; carries no credentials.
"""

from pydantic import Field, field_validator

from domain.models.base import DomainModel


def normalize_username(value: str) -> str:
    """Trim whitespace and reject empty names."""
    value = value.strip()
    if not value:
        raise ValueError("username must not be empty")
    return value


class User(DomainModel):
    """The person whose data is currently loaded."""

    username: str = Field(..., description="Display name chosen at login")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        return normalize_username(v)
