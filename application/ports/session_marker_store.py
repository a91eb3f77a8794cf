"""
Session Marker Store Interface (Port).

The session marker is the only thing that survives a restart on its own: a
``{"username": ...}`` record saying who was logged in. It never holds
templates or logged workouts.
"""
from typing import Optional, Protocol

from domain.models import User


class SessionMarkerStore(Protocol):
    """Lightweight key-value slot for the current session's user."""

    def load(self) -> Optional[User]:
        """
        Read the marker.

        Implementations remove a corrupt marker and return None for it.

        Returns:
            The stored user, or None if there is no valid marker.
        """
        ...

    def save(self, user: User) -> None:
        """Write (or overwrite) the marker."""
        ...

    def clear(self) -> None:
        """Remove the marker. No-op if absent."""
        ...
