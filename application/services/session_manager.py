"""
Session manager: who is logged in, and what that means for the data store.

States are ``UNAUTHENTICATED`` and ``AUTHENTICATED(username)``. There is no
authentication as such; logging in just declares a username.

Transitions:
- login:            -> AUTHENTICATED, store cleared (a new session starts empty)
- logout:           -> UNAUTHENTICATED, marker removed, store cleared
- import_succeeded: -> AUTHENTICATED with the imported collections installed.
                       Unlike login this does not clear, because the data being
                       installed is the point of the transition.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from application.ports import SessionMarkerStore, WorkoutDataStore
from application.services.access_guard import resolve_redirect
from domain.models import LoggedWorkout, User, WorkoutTemplate

logger = logging.getLogger(__name__)


class SessionStatus(str, Enum):
    """Whether a user is logged in."""

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class SessionState:
    """Snapshot of the session at one point in time."""

    status: SessionStatus
    username: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.status is SessionStatus.AUTHENTICATED


class SessionManager:
    """
    Owns the current user and the session marker lifecycle.

    The data store and marker store are injected; the manager is created
    once by the composition root and shared by every collaborator.

    Usage:
        >>> manager = SessionManager(data_store=store, marker_store=markers)
        >>> manager.restore()      # once, at startup
        >>> manager.login("alice")
        >>> manager.state.username
        'alice'
    """

    def __init__(
        self,
        data_store: WorkoutDataStore,
        marker_store: SessionMarkerStore,
    ) -> None:
        """
        Initialize the manager in the unauthenticated state.

        Args:
            data_store: Store whose collections belong to the session
            marker_store: Where the session marker is checkpointed
        """
        self._data_store = data_store
        self._marker_store = marker_store
        self._user: Optional[User] = None
        self._restored = False

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def current_user(self) -> Optional[User]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def is_restored(self) -> bool:
        """True once the startup marker has been read."""
        return self._restored

    @property
    def state(self) -> SessionState:
        if self._user is None:
            return SessionState(status=SessionStatus.UNAUTHENTICATED)
        return SessionState(status=SessionStatus.AUTHENTICATED, username=self._user.username)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def restore(self) -> SessionState:
        """
        Resolve the initial state from the stored marker.

        Only the user is restored; the data store stays empty until the user
        imports their data.

        Returns:
            The resulting session state.
        """
        self._user = self._marker_store.load()
        self._restored = True
        if self._user is not None:
            logger.info(f"Restored session for {self._user.username}")
        else:
            logger.info("No stored session, starting unauthenticated")
        return self.state

    def login(self, username: str) -> User:
        """
        Start a fresh session for ``username``.

        Any data resident from a previous session is discarded.

        Args:
            username: Name to log in as (trimmed, must not be empty)

        Returns:
            The logged-in user.

        Raises:
            ValueError: If the username is empty.
        """
        user = User(username=username)
        self._user = user
        self._marker_store.save(user)
        self._data_store.clear()
        logger.info(f"Logged in as {user.username}")
        return user

    def logout(self) -> None:
        """End the session; the marker and both collections are cleared."""
        previous = self._user
        self._user = None
        self._marker_store.clear()
        self._data_store.clear()
        if previous is not None:
            logger.info(f"Logged out {previous.username}")

    def import_succeeded(
        self,
        username: str,
        templates: Sequence[WorkoutTemplate],
        logged_workouts: Sequence[LoggedWorkout],
    ) -> User:
        """
        Install imported data and authenticate as its owner.

        The collections are installed first; if that fails the session is
        left exactly as it was.

        Args:
            username: Owner named in the snapshot
            templates: Templates to install
            logged_workouts: Logged workouts to install (re-sorted by the store)

        Returns:
            The now-authenticated user.

        Raises:
            ValueError: If the username is empty.
            DuplicateEntityIdError: If either collection repeats an id.
        """
        user = User(username=username)
        self._data_store.replace_all(templates, logged_workouts)
        self._user = user
        self._marker_store.save(user)
        logger.info(
            f"Imported data for {user.username}: "
            f"{len(templates)} templates, {len(logged_workouts)} logged workouts"
        )
        return user

    # -------------------------------------------------------------------------
    # Guard
    # -------------------------------------------------------------------------

    def redirect_for(self, path: str) -> Optional[str]:
        """
        Where navigation to ``path`` should be redirected, given the current state.

        Returns:
            Target path, or None if ``path`` may be shown as is.
        """
        return resolve_redirect(
            path,
            is_authenticated=self.is_authenticated,
            is_restored=self._restored,
        )
