"""
Workout Data Store Interface (Port).

This module defines the contract for the store that owns the current
session's templates and logged workouts. The store is the single owner of
both collections; it performs no persistence of its own.
"""
from typing import Optional, Protocol, Sequence, Tuple

from domain.models import LoggedWorkout, WorkoutTemplate


class WorkoutDataStore(Protocol):
    """
    Abstract interface for the in-session workout collections.

    Invariants every implementation must keep:
    - ids are unique within each collection
    - ``logged_workouts`` is ordered by date descending; equal dates keep
      insertion/update order
    - no referential integrity between the two collections
    """

    @property
    def templates(self) -> Tuple[WorkoutTemplate, ...]:
        """Current templates in insertion order."""
        ...

    @property
    def logged_workouts(self) -> Tuple[LoggedWorkout, ...]:
        """Current logged workouts, newest date first."""
        ...

    # -------------------------------------------------------------------------
    # Templates
    # -------------------------------------------------------------------------

    def add_template(self, template: WorkoutTemplate) -> None:
        """
        Append a template.

        Raises:
            DuplicateEntityIdError: If a template with the same id exists.
        """
        ...

    def update_template(self, template: WorkoutTemplate) -> bool:
        """
        Replace the template with the same id.

        Returns:
            True if replaced, False if no such template (no-op).
        """
        ...

    def delete_template(self, template_id: str) -> bool:
        """
        Remove a template. Logged workouts referencing it are left alone.

        Returns:
            True if removed, False if not found (no-op).
        """
        ...

    def get_template_by_id(self, template_id: str) -> Optional[WorkoutTemplate]:
        """Return the template or None if not found."""
        ...

    # -------------------------------------------------------------------------
    # Logged workouts
    # -------------------------------------------------------------------------

    def add_logged_workout(self, logged_workout: LoggedWorkout) -> None:
        """
        Append a logged workout and restore date ordering.

        Raises:
            DuplicateEntityIdError: If a logged workout with the same id exists.
        """
        ...

    def update_logged_workout(self, logged_workout: LoggedWorkout) -> bool:
        """
        Replace the logged workout with the same id and restore date ordering.

        Returns:
            True if replaced, False if not found (no-op).
        """
        ...

    def delete_logged_workout(self, logged_workout_id: str) -> bool:
        """
        Remove a logged workout.

        Returns:
            True if removed, False if not found (no-op).
        """
        ...

    def get_logged_workout_by_id(self, logged_workout_id: str) -> Optional[LoggedWorkout]:
        """Return the logged workout or None if not found."""
        ...

    # -------------------------------------------------------------------------
    # Bulk
    # -------------------------------------------------------------------------

    def clear(self) -> None:
        """Empty both collections."""
        ...

    def replace_all(
        self,
        templates: Sequence[WorkoutTemplate],
        logged_workouts: Sequence[LoggedWorkout],
    ) -> None:
        """
        Install both collections at once.

        Either both collections are replaced or, on error, neither is.

        Raises:
            DuplicateEntityIdError: If either sequence repeats an id.
        """
        ...
