"""
In-memory Workout Data Store.

The authoritative store for the current session's templates and logged
workouts. Nothing here is persisted: when the process exits, anything not
exported is gone.
"""
import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from application.exceptions import DuplicateEntityIdError
from domain.models import LoggedWorkout, WorkoutTemplate, find_duplicate_ids

logger = logging.getLogger(__name__)


def sort_by_date_desc(logged_workouts: Iterable[LoggedWorkout]) -> List[LoggedWorkout]:
    """Newest first; equal dates keep their current relative order."""
    return sorted(logged_workouts, key=lambda log: log.date, reverse=True)


def _index_of(items: Sequence, entity_id: str) -> Optional[int]:
    for index, item in enumerate(items):
        if item.id == entity_id:
            return index
    return None


class InMemoryWorkoutDataStore:
    """
    In-memory implementation of WorkoutDataStore.

    Entities are frozen and hold their nested lists as tuples, so the stored
    instances are handed out without copying; changing one means replacing
    it through update_template / update_logged_workout.

    Usage:
        store = InMemoryWorkoutDataStore()
        store.add_template(WorkoutTemplate(id="t1", name="Push Day"))
        store.get_template_by_id("t1")
    """

    def __init__(self):
        """Initialize with empty collections."""
        self._templates: List[WorkoutTemplate] = []
        self._logged_workouts: List[LoggedWorkout] = []

    @property
    def templates(self) -> Tuple[WorkoutTemplate, ...]:
        return tuple(self._templates)

    @property
    def logged_workouts(self) -> Tuple[LoggedWorkout, ...]:
        return tuple(self._logged_workouts)

    # =========================================================================
    # Templates
    # =========================================================================

    def add_template(self, template: WorkoutTemplate) -> None:
        """Append a template, rejecting an id that is already in use."""
        if _index_of(self._templates, template.id) is not None:
            raise DuplicateEntityIdError("templates", [template.id])
        self._templates.append(template)
        logger.debug("Added template %s", template.id)

    def update_template(self, template: WorkoutTemplate) -> bool:
        """Replace the template with the same id, in place."""
        index = _index_of(self._templates, template.id)
        if index is None:
            logger.debug("Update skipped, template %s not found", template.id)
            return False
        self._templates[index] = template
        logger.debug("Updated template %s", template.id)
        return True

    def delete_template(self, template_id: str) -> bool:
        """Remove a template. Does not touch logged workouts."""
        index = _index_of(self._templates, template_id)
        if index is None:
            return False
        del self._templates[index]
        logger.debug("Deleted template %s", template_id)
        return True

    def get_template_by_id(self, template_id: str) -> Optional[WorkoutTemplate]:
        index = _index_of(self._templates, template_id)
        return None if index is None else self._templates[index]

    # =========================================================================
    # Logged workouts
    # =========================================================================

    def add_logged_workout(self, logged_workout: LoggedWorkout) -> None:
        """Append a logged workout and re-sort by date descending."""
        if _index_of(self._logged_workouts, logged_workout.id) is not None:
            raise DuplicateEntityIdError("loggedWorkouts", [logged_workout.id])
        self._logged_workouts = sort_by_date_desc([*self._logged_workouts, logged_workout])
        logger.debug("Added logged workout %s (%s)", logged_workout.id, logged_workout.date)

    def update_logged_workout(self, logged_workout: LoggedWorkout) -> bool:
        """Replace in place, then re-sort (the date may have changed)."""
        index = _index_of(self._logged_workouts, logged_workout.id)
        if index is None:
            logger.debug("Update skipped, logged workout %s not found", logged_workout.id)
            return False
        updated = list(self._logged_workouts)
        updated[index] = logged_workout
        self._logged_workouts = sort_by_date_desc(updated)
        logger.debug("Updated logged workout %s", logged_workout.id)
        return True

    def delete_logged_workout(self, logged_workout_id: str) -> bool:
        """Remove a logged workout. Ordering of the rest is unaffected."""
        index = _index_of(self._logged_workouts, logged_workout_id)
        if index is None:
            return False
        del self._logged_workouts[index]
        logger.debug("Deleted logged workout %s", logged_workout_id)
        return True

    def get_logged_workout_by_id(self, logged_workout_id: str) -> Optional[LoggedWorkout]:
        index = _index_of(self._logged_workouts, logged_workout_id)
        return None if index is None else self._logged_workouts[index]

    # =========================================================================
    # Bulk
    # =========================================================================

    def clear(self) -> None:
        """Empty both collections."""
        self._templates = []
        self._logged_workouts = []
        logger.debug("Cleared data store")

    def replace_all(
        self,
        templates: Sequence[WorkoutTemplate],
        logged_workouts: Sequence[LoggedWorkout],
    ) -> None:
        """Validate both collections, then swap them in together."""
        duplicate_templates = find_duplicate_ids(templates)
        if duplicate_templates:
            raise DuplicateEntityIdError("templates", duplicate_templates)
        duplicate_logs = find_duplicate_ids(logged_workouts)
        if duplicate_logs:
            raise DuplicateEntityIdError("loggedWorkouts", duplicate_logs)

        self._templates = list(templates)
        self._logged_workouts = sort_by_date_desc(logged_workouts)
        logger.debug(
            "Replaced data store contents: %d templates, %d logged workouts",
            len(self._templates),
            len(self._logged_workouts),
        )
