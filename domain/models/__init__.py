"""
Domain models for workout tracking.

These models are pure data with invariants; they know nothing about the
session, the in-memory store or the HTTP layer.

- WorkoutTemplate: a reusable plan (named list of exercises)
- LoggedWorkout: a dated record of what was performed
- Exercise / SetDetail: the work inside either of the above
- User: whose data is loaded
- UserDataSnapshot: the export/import document

Usage:
    >>> from domain.models import WorkoutTemplate, UserDataSnapshot

    >>> template = WorkoutTemplate(id="t1", name="Push Day", exercises=[])
    >>> snapshot = UserDataSnapshot(username="alice", templates=[template])

    >>> # Serialize to the interchange shape
    >>> json_str = snapshot.model_dump_json(by_alias=True, exclude_none=True)

    >>> # Deserialize
    >>> snapshot = UserDataSnapshot.model_validate_json(json_str)
"""

from domain.models.base import DomainModel, EntityId, find_duplicate_ids
from domain.models.exercise import Exercise
from domain.models.logged_workout import LoggedWorkout
from domain.models.set_detail import SetDetail
from domain.models.snapshot import UserDataSnapshot
from domain.models.template import WorkoutTemplate
from domain.models.user import User

__all__ = [
    # Main entities
    "WorkoutTemplate",
    "LoggedWorkout",
    "Exercise",
    "SetDetail",
    "User",
    "UserDataSnapshot",
    # Helpers
    "DomainModel",
    "EntityId",
    "find_duplicate_ids",
]
