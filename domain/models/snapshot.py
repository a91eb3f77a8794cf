"""
UserDataSnapshot: the export/import document.

Top-level shape::

    {"username": "...", "templates": [...], "loggedWorkouts": [...]}

Missing (or null) collections are read as empty lists. Every entity must
carry a non-empty id and ids must be unique within their collection.
"""

from typing import Any, List

from pydantic import Field, field_validator, model_validator

from domain.models.base import DomainModel, find_duplicate_ids
from domain.models.logged_workout import LoggedWorkout
from domain.models.template import WorkoutTemplate
from domain.models.user import User, normalize_username


class UserDataSnapshot(DomainModel):
    """One user's complete dataset."""

    username: str = Field(..., description="Owner of the data")
    templates: List[WorkoutTemplate] = Field(default_factory=list)
    logged_workouts: List[LoggedWorkout] = Field(default_factory=list)

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        return normalize_username(v)

    @field_validator("templates", "logged_workouts", mode="before")
    @classmethod
    def default_missing_collection(cls, v: Any) -> Any:
        """Treat an explicit null the same as an absent collection."""
        return [] if v is None else v

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "UserDataSnapshot":
        """Reject snapshots that would break id uniqueness once installed."""
        problems = []
        duplicate_templates = find_duplicate_ids(self.templates)
        if duplicate_templates:
            problems.append(f"duplicate template ids: {', '.join(duplicate_templates)}")
        duplicate_logs = find_duplicate_ids(self.logged_workouts)
        if duplicate_logs:
            problems.append(f"duplicate logged workout ids: {', '.join(duplicate_logs)}")
        if problems:
            raise ValueError("; ".join(problems))
        return self

    @property
    def user(self) -> User:
        return User(username=self.username)
