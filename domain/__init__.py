"""
Domain layer for the workout log.

This package contains pure domain models that are independent of
infrastructure concerns (storage, session marker, HTTP).
"""

from domain.models import (
    Exercise,
    LoggedWorkout,
    SetDetail,
    User,
    UserDataSnapshot,
    WorkoutTemplate,
)

__all__ = [
    "Exercise",
    "LoggedWorkout",
    "SetDetail",
    "User",
    "UserDataSnapshot",
    "WorkoutTemplate",
]
