"""
Fakes and factories for testing.

This package provides in-memory fakes for the core's ports plus factory
functions that build valid domain entities with minimal boilerplate.

Usage:
    from tests.fakes import create_data_store, make_template, make_logged_workout

    store = create_data_store(num_templates=2, num_logged_workouts=3)
    template = make_template("t1", name="Push Day")
"""
import datetime as dt
from typing import List, Optional, Union

from domain.models import Exercise, LoggedWorkout, SetDetail, WorkoutTemplate
from infrastructure.memory import InMemoryWorkoutDataStore
from tests.fakes.import_source import FakeImportSource
from tests.fakes.session_marker_store import FakeSessionMarkerStore


# =============================================================================
# Entity Factories
# =============================================================================


def make_exercise(
    exercise_id: str = "e1",
    *,
    name: str = "Bench Press",
    sets: int = 2,
    reps: int = 8,
    weight: float = 60.0,
) -> Exercise:
    """Create an exercise in the current (setDetails) shape."""
    return Exercise(
        id=exercise_id,
        name=name,
        set_details=[
            SetDetail(id=f"{exercise_id}-s{n}", reps=reps, weight=weight)
            for n in range(1, sets + 1)
        ],
    )


def make_template(
    template_id: str = "t1",
    *,
    name: str = "Push Day",
    exercises: Optional[List[Exercise]] = None,
    description: Optional[str] = None,
) -> WorkoutTemplate:
    """Create a template (no exercises unless given)."""
    return WorkoutTemplate(
        id=template_id,
        name=name,
        description=description,
        exercises=exercises or [],
    )


def make_logged_workout(
    log_id: str = "l1",
    *,
    date: Union[str, dt.date] = "2024-01-05",
    template_id: Optional[str] = None,
    template_name: Optional[str] = None,
    exercises: Optional[List[Exercise]] = None,
    notes: Optional[str] = None,
) -> LoggedWorkout:
    """Create a logged workout for a date."""
    return LoggedWorkout(
        id=log_id,
        date=date,
        template_id=template_id,
        template_name=template_name,
        exercises=exercises or [],
        notes=notes,
    )


# =============================================================================
# Store Factory
# =============================================================================


def create_data_store(
    *,
    num_templates: int = 0,
    num_logged_workouts: int = 0,
) -> InMemoryWorkoutDataStore:
    """
    Create an InMemoryWorkoutDataStore with optional pre-populated data.

    Logged workouts are dated one day apart starting 2024-01-01.

    Args:
        num_templates: Number of sample templates to add
        num_logged_workouts: Number of sample logged workouts to add

    Returns:
        Pre-populated InMemoryWorkoutDataStore
    """
    store = InMemoryWorkoutDataStore()
    for i in range(num_templates):
        store.add_template(
            make_template(
                f"t{i + 1}",
                name=f"Template {i + 1}",
                exercises=[make_exercise(f"t{i + 1}-e1")],
            )
        )
    for i in range(num_logged_workouts):
        store.add_logged_workout(
            make_logged_workout(
                f"l{i + 1}",
                date=dt.date(2024, 1, 1) + dt.timedelta(days=i),
            )
        )
    return store


__all__ = [
    "FakeImportSource",
    "FakeSessionMarkerStore",
    "create_data_store",
    "make_exercise",
    "make_logged_workout",
    "make_template",
]
