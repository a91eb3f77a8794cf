"""
WorkoutTemplate entity: a reusable, date-independent workout plan.
"""

from typing import Annotated, List, Optional, Tuple

from pydantic import AfterValidator, Field

from domain.models.base import DomainModel, EntityId, find_duplicate_ids
from domain.models.exercise import Exercise


def _validate_exercise_ids(exercises: Tuple[Exercise, ...]) -> Tuple[Exercise, ...]:
    duplicates = find_duplicate_ids(exercises)
    if duplicates:
        raise ValueError(f"Duplicate exercise ids: {', '.join(duplicates)}")
    return exercises


# Exercise ids are unique within the owning list. A tuple, so a stored
# entity cannot be changed except by replacing it whole.
ExerciseList = Annotated[Tuple[Exercise, ...], AfterValidator(_validate_exercise_ids)]


class WorkoutTemplate(DomainModel):
    """
    A named list of exercises that can be logged on any date.

    Examples:
        >>> template = WorkoutTemplate(id="t1", name="Push Day", exercises=[])
        >>> template.to_wire()
        {'id': 't1', 'name': 'Push Day', 'exercises': []}
    """

    id: EntityId
    name: str = Field(..., description="Template name")
    description: Optional[str] = Field(default=None, description="What the plan is for")
    exercises: ExerciseList = Field(default=())

    @property
    def exercise_names(self) -> List[str]:
        return [exercise.name for exercise in self.exercises]

    @property
    def total_sets(self) -> int:
        return sum(exercise.total_sets for exercise in self.exercises)

    def __str__(self) -> str:
        return f'WorkoutTemplate("{self.name}", {len(self.exercises)} exercises)'
