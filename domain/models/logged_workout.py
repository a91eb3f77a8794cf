"""
LoggedWorkout entity: what was actually performed on a given day.
"""

import datetime as dt
from typing import Optional

from pydantic import Field

from domain.models.base import DomainModel, EntityId
from domain.models.template import ExerciseList, WorkoutTemplate


class LoggedWorkout(DomainModel):
    """
    A dated record of a performed workout.

    ``template_name`` is captured when the workout is logged. It is not kept
    in sync with the template afterwards, and ``template_id`` may point at a
    template that has since been deleted.

    Examples:
        >>> log = LoggedWorkout(id="l1", date="2024-01-05", exercises=[])
        >>> log.date.isoformat()
        '2024-01-05'
    """

    id: EntityId
    date: dt.date = Field(..., description="Calendar day the workout was performed")
    template_id: Optional[str] = Field(default=None, description="Source template, if any")
    template_name: Optional[str] = Field(
        default=None, description="Template name at logging time"
    )
    exercises: ExerciseList = Field(default=())
    notes: Optional[str] = Field(default=None, description="Session notes")
    duration: Optional[float] = Field(
        default=None, description="Total duration in minutes"
    )

    @classmethod
    def from_template(
        cls,
        template: WorkoutTemplate,
        *,
        log_id: str,
        on: dt.date,
        notes: Optional[str] = None,
        duration: Optional[float] = None,
    ) -> "LoggedWorkout":
        """
        Start a log from a template.

        Exercises are copied in their normalized shape and the template's
        current name is captured.

        Args:
            template: Template being performed.
            log_id: Fresh id for the log.
            on: Day of the workout.
            notes: Optional session notes.
            duration: Optional duration in minutes.

        Returns:
            New LoggedWorkout.
        """
        return cls(
            id=log_id,
            date=on,
            template_id=template.id,
            template_name=template.name,
            exercises=[exercise.normalized() for exercise in template.exercises],
            notes=notes,
            duration=duration,
        )

    @property
    def total_volume(self) -> float:
        return sum(exercise.total_volume for exercise in self.exercises)

    def __str__(self) -> str:
        label = self.template_name or "Custom workout"
        return f"LoggedWorkout({self.date.isoformat()}, {label})"
