"""
Exercise entity, including the deprecated single-prescription shape.

Older exports describe an exercise with ``sets``/``reps``/``weight`` instead
of a ``setDetails`` list. Those fields are kept so old files round-trip, but
readers should go through ``resolved_set_details`` (or ``normalized()``),
which treats a non-empty ``setDetails`` as authoritative and otherwise derives
it from the legacy fields.
"""

from typing import List, Optional, Tuple

from pydantic import Field, field_validator

from domain.models.base import DomainModel, EntityId, find_duplicate_ids
from domain.models.set_detail import SetDetail


class Exercise(DomainModel):
    """
    An exercise within a template or a logged workout.

    Examples:
        >>> exercise = Exercise(
        ...     id="e1",
        ...     name="Bench Press",
        ...     set_details=[SetDetail(id="s1", reps=8, weight=60)],
        ... )
        >>> exercise.total_sets
        1

        >>> legacy = Exercise(id="e2", name="Squat", sets=3, reps=5, weight=100)
        >>> [s.id for s in legacy.resolved_set_details]
        ['e2-set-1', 'e2-set-2', 'e2-set-3']
    """

    # Identity
    id: EntityId
    name: str = Field(..., description="Exercise name")

    # Work prescription
    set_details: Tuple[SetDetail, ...] = Field(
        default=(), description="Authoritative per-set reps/weight"
    )
    duration: Optional[float] = Field(
        default=None, description="Duration in seconds for timed exercises"
    )
    timed_sets: Optional[int] = Field(
        default=None, description="Rounds of a timed exercise"
    )
    pause: Optional[float] = Field(default=None, description="Rest in seconds")
    notes: Optional[str] = Field(default=None, description="Free-form notes")

    # Deprecated single-prescription shape
    sets: Optional[int] = Field(default=None, description="Deprecated: use set_details")
    reps: Optional[int] = Field(default=None, description="Deprecated: use set_details")
    weight: Optional[float] = Field(default=None, description="Deprecated: use set_details")

    @field_validator("set_details")
    @classmethod
    def validate_unique_set_ids(cls, v: Tuple[SetDetail, ...]) -> Tuple[SetDetail, ...]:
        """Set ids must be unique within the exercise."""
        duplicates = find_duplicate_ids(v)
        if duplicates:
            raise ValueError(f"Duplicate set ids: {', '.join(duplicates)}")
        return v

    # -------------------------------------------------------------------------
    # Legacy shape handling
    # -------------------------------------------------------------------------

    @property
    def uses_legacy_shape(self) -> bool:
        """True when sets are only described by the deprecated fields."""
        if self.set_details:
            return False
        return any(value is not None for value in (self.sets, self.reps, self.weight))

    @property
    def resolved_set_details(self) -> List[SetDetail]:
        """
        Set details with the legacy fields folded in.

        Returns:
            ``set_details`` if non-empty; otherwise one SetDetail per legacy
            set (at least one) carrying the legacy reps/weight; otherwise an
            empty list (e.g. a purely timed exercise).
        """
        if self.set_details:
            return list(self.set_details)
        if not self.uses_legacy_shape:
            return []

        count = self.sets if self.sets and self.sets > 0 else 1
        return [
            SetDetail(id=f"{self.id}-set-{n}", reps=self.reps, weight=self.weight)
            for n in range(1, count + 1)
        ]

    def normalized(self) -> "Exercise":
        """
        Return a copy in the current shape.

        The legacy fields are cleared and ``set_details`` holds the resolved
        list, so the result carries a single representation of its sets.
        """
        if not self.uses_legacy_shape:
            return self
        return self.model_copy(
            update={
                "set_details": tuple(self.resolved_set_details),
                "sets": None,
                "reps": None,
                "weight": None,
            }
        )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def is_timed(self) -> bool:
        """Check if this exercise is prescribed by duration."""
        return self.duration is not None

    @property
    def total_sets(self) -> int:
        return len(self.resolved_set_details)

    @property
    def total_volume(self) -> float:
        """Sum of reps x weight over the resolved sets."""
        return sum(s.volume for s in self.resolved_set_details)

    def __str__(self) -> str:
        parts = [self.name]
        if self.total_sets:
            parts.append(f"{self.total_sets} sets")
        if self.duration is not None:
            parts.append(f"{self.duration:g}s")
        return " ".join(parts)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "e1",
                    "name": "Bench Press",
                    "setDetails": [
                        {"id": "s1", "reps": 8, "weight": 60},
                        {"id": "s2", "reps": 8, "weight": 60},
                    ],
                    "pause": 90,
                },
                {
                    "id": "e2",
                    "name": "Plank",
                    "setDetails": [],
                    "duration": 60,
                    "timedSets": 3,
                    "pause": 30,
                },
                {"id": "e3", "name": "Squat", "sets": 5, "reps": 5, "weight": 100},
            ]
        },
    }
