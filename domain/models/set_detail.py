"""
SetDetail value object: one planned or performed set.
"""

from typing import Optional

from pydantic import Field

from domain.models.base import DomainModel, EntityId


class SetDetail(DomainModel):
    """
    A single set of an exercise.

    Examples:
        >>> SetDetail(id="s1", reps=8, weight=60.0).volume
        480.0
    """

    id: EntityId
    reps: Optional[int] = Field(default=None, description="Repetitions in this set")
    weight: Optional[float] = Field(default=None, description="Load used for this set")

    @property
    def volume(self) -> float:
        """Reps multiplied by weight; 0 when either is missing."""
        if self.reps is None or self.weight is None:
            return 0.0
        return self.reps * self.weight

    def __str__(self) -> str:
        parts = []
        if self.reps is not None:
            parts.append(f"{self.reps} reps")
        if self.weight is not None:
            parts.append(f"@ {self.weight}")
        return " ".join(parts) or "empty set"
