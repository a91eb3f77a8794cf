"""
Import/export and logged-workout request/response models.
"""

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, Field


class ImportResponse(BaseModel):
    """Outcome of a successful import."""
    success: bool = True
    message: str
    username: str
    template_count: int
    logged_workout_count: int


class ImportErrorDetail(BaseModel):
    """Body of a failed import."""
    message: str
    kind: str
    errors: List[str] = []


class LogFromTemplateRequest(BaseModel):
    """Request to log a workout based on a template."""
    template_id: str
    id: str = Field(..., min_length=1)
    date: dt.date
    notes: Optional[str] = None
    duration: Optional[float] = Field(default=None, ge=0)
