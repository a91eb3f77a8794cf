"""
Logged workouts router.

This router contains endpoints for:
- /logged-workouts - List (newest first), create logged workouts
- /logged-workouts/from-template - Log a workout based on a template
- /logged-workouts/{log_id} - Get, replace, delete a logged workout

All endpoints require an active session.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from api.deps import get_current_user, get_data_store
from api.schemas import LogFromTemplateRequest
from application.exceptions import DuplicateEntityIdError
from application.ports import WorkoutDataStore
from domain.models import LoggedWorkout

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/logged-workouts",
    tags=["Logged Workouts"],
    dependencies=[Depends(get_current_user)],
)


def _add(data_store: WorkoutDataStore, logged_workout: LoggedWorkout) -> dict:
    try:
        data_store.add_logged_workout(logged_workout)
    except DuplicateEntityIdError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return logged_workout.to_wire()


@router.get("")
def list_logged_workouts(data_store: WorkoutDataStore = Depends(get_data_store)):
    """List logged workouts, newest date first."""
    return [log.to_wire() for log in data_store.logged_workouts]


@router.post("", status_code=201)
def create_logged_workout(
    logged_workout: LoggedWorkout,
    data_store: WorkoutDataStore = Depends(get_data_store),
):
    """Add a logged workout. The id is chosen by the client and must be unused."""
    return _add(data_store, logged_workout)


# Must be registered before /{log_id}
@router.post("/from-template", status_code=201)
def log_from_template(
    request: LogFromTemplateRequest,
    data_store: WorkoutDataStore = Depends(get_data_store),
):
    """
    Log a workout from a template.

    The template's exercises and current name are copied into the log.
    """
    template = data_store.get_template_by_id(request.template_id)
    if template is None:
        raise HTTPException(status_code=404, detail="Template not found")

    logged_workout = LoggedWorkout.from_template(
        template,
        log_id=request.id,
        on=request.date,
        notes=request.notes,
        duration=request.duration,
    )
    return _add(data_store, logged_workout)


@router.get("/{log_id}")
def get_logged_workout(
    log_id: str,
    data_store: WorkoutDataStore = Depends(get_data_store),
):
    """Get a logged workout by id."""
    logged_workout = data_store.get_logged_workout_by_id(log_id)
    if logged_workout is None:
        raise HTTPException(status_code=404, detail="Logged workout not found")
    return logged_workout.to_wire()


@router.put("/{log_id}")
def replace_logged_workout(
    log_id: str,
    logged_workout: LoggedWorkout,
    data_store: WorkoutDataStore = Depends(get_data_store),
):
    """Replace a whole logged workout. Ids cannot be changed."""
    if logged_workout.id != log_id:
        raise HTTPException(status_code=400, detail="Logged workout id cannot be changed")
    if not data_store.update_logged_workout(logged_workout):
        raise HTTPException(status_code=404, detail="Logged workout not found")
    return logged_workout.to_wire()


@router.delete("/{log_id}", status_code=204)
def delete_logged_workout(
    log_id: str,
    data_store: WorkoutDataStore = Depends(get_data_store),
):
    """Delete a logged workout. Deleting an unknown id is not an error."""
    data_store.delete_logged_workout(log_id)
    return Response(status_code=204)
