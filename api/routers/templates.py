"""
Templates router for workout template CRUD.

This router contains endpoints for:
- /templates - List, create templates
- /templates/{template_id} - Get, replace, delete a template

All endpoints require an active session.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from api.deps import get_current_user, get_data_store
from application.exceptions import DuplicateEntityIdError
from application.ports import WorkoutDataStore
from domain.models import User, WorkoutTemplate

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/templates",
    tags=["Templates"],
    dependencies=[Depends(get_current_user)],
)


@router.get("")
def list_templates(data_store: WorkoutDataStore = Depends(get_data_store)):
    """List templates in creation order."""
    return [template.to_wire() for template in data_store.templates]


@router.post("", status_code=201)
def create_template(
    template: WorkoutTemplate,
    data_store: WorkoutDataStore = Depends(get_data_store),
    user: User = Depends(get_current_user),
):
    """Add a template. The id is chosen by the client and must be unused."""
    try:
        data_store.add_template(template)
    except DuplicateEntityIdError as e:
        raise HTTPException(status_code=409, detail=str(e))
    logger.info(f"{user.username} created template {template.id}")
    return template.to_wire()


@router.get("/{template_id}")
def get_template(
    template_id: str,
    data_store: WorkoutDataStore = Depends(get_data_store),
):
    """Get a template by id."""
    template = data_store.get_template_by_id(template_id)
    if template is None:
        raise HTTPException(status_code=404, detail="Template not found")
    return template.to_wire()


@router.put("/{template_id}")
def replace_template(
    template_id: str,
    template: WorkoutTemplate,
    data_store: WorkoutDataStore = Depends(get_data_store),
):
    """Replace a whole template. Ids cannot be changed."""
    if template.id != template_id:
        raise HTTPException(status_code=400, detail="Template id cannot be changed")
    if not data_store.update_template(template):
        raise HTTPException(status_code=404, detail="Template not found")
    return template.to_wire()


@router.delete("/{template_id}", status_code=204)
def delete_template(
    template_id: str,
    data_store: WorkoutDataStore = Depends(get_data_store),
):
    """Delete a template. Deleting an unknown id is not an error."""
    data_store.delete_template(template_id)
    return Response(status_code=204)
