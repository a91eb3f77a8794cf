"""
Data router for snapshot export and import.

This router contains endpoints for:
- /data/export - Download the current user's snapshot file
- /data/import - Upload a snapshot file, replacing resident data

Import does not need an active session; a successful import starts one.
"""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile

from api.deps import get_export_use_case, get_import_use_case, get_settings
from api.schemas import ImportErrorDetail, ImportResponse
from application.use_cases import (
    ExportUserDataUseCase,
    ImportErrorKind,
    ImportUserDataUseCase,
)
from backend.settings import Settings
from infrastructure.files import UploadImportSource

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/data",
    tags=["Data"],
)

_IMPORT_STATUS = {
    ImportErrorKind.READ: 400,
    ImportErrorKind.INVALID: 422,
    ImportErrorKind.BUSY: 409,
}


@router.get("/export")
def export_data(use_case: ExportUserDataUseCase = Depends(get_export_use_case)):
    """
    Export the current user's templates and logged workouts.

    Returns:
        JSON snapshot file download
    """
    result = use_case.execute()
    if not result.success:
        raise HTTPException(status_code=401, detail=result.message)

    return Response(
        content=result.export_data,
        media_type="application/json",
        headers={
            "Content-Disposition": f'attachment; filename="{result.filename}"',
        },
    )


@router.post("/import", response_model=ImportResponse)
async def import_data(
    file: UploadFile = File(..., description="Snapshot file produced by /data/export"),
    use_case: ImportUserDataUseCase = Depends(get_import_use_case),
    settings: Settings = Depends(get_settings),
):
    """
    Import a snapshot file.

    On success the file's user is logged in with exactly the file's data.
    On any failure nothing changes.
    """
    source = UploadImportSource(file, max_bytes=settings.import_max_bytes)
    result = await use_case.execute(source)

    if not result.success:
        detail = ImportErrorDetail(
            message=result.message,
            kind=result.error_kind.value,
            errors=result.validation_errors,
        )
        raise HTTPException(
            status_code=_IMPORT_STATUS[result.error_kind],
            detail=detail.model_dump(),
        )

    return ImportResponse(
        message=result.message,
        username=result.username,
        template_count=result.template_count,
        logged_workout_count=result.logged_workout_count,
    )
