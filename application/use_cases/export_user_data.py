"""
ExportUserData Use Case.

Produces the snapshot file for the logged-in user's data.
"""

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Optional

from application.exceptions import NoActiveSessionError
from application.ports import WorkoutDataStore
from application.services.data_interchange import (
    DEFAULT_EXPORT_INDENT,
    export_snapshot,
    snapshot_filename,
)
from application.services.session_manager import SessionManager

logger = logging.getLogger(__name__)


@dataclass
class ExportUserDataResult:
    """Result of the ExportUserData use case execution."""

    success: bool
    username: Optional[str] = None
    filename: Optional[str] = None
    export_data: Optional[str] = None
    template_count: int = 0
    logged_workout_count: int = 0
    error: Optional[str] = None

    @property
    def message(self) -> str:
        """User-facing outcome message."""
        if self.success:
            return f"Data for user {self.username} exported successfully!"
        return self.error or "Export failed"


class ExportUserDataUseCase:
    """
    Use case for exporting the current user's data.

    Orchestrates the following workflow:
    1. Check there is an active session (precondition)
    2. Serialize the store's collections with the username
    3. Return the document and a suggested file name

    Nothing is mutated, whether the export succeeds or not.

    Usage:
        >>> use_case = ExportUserDataUseCase(
        ...     data_store=store,
        ...     session_manager=session_manager,
        ... )
        >>> result = use_case.execute()
        >>> if result.success:
        ...     Path(result.filename).write_text(result.export_data)
    """

    def __init__(
        self,
        data_store: WorkoutDataStore,
        session_manager: SessionManager,
        *,
        indent: Optional[int] = DEFAULT_EXPORT_INDENT,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            data_store: Store holding the collections to export
            session_manager: Source of the active username
            indent: JSON indentation of the produced document
        """
        self._data_store = data_store
        self._session_manager = session_manager
        self._indent = indent

    def execute(self, *, on: Optional[dt.date] = None) -> ExportUserDataResult:
        """
        Execute the export workflow.

        Args:
            on: Date used in the suggested file name (defaults to today)

        Returns:
            ExportUserDataResult with the document on success
        """
        user = self._session_manager.current_user
        templates = self._data_store.templates
        logged_workouts = self._data_store.logged_workouts

        try:
            export_data = export_snapshot(
                user.username if user else None,
                templates,
                logged_workouts,
                indent=self._indent,
            )
        except NoActiveSessionError as e:
            logger.warning(f"Export refused: {e}")
            return ExportUserDataResult(
                success=False,
                error="No active user to export data for.",
            )

        logger.info(
            f"Exported data for {user.username}: "
            f"{len(templates)} templates, {len(logged_workouts)} logged workouts"
        )
        return ExportUserDataResult(
            success=True,
            username=user.username,
            filename=snapshot_filename(user.username, on),
            export_data=export_data,
            template_count=len(templates),
            logged_workout_count=len(logged_workouts),
        )
