"""
ImportUserData Use Case.

Reads a snapshot file, validates it and, only if everything checks out,
hands it to the session manager which installs the data and logs the
snapshot's owner in.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from application.exceptions import (
    DuplicateEntityIdError,
    ImportReadError,
    InvalidSnapshotError,
)
from application.ports import ImportSource
from application.services.data_interchange import parse_snapshot
from application.services.session_manager import SessionManager

logger = logging.getLogger(__name__)


class ImportErrorKind(str, Enum):
    """Why an import failed."""

    READ = "read"  # file could not be read
    INVALID = "invalid"  # content malformed or incomplete
    BUSY = "busy"  # another import is in flight


_MESSAGES = {
    ImportErrorKind.READ: "Unable to read the selected file.",
    ImportErrorKind.INVALID: "Error importing data: invalid or corrupt file format.",
    ImportErrorKind.BUSY: "An import is already in progress.",
}


@dataclass
class ImportUserDataResult:
    """Result of the ImportUserData use case execution."""

    success: bool
    username: Optional[str] = None
    template_count: int = 0
    logged_workout_count: int = 0
    error: Optional[str] = None
    error_kind: Optional[ImportErrorKind] = None
    validation_errors: List[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        """User-facing outcome message."""
        if self.success:
            return f"Data for user {self.username} imported successfully!"
        return self.error or "Import failed"

    @classmethod
    def failed(
        cls,
        kind: ImportErrorKind,
        *,
        validation_errors: Optional[List[str]] = None,
    ) -> "ImportUserDataResult":
        return cls(
            success=False,
            error=_MESSAGES[kind],
            error_kind=kind,
            validation_errors=validation_errors or [],
        )


class ImportUserDataUseCase:
    """
    Use case for importing a snapshot file.

    Orchestrates the following workflow:
    1. Refuse if another import is still reading its file
    2. Read the whole file (the only suspending step)
    3. Parse and validate the snapshot
    4. Install it through SessionManager.import_succeeded

    Until step 4 succeeds the store and session are untouched, so a failure
    at any step leaves the previous state in place. There is no retry and
    no cancellation.

    The in-flight flag lives on the instance, so the composition root must
    share one instance between all callers.

    Usage:
        >>> use_case = ImportUserDataUseCase(session_manager=session_manager)
        >>> result = await use_case.execute(LocalFileImportSource("backup.json"))
        >>> print(result.message)
    """

    def __init__(self, session_manager: SessionManager) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            session_manager: Receives the parsed snapshot
        """
        self._session_manager = session_manager
        self._in_flight = False

    @property
    def in_flight(self) -> bool:
        """True while an import is reading or installing."""
        return self._in_flight

    async def execute(self, source: ImportSource) -> ImportUserDataResult:
        """
        Execute the import workflow.

        Args:
            source: File to import

        Returns:
            ImportUserDataResult with success status and counts
        """
        if self._in_flight:
            logger.warning(f"Import of {source.name} refused: another import is in flight")
            return ImportUserDataResult.failed(ImportErrorKind.BUSY)

        self._in_flight = True
        try:
            # Step 1: Read
            logger.info(f"Reading import file {source.name}")
            raw = await source.read_text()

            # Step 2: Parse and validate
            snapshot = parse_snapshot(raw)

            # Step 3: Install and authenticate
            user = self._session_manager.import_succeeded(
                snapshot.username,
                snapshot.templates,
                snapshot.logged_workouts,
            )
            return ImportUserDataResult(
                success=True,
                username=user.username,
                template_count=len(snapshot.templates),
                logged_workout_count=len(snapshot.logged_workouts),
            )

        except ImportReadError as e:
            logger.warning(f"Import read failed: {e}")
            return ImportUserDataResult.failed(ImportErrorKind.READ)
        except InvalidSnapshotError as e:
            return ImportUserDataResult.failed(
                ImportErrorKind.INVALID, validation_errors=e.errors
            )
        except DuplicateEntityIdError as e:
            logger.warning(f"Import rejected: {e}")
            return ImportUserDataResult.failed(
                ImportErrorKind.INVALID, validation_errors=[str(e)]
            )
        finally:
            self._in_flight = False
