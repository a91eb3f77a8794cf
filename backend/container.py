"""
Composition root.

Builds the single data store, session manager and use cases shared by every
collaborator of one application instance. There is no module-level
singleton: each app created by ``create_app()`` owns its own container,
reachable as ``app.state.container``.
"""

import logging
from dataclasses import dataclass

from application.ports import SessionMarkerStore, WorkoutDataStore
from application.services import SessionManager
from application.use_cases import ExportUserDataUseCase, ImportUserDataUseCase
from backend.settings import Settings
from infrastructure import (
    FileSessionMarkerStore,
    InMemorySessionMarkerStore,
    InMemoryWorkoutDataStore,
)

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Everything stateful in one application instance."""

    settings: Settings
    data_store: WorkoutDataStore
    marker_store: SessionMarkerStore
    session_manager: SessionManager
    export_use_case: ExportUserDataUseCase
    import_use_case: ImportUserDataUseCase


def build_marker_store(settings: Settings) -> SessionMarkerStore:
    """Create the marker store selected by settings."""
    if settings.session_marker_backend == "memory":
        return InMemorySessionMarkerStore()
    return FileSessionMarkerStore(settings.session_marker_path)


def build_container(settings: Settings) -> AppContainer:
    """
    Wire the core together and resolve the startup session.

    Args:
        settings: Application settings

    Returns:
        AppContainer with the session already restored from its marker.
    """
    data_store = InMemoryWorkoutDataStore()
    marker_store = build_marker_store(settings)
    session_manager = SessionManager(data_store=data_store, marker_store=marker_store)
    session_manager.restore()

    logger.info(
        f"Session marker backend: {settings.session_marker_backend}"
    )

    return AppContainer(
        settings=settings,
        data_store=data_store,
        marker_store=marker_store,
        session_manager=session_manager,
        export_use_case=ExportUserDataUseCase(
            data_store=data_store,
            session_manager=session_manager,
            indent=settings.export_indent,
        ),
        import_use_case=ImportUserDataUseCase(session_manager=session_manager),
    )
