"""
FastAPI Dependency Providers for the workout log API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations.

Architecture:
- All state lives in the AppContainer built by create_app() and stored on
  app.state; providers only look it up, they never create state
- get_current_user gates every endpoint that needs an active session

Usage in routers:
    from api.deps import get_current_user, get_data_store
    from application.ports import WorkoutDataStore

    @router.get("/templates")
    def list_templates(
        user: User = Depends(get_current_user),
        data_store: WorkoutDataStore = Depends(get_data_store),
    ):
        return [t.to_wire() for t in data_store.templates]

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_data_store] = lambda: InMemoryWorkoutDataStore()
"""

from fastapi import Depends, HTTPException, Request

from application.ports import WorkoutDataStore
from application.services import SessionManager
from application.use_cases import ExportUserDataUseCase, ImportUserDataUseCase
from backend.container import AppContainer
from backend.settings import Settings
from domain.models import User


# =============================================================================
# Container
# =============================================================================


def get_container(request: Request) -> AppContainer:
    """
    Get the composition root of the running app.

    Returns:
        AppContainer: Built by create_app()
    """
    return request.app.state.container


def get_settings(container: AppContainer = Depends(get_container)) -> Settings:
    """Get the settings the app was created with."""
    return container.settings


# =============================================================================
# Core Providers
# =============================================================================


def get_data_store(container: AppContainer = Depends(get_container)) -> WorkoutDataStore:
    """Get the app's data store."""
    return container.data_store


def get_session_manager(container: AppContainer = Depends(get_container)) -> SessionManager:
    """Get the app's session manager."""
    return container.session_manager


# =============================================================================
# Use Case Providers
# =============================================================================


def get_export_use_case(
    container: AppContainer = Depends(get_container),
) -> ExportUserDataUseCase:
    """Get the export use case."""
    return container.export_use_case


def get_import_use_case(
    container: AppContainer = Depends(get_container),
) -> ImportUserDataUseCase:
    """
    Get the import use case.

    The same instance is returned for every request so that its in-flight
    guard covers concurrent uploads.
    """
    return container.import_use_case


# =============================================================================
# Session Guard
# =============================================================================


def get_current_user(
    session_manager: SessionManager = Depends(get_session_manager),
) -> User:
    """
    Require an active session.

    Returns:
        User: The logged-in user

    Raises:
        HTTPException: 401 if nobody is logged in
    """
    user = session_manager.current_user
    if user is None:
        raise HTTPException(
            status_code=401,
            detail="No active session. Log in or import a data file first.",
        )
    return user
