"""
API package for the workout log.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request/response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_container,
    get_current_user,
    get_data_store,
    get_export_use_case,
    get_import_use_case,
    get_session_manager,
    get_settings,
)

__all__ = [
    # Container
    "get_container",
    "get_settings",
    # Core
    "get_data_store",
    "get_session_manager",
    # Use cases
    "get_export_use_case",
    "get_import_use_case",
    # Session guard
    "get_current_user",
]
