"""
Application Use Cases for the workout log.

This package contains the use cases that orchestrate the core services for
the two explicit user actions, export and import. Dependencies are injected
via constructors; use cases return result objects, not HTTP responses.

Usage:
    from application.use_cases import ExportUserDataUseCase, ImportUserDataUseCase

    export_use_case = ExportUserDataUseCase(
        data_store=data_store,
        session_manager=session_manager,
    )
    result = export_use_case.execute()

    import_use_case = ImportUserDataUseCase(session_manager=session_manager)
    result = await import_use_case.execute(source)
"""

from application.use_cases.export_user_data import (
    ExportUserDataResult,
    ExportUserDataUseCase,
)
from application.use_cases.import_user_data import (
    ImportErrorKind,
    ImportUserDataResult,
    ImportUserDataUseCase,
)

__all__ = [
    # ExportUserData
    "ExportUserDataUseCase",
    "ExportUserDataResult",
    # ImportUserData
    "ImportUserDataUseCase",
    "ImportUserDataResult",
    "ImportErrorKind",
]
