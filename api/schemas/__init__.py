"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- session: login and session state
- data: import/export and logging from a template
"""

from api.schemas.data import (
    ImportErrorDetail,
    ImportResponse,
    LogFromTemplateRequest,
)
from api.schemas.session import (
    LoginRequest,
    RedirectResponse,
    SessionResponse,
)

__all__ = [
    "ImportErrorDetail",
    "ImportResponse",
    "LogFromTemplateRequest",
    "LoginRequest",
    "RedirectResponse",
    "SessionResponse",
]
