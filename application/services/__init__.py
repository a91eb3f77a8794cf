"""
Core services of the workout log.

- session_manager: login/logout/import transitions and the startup restore
- access_guard: which views are reachable in which session state
- data_interchange: snapshot export and import parsing
"""

from application.services.access_guard import (
    AUTH_PATH,
    HOME_PATH,
    AppView,
    match_view,
    resolve_redirect,
)
from application.services.data_interchange import (
    export_snapshot,
    parse_snapshot,
    snapshot_filename,
)
from application.services.session_manager import (
    SessionManager,
    SessionState,
    SessionStatus,
)

__all__ = [
    # Session
    "SessionManager",
    "SessionState",
    "SessionStatus",
    # Guard
    "AppView",
    "AUTH_PATH",
    "HOME_PATH",
    "match_view",
    "resolve_redirect",
    # Interchange
    "export_snapshot",
    "parse_snapshot",
    "snapshot_filename",
]
