"""
Access guard for the collaborator views.

While nobody is logged in only the auth view is reachable. Once logged in,
the auth view itself bounces to the dashboard. The decision is recomputed on
every call from the state passed in.
"""

import re
from enum import Enum
from typing import List, Optional, Pattern, Tuple

AUTH_PATH = "/auth"
HOME_PATH = "/"


class AppView(str, Enum):
    """Views offered by the UI collaborators."""

    AUTH = "auth"
    DASHBOARD = "dashboard"
    AI_GENERATOR = "ai_generator"
    CREATE_TEMPLATE = "create_template"
    EDIT_TEMPLATE = "edit_template"
    VIEW_TEMPLATE = "view_template"
    LOG_WORKOUT = "log_workout"
    EDIT_LOG = "edit_log"
    STATS = "stats"


_ROUTES: List[Tuple[AppView, Pattern[str]]] = [
    (AppView.AUTH, re.compile(r"^/auth$")),
    (AppView.DASHBOARD, re.compile(r"^/$")),
    (AppView.AI_GENERATOR, re.compile(r"^/ai-generator$")),
    (AppView.CREATE_TEMPLATE, re.compile(r"^/create-template$")),
    (AppView.EDIT_TEMPLATE, re.compile(r"^/edit-template/[^/]+$")),
    (AppView.VIEW_TEMPLATE, re.compile(r"^/template/[^/]+$")),
    # optional date segment pre-fills the log form
    (AppView.LOG_WORKOUT, re.compile(r"^/log-workout(/[^/]+)?$")),
    (AppView.EDIT_LOG, re.compile(r"^/edit-log/[^/]+$")),
    (AppView.STATS, re.compile(r"^/stats$")),
]


def normalize_path(path: str) -> str:
    """Drop query string, fragment and trailing slash; ensure a leading slash."""
    path = path.split("?", 1)[0].split("#", 1)[0].strip()
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


def match_view(path: str) -> Optional[AppView]:
    """
    Map a path to its view.

    Returns:
        The matching AppView, or None for an unknown path.
    """
    normalized = normalize_path(path)
    for view, pattern in _ROUTES:
        if pattern.match(normalized):
            return view
    return None


def resolve_redirect(
    path: str,
    *,
    is_authenticated: bool,
    is_restored: bool = True,
) -> Optional[str]:
    """
    Decide whether navigation to ``path`` must be redirected.

    Args:
        path: Requested destination.
        is_authenticated: Whether a user is logged in.
        is_restored: Whether the startup session marker has been read yet.
            No decision is made before that.

    Returns:
        The path to redirect to, or None to allow the navigation.
    """
    if not is_restored:
        return None

    on_auth = normalize_path(path) == AUTH_PATH
    if not is_authenticated and not on_auth:
        return AUTH_PATH
    if is_authenticated and on_auth:
        return HOME_PATH
    return None
