"""
Snapshot export and import parsing.

Export/import of a snapshot file is the only way data outlives the process.
The file format is the JSON form of UserDataSnapshot::

    {
      "username": "alice",
      "templates": [{"id": "t1", "name": "Push Day", "exercises": []}],
      "loggedWorkouts": [{"id": "l1", "date": "2024-02-01", "exercises": []}]
    }

Entity shapes are exactly those of the domain models (camelCase keys,
unset optional fields omitted). Parsing normalises nothing; the legacy
exercise fields are preserved and resolved when read.
"""

import datetime as dt
import logging
import re
from typing import List, Optional, Sequence

from pydantic import ValidationError

from application.exceptions import InvalidSnapshotError, NoActiveSessionError
from domain.models import LoggedWorkout, UserDataSnapshot, WorkoutTemplate

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_INDENT = 2


def export_snapshot(
    username: Optional[str],
    templates: Sequence[WorkoutTemplate],
    logged_workouts: Sequence[LoggedWorkout],
    *,
    indent: Optional[int] = DEFAULT_EXPORT_INDENT,
) -> str:
    """
    Serialize one user's data to the snapshot format.

    Args:
        username: Active user; required.
        templates: Templates to include.
        logged_workouts: Logged workouts to include, in store order.
        indent: JSON indentation (None for compact output).

    Returns:
        JSON text suitable for writing to a file.

    Raises:
        NoActiveSessionError: If there is no username.
    """
    if not username or not username.strip():
        raise NoActiveSessionError("No active user to export data for")

    snapshot = UserDataSnapshot(
        username=username,
        templates=list(templates),
        logged_workouts=list(logged_workouts),
    )
    return snapshot.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def parse_snapshot(raw: str) -> UserDataSnapshot:
    """
    Parse and validate snapshot text.

    Args:
        raw: Entire content of an import file.

    Returns:
        The validated snapshot. Missing collections come back empty.

    Raises:
        InvalidSnapshotError: If the text is not well-formed JSON, has no
            username, has a collection that is not a list, or contains an
            entity without an id or with a repeated id.
    """
    try:
        return UserDataSnapshot.model_validate_json(raw)
    except ValidationError as e:
        errors = _format_errors(e)
        logger.warning(f"Rejected snapshot: {errors}")
        raise InvalidSnapshotError("Invalid or corrupt data file", errors) from e


def _format_errors(error: ValidationError) -> List[str]:
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        messages.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return messages


def snapshot_filename(username: str, on: Optional[dt.date] = None) -> str:
    """
    Suggested file name for an export.

    Args:
        username: Owner of the data.
        on: Export date (defaults to today).

    Returns:
        e.g. ``workout_data_alice_2024-02-01.json``.
    """
    on = on or dt.date.today()
    safe_name = re.sub(r"[^\w\s-]", "", username).strip()
    safe_name = re.sub(r"[-\s]+", "-", safe_name)[:50] or "user"
    return f"workout_data_{safe_name}_{on.isoformat()}.json"
