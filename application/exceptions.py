"""
Application-layer exceptions.

These exceptions are raised by the store, the session manager and the
interchange service, and translated into result objects by the use cases
and into HTTP errors by the routers.
"""

from typing import List, Optional


class WorkoutLogError(Exception):
    """Base class for all recoverable workout-log errors."""

    pass


class NoActiveSessionError(WorkoutLogError):
    """An operation that needs a logged-in user was called without one."""

    pass


class InvalidSnapshotError(WorkoutLogError):
    """Import content is malformed or incomplete.

    ``errors`` lists the individual problems found, suitable for display.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class ImportReadError(WorkoutLogError):
    """The import file could not be read."""

    pass


class DuplicateEntityIdError(WorkoutLogError):
    """Adding an entity would give two entities in a collection the same id."""

    def __init__(self, collection: str, entity_ids: List[str]):
        super().__init__(
            f"Duplicate id(s) in {collection}: {', '.join(entity_ids)}"
        )
        self.collection = collection
        self.entity_ids = entity_ids
