"""Session marker storage."""

from infrastructure.session.marker_store import (
    FileSessionMarkerStore,
    InMemorySessionMarkerStore,
)

__all__ = ["FileSessionMarkerStore", "InMemorySessionMarkerStore"]
