"""
Interfaces (Ports) for the workout log core.

This package defines abstract interfaces that decouple the session and
interchange logic from the concrete store, marker storage and file access.
Implementations are provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the core needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutDataStore, SessionMarkerStore

    class SessionManager:
        def __init__(self, data_store: WorkoutDataStore, marker_store: SessionMarkerStore):
            self._data_store = data_store
            self._marker_store = marker_store
"""

# In-session collections
from application.ports.data_store import WorkoutDataStore

# Session marker persistence
from application.ports.session_marker_store import SessionMarkerStore

# Import file access
from application.ports.import_source import ImportSource

__all__ = [
    "WorkoutDataStore",
    "SessionMarkerStore",
    "ImportSource",
]
