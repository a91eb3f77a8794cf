"""
Infrastructure Layer for the workout log.

This package contains concrete implementations of the core's ports:
- memory/: the in-memory workout data store
- session/: session marker stores (file-backed and in-memory)
- files/: import sources (local files and HTTP uploads)
"""

from infrastructure.files import LocalFileImportSource, UploadImportSource
from infrastructure.memory import InMemoryWorkoutDataStore
from infrastructure.session import FileSessionMarkerStore, InMemorySessionMarkerStore

__all__ = [
    "InMemoryWorkoutDataStore",
    "FileSessionMarkerStore",
    "InMemorySessionMarkerStore",
    "LocalFileImportSource",
    "UploadImportSource",
]
