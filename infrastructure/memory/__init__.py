"""In-memory implementations."""

from infrastructure.memory.data_store import InMemoryWorkoutDataStore

__all__ = ["InMemoryWorkoutDataStore"]
