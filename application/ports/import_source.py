"""
Import Source Interface (Port).

An import source yields the entire text of a user-supplied snapshot file.
Reading is the only suspending step of an import.
"""
from typing import Protocol


class ImportSource(Protocol):
    """A readable snapshot file."""

    @property
    def name(self) -> str:
        """Display name of the file (for messages and logs)."""
        ...

    async def read_text(self) -> str:
        """
        Read the whole file as text.

        Raises:
            ImportReadError: If the file cannot be read or decoded.
        """
        ...
