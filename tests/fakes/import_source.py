"""
Fake Import Source for testing.

Returns canned text or raises a canned error. An optional asyncio.Event
holds the read open so tests can observe the state while an import is in
flight.
"""
import asyncio
from typing import Optional


class FakeImportSource:
    """
    In-memory fake implementation of ImportSource for testing.

    Usage:
        source = FakeImportSource('{"username": "alice"}')
        text = await source.read_text()

        gate = asyncio.Event()
        slow = FakeImportSource(text, gate=gate)   # read blocks until gate.set()
    """

    def __init__(
        self,
        text: str = "",
        *,
        name: str = "snapshot.json",
        error: Optional[Exception] = None,
        gate: Optional[asyncio.Event] = None,
    ):
        self._text = text
        self._name = name
        self._error = error
        self._gate = gate
        self.read_count = 0

    @property
    def name(self) -> str:
        return self._name

    async def read_text(self) -> str:
        self.read_count += 1
        if self._gate is not None:
            await self._gate.wait()
        if self._error is not None:
            raise self._error
        return self._text
