"""
Import sources: where the text of a snapshot file comes from.

Both sources read the whole file before anything is parsed, and both report
every failure (missing file, unreadable upload, non UTF-8 content, oversize
file) as ImportReadError so callers can tell I/O problems apart from invalid
content.
"""
import asyncio
import logging
from pathlib import Path
from typing import Union

from fastapi import UploadFile

from application.exceptions import ImportReadError

logger = logging.getLogger(__name__)

DEFAULT_MAX_IMPORT_BYTES = 10 * 1024 * 1024


def decode_snapshot_bytes(data: bytes, *, name: str, max_bytes: int) -> str:
    """
    Decode raw file content.

    Args:
        data: File bytes.
        name: File name used in error messages.
        max_bytes: Size limit.

    Returns:
        Decoded text (a UTF-8 byte order mark is dropped).

    Raises:
        ImportReadError: If the file is too large or not valid UTF-8.
    """
    if len(data) > max_bytes:
        raise ImportReadError(
            f"File {name} is too large ({len(data)} bytes, limit {max_bytes})"
        )
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ImportReadError(f"File {name} is not UTF-8 text: {e}") from e


class LocalFileImportSource:
    """A snapshot file on the local filesystem, read off the event loop."""

    def __init__(self, path: Union[str, Path], *, max_bytes: int = DEFAULT_MAX_IMPORT_BYTES):
        self._path = Path(path)
        self._max_bytes = max_bytes

    @property
    def name(self) -> str:
        return self._path.name

    async def read_text(self) -> str:
        try:
            data = await asyncio.to_thread(self._path.read_bytes)
        except OSError as e:
            raise ImportReadError(f"Unable to read {self._path}: {e}") from e
        return decode_snapshot_bytes(data, name=self.name, max_bytes=self._max_bytes)


class UploadImportSource:
    """A snapshot file uploaded through the HTTP API."""

    def __init__(self, upload: UploadFile, *, max_bytes: int = DEFAULT_MAX_IMPORT_BYTES):
        self._upload = upload
        self._max_bytes = max_bytes

    @property
    def name(self) -> str:
        return self._upload.filename or "upload"

    async def read_text(self) -> str:
        try:
            # one extra byte is enough to detect an oversize file
            data = await self._upload.read(self._max_bytes + 1)
        except OSError as e:
            raise ImportReadError(f"Unable to read uploaded file {self.name}: {e}") from e
        return decode_snapshot_bytes(data, name=self.name, max_bytes=self._max_bytes)
