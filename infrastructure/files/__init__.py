"""Import sources for snapshot files."""

from infrastructure.files.import_sources import (
    DEFAULT_MAX_IMPORT_BYTES,
    LocalFileImportSource,
    UploadImportSource,
    decode_snapshot_bytes,
)

__all__ = [
    "DEFAULT_MAX_IMPORT_BYTES",
    "LocalFileImportSource",
    "UploadImportSource",
    "decode_snapshot_bytes",
]
