"""
Session marker stores.

The marker is a tiny JSON document, ``{"username": "alice"}``, that lets a
restarted process come back as the same user. Workout data is never written
here; after a restart the user has to import their data again.
"""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from domain.models import User

logger = logging.getLogger(__name__)


class FileSessionMarkerStore:
    """
    Session marker kept in a JSON file.

    Usage:
        store = FileSessionMarkerStore(Path(".workout-log/session.json"))
        store.save(User(username="alice"))
        store.load()  # -> User(username="alice")
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[User]:
        """Read the marker, removing it if it cannot be parsed."""
        if not self._path.exists():
            return None

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            # ValidationError is a ValueError, as is JSONDecodeError
            return User.model_validate(data)
        except (OSError, ValueError) as e:
            logger.warning(f"Discarding unreadable session marker {self._path}: {e}")
            self.clear()
            return None

    def save(self, user: User) -> None:
        """Write the marker. A failed write is logged; the session itself still starts."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(user.to_wire()), encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not write session marker {self._path}: {e}")

    def clear(self) -> None:
        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove session marker {self._path}: {e}")


class InMemorySessionMarkerStore:
    """
    Session marker held in memory, for hosts without a writable disk.

    The stored value is the serialized JSON text so that ``load`` goes
    through the same parsing as the file store.
    """

    def __init__(self, raw: Optional[str] = None):
        """
        Args:
            raw: Optional pre-existing marker text (e.g. from a previous run).
        """
        self._raw = raw

    @property
    def raw(self) -> Optional[str]:
        return self._raw

    def load(self) -> Optional[User]:
        if self._raw is None:
            return None
        try:
            return User.model_validate_json(self._raw)
        except ValueError as e:
            logger.warning(f"Discarding unreadable session marker: {e}")
            self._raw = None
            return None

    def save(self, user: User) -> None:
        self._raw = json.dumps(user.to_wire())

    def clear(self) -> None:
        self._raw = None
