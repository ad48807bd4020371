"""
Local session persistence.
"""

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class FileSessionStore:
    """
    Keeps the session record under a single key in a JSON file.

    The file holds an object so other local console state can live next
    to the session without clobbering it.
    """

    def __init__(self, path: Path, key: str = "adminSession"):
        self._path = Path(path)
        self._key = key

    def _read_all(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning(f"Ignoring unreadable session file {self._path}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data), encoding="utf-8")

    def load(self) -> Optional[str]:
        return self._read_all().get(self._key)

    def save(self, raw: str) -> None:
        data = self._read_all()
        data[self._key] = raw
        self._write_all(data)

    def clear(self) -> None:
        data = self._read_all()
        if data.pop(self._key, None) is not None:
            self._write_all(data)


class MemorySessionStore:
    """In-process store, used by tests and embedded consoles."""

    def __init__(self, raw: Optional[str] = None):
        self._raw = raw

    def load(self) -> Optional[str]:
        return self._raw

    def save(self, raw: str) -> None:
        self._raw = raw

    def clear(self) -> None:
        self._raw = None
