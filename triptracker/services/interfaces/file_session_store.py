"""
File-backed session store.
One JSON object of key -> string, rewritten on every change.
"""

import json
import os
from pathlib import Path
from typing import Optional

from triptracker.core.logging import get_logger
from triptracker.services.interfaces.session_store import SessionStore

logger = get_logger(__name__)


class FileSessionStore(SessionStore):
    """
    Local-storage analogue: survives restarts, scoped to one machine.

    An unreadable or corrupt file reads as empty; the next write
    replaces it.
    """

    def __init__(self, path: str):
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("session_file_unreadable", path=str(self.path), error=str(e))
            return {}
        if not isinstance(data, dict):
            logger.warning("session_file_unreadable", path=str(self.path), error="not an object")
            return {}
        return data

    def _write_all(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(data), encoding="utf-8")
        os.replace(tmp_path, self.path)

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)
