"""
In-memory session store - nothing persisted.
"""

from typing import Optional

from triptracker.services.interfaces.session_store import SessionStore


class MemorySessionStore(SessionStore):
    """
    Keeps values in a dict for the lifetime of the object.

    Use when:
    - Running tests
    - Scripts that should never leave a session behind
    """

    def __init__(self):
        self._values: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)
