"""
Session storage interface.
A single persisted key-value slot, with browser localStorage semantics.
"""

from abc import ABC, abstractmethod
from typing import Optional


class SessionStore(ABC):
    """
    Interface for the persisted key-value slot holding the current user.

    Implementations:
    - MemorySessionStore: process-local dict, nothing survives exit
    - FileSessionStore: JSON file, the localStorage analogue
    - RedisSessionStore: shared Redis key
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Read the value stored under key.

        Returns:
            The stored string, or None when nothing is stored
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete key. Removing a missing key is a no-op."""
        pass

    def close(self) -> None:
        """Release any connection held by the store."""
        pass
