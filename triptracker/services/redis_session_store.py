"""
Redis-backed session store.
Implements SessionStore using a plain Redis string per key.

Failure handling:
  Redis is treated like a browser's localStorage that might be
  unavailable: reads fail as "no session", writes are dropped and
  logged. The session manager keeps its in-memory copy either way.
"""

from typing import Optional

import redis

from triptracker.core.logging import get_logger
from triptracker.infrastructure.redis_client import close_redis, get_redis
from triptracker.services.interfaces.session_store import SessionStore

logger = get_logger(__name__)


class RedisSessionStore(SessionStore):
    """
    Use when:
    - Several processes on different hosts should share one signed-in user
    """

    def __init__(self, client: Optional[redis.Redis] = None, prefix: str = "triptracker:"):
        self._shared = client is None
        self.redis = get_redis() if self._shared else client
        self.prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def get(self, key: str) -> Optional[str]:
        try:
            return self.redis.get(self._key(key))
        except redis.RedisError as e:
            logger.error("session_store_read_failed", key=key, error=str(e))
            return None

    def set(self, key: str, value: str) -> None:
        try:
            self.redis.set(self._key(key), value)
        except redis.RedisError as e:
            logger.error("session_store_write_failed", key=key, error=str(e))

    def remove(self, key: str) -> None:
        try:
            self.redis.delete(self._key(key))
        except redis.RedisError as e:
            logger.error("session_store_write_failed", key=key, error=str(e))

    def close(self) -> None:
        # an injected client belongs to the caller
        if self._shared:
            close_redis()
