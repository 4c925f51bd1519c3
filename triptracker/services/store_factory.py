"""
Session store factory.
Configures which persisted slot backs the current user.
"""

from triptracker.services.interfaces.session_store import SessionStore
from triptracker.services.interfaces.memory_session_store import MemorySessionStore
from triptracker.services.interfaces.file_session_store import FileSessionStore
from triptracker.services.redis_session_store import RedisSessionStore
from triptracker.core.config import get_settings


def get_session_store() -> SessionStore:
    """
    Build the configured session store.

    Backend selection via SESSION_BACKEND:
    - file (default): JSON file at SESSION_FILE
    - redis: key under REDIS_URL
    - memory: nothing persisted
    """
    settings = get_settings()
    backend = settings.SESSION_BACKEND.lower()

    if backend == 'redis':
        return RedisSessionStore()
    if backend == 'memory':
        return MemorySessionStore()
    return FileSessionStore(settings.SESSION_FILE)
