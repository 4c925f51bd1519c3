"""
Service interfaces for dependency inversion.
Allows swapping session storage without changing the session manager.
"""

from .session_store import SessionStore
from .memory_session_store import MemorySessionStore
from .file_session_store import FileSessionStore

__all__ = ['SessionStore', 'MemorySessionStore', 'FileSessionStore']
