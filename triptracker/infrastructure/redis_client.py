"""
Shared Redis connection for the redis session backend.

One connection pool per process, created on first use from REDIS_URL
and released by close_redis() when the session manager shuts down.
"""

import redis
from typing import Optional
from triptracker.core.config import get_settings

_pool: Optional[redis.ConnectionPool] = None


def get_redis() -> redis.Redis:
    """Client on the shared pool; strings in, strings out."""
    global _pool
    if _pool is None:
        _pool = redis.ConnectionPool.from_url(
            get_settings().REDIS_URL,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            health_check_interval=30,
        )
    return redis.Redis(connection_pool=_pool)


def close_redis() -> None:
    """Disconnect the shared pool. The next get_redis() opens a new one."""
    global _pool
    if _pool is not None:
        _pool.disconnect()
        _pool = None
