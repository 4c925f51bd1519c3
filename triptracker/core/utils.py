"""
Utility functions shared by the services.
"""

import time
from datetime import datetime, timezone


def generate_id() -> str:
    """
    Millisecond-timestamp identifier.

    Not globally unique: two records created in the same millisecond
    collide. The resource server does not check.
    """
    return str(int(time.time() * 1000))


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
