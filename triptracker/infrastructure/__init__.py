"""
Infrastructure layer - external system integrations.
Keeps session and trip logic clean from transport details.
"""

from .http_transport import HttpTransport, ApiResult, is_status, response_data
from .redis_client import get_redis, close_redis

__all__ = ['HttpTransport', 'ApiResult', 'is_status', 'response_data', 'get_redis', 'close_redis']
