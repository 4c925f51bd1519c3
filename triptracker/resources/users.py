"""
`users` collection of the resource API.
"""

from typing import Any
from urllib.parse import urlencode

from triptracker.infrastructure.http_transport import ApiResult, HttpTransport


async def create_user(transport: HttpTransport, body: dict[str, Any]) -> ApiResult:
    """POST /users. The server answers 201 with the stored record."""
    return await transport.request("POST", transport.url("/users"), body)


async def list_users(transport: HttpTransport) -> ApiResult:
    return await transport.request("GET", transport.url("/users"))


async def get_user(transport: HttpTransport, user_id: str) -> ApiResult:
    return await transport.request("GET", transport.url(f"/users/{user_id}"))


async def update_user(transport: HttpTransport, user_id: str, body: dict[str, Any]) -> ApiResult:
    """PUT /users/{id} with the full record (replace, not patch)."""
    return await transport.request("PUT", transport.url(f"/users/{user_id}"), body)


async def delete_user(transport: HttpTransport, user_id: str) -> ApiResult:
    return await transport.request("DELETE", transport.url(f"/users/{user_id}"))


async def find_users_by_email(transport: HttpTransport, email: str) -> ApiResult:
    query = urlencode({"email": email})
    return await transport.request("GET", transport.url(f"/users?{query}"))


async def find_users_by_username(transport: HttpTransport, username: str) -> ApiResult:
    query = urlencode({"username": username})
    return await transport.request("GET", transport.url(f"/users?{query}"))
