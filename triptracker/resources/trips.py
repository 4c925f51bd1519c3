"""
`trips` collection of the resource API.
"""

from typing import Any
from urllib.parse import urlencode

from triptracker.infrastructure.http_transport import ApiResult, HttpTransport


async def create_trip(transport: HttpTransport, body: dict[str, Any]) -> ApiResult:
    """POST /trips. The server answers 201 with the stored record."""
    return await transport.request("POST", transport.url("/trips"), body)


async def get_trip(transport: HttpTransport, trip_id: str) -> ApiResult:
    return await transport.request("GET", transport.url(f"/trips/{trip_id}"))


async def update_trip(transport: HttpTransport, trip_id: str, body: dict[str, Any]) -> ApiResult:
    """PUT /trips/{id} with the full merged record."""
    return await transport.request("PUT", transport.url(f"/trips/{trip_id}"), body)


async def delete_trip(transport: HttpTransport, trip_id: str) -> ApiResult:
    return await transport.request("DELETE", transport.url(f"/trips/{trip_id}"))


async def list_trips(transport: HttpTransport) -> ApiResult:
    return await transport.request("GET", transport.url("/trips"))


async def list_trips_by_user(transport: HttpTransport, user_id: str) -> ApiResult:
    query = urlencode({"userId": user_id})
    return await transport.request("GET", transport.url(f"/trips?{query}"))


async def list_trips_by_vehicle_type(transport: HttpTransport, vehicle_type: str) -> ApiResult:
    query = urlencode({"vehicleType": vehicle_type})
    return await transport.request("GET", transport.url(f"/trips?{query}"))
