"""
HTTP transport wrapper for the resource API.

Every call resolves with either the httpx.Response (2xx) or the caught
httpx.HTTPError. Nothing is raised for transport failures or non-success
statuses, so callers branch on the shape of the result:

    result = await transport.request("GET", transport.url("/trips"))
    if is_status(result, 200):
        trips = result.json()
"""

import time
from typing import Any, Optional, Union

import httpx

from triptracker.core.config import get_settings
from triptracker.core.logging import get_logger
from triptracker.core.metrics import record_api_request

logger = get_logger(__name__)

ApiResult = Union[httpx.Response, httpx.HTTPError]


class HttpTransport:
    """
    Owns one httpx.AsyncClient for the configured base URL.

    A client can be injected (tests route it through ASGITransport);
    an injected client is not closed by aclose().
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self._timeout = settings.HTTP_TIMEOUT
        self._client = client
        self._owns_client = client is None

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def request(self, method: str, url: str, body: Any = None) -> ApiResult:
        """Issue a single request; return the response or the error."""
        client = self._get_client()
        start_time = time.perf_counter()

        try:
            if body is None:
                response = await client.request(method, url)
            else:
                response = await client.request(method, url, json=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            duration = time.perf_counter() - start_time
            record_api_request(method, str(e.response.status_code), duration)
            logger.warning(
                "api_request_rejected",
                method=method,
                url=url,
                status_code=e.response.status_code,
            )
            return e
        except httpx.HTTPError as e:
            duration = time.perf_counter() - start_time
            record_api_request(method, "transport_error", duration)
            logger.error("api_request_failed", method=method, url=url, error=str(e))
            return e

        duration = time.perf_counter() - start_time
        record_api_request(method, str(response.status_code), duration)
        logger.debug(
            "api_request_completed",
            method=method,
            url=url,
            status_code=response.status_code,
            duration_ms=round(duration * 1000, 2),
        )
        return response

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self) -> "HttpTransport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def is_status(result: ApiResult, status_code: int) -> bool:
    """True when the call produced a response with exactly this status."""
    return isinstance(result, httpx.Response) and result.status_code == status_code


def response_data(result: ApiResult) -> Optional[Any]:
    """Decoded JSON body of a successful call, None for an error value."""
    if not isinstance(result, httpx.Response):
        return None
    try:
        return result.json()
    except ValueError:
        logger.warning("api_response_not_json", url=str(result.request.url))
        return None
