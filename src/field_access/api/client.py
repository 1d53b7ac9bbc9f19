"""
Async HTTP client for model endpoints.

Bodies are sent as ``{"data": ...}`` and responses are returned as
decoded JSON. Headers may be a mapping or a (sync or async) callable
that produces one, resolved right before each request.
"""
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

import httpx

from ..core.exceptions import ModelRequestError

logger = logging.getLogger(__name__)

HeadersProvider = Callable[[], Union[Mapping[str, str], Awaitable[Mapping[str, str]]]]
HeadersInput = Optional[Union[Mapping[str, str], HeadersProvider]]

_NO_BODY = object()


async def resolve_headers(headers: HeadersInput) -> Optional[Dict[str, str]]:
    """Resolve static or dynamic headers into a plain dict."""
    if headers is None:
        return None
    if callable(headers):
        headers = headers()
        if inspect.isawaitable(headers):
            headers = await headers
    return dict(headers) if headers is not None else None


class ModelAPIClient:
    """Client for the GET/POST/PATCH/PUT/DELETE endpoints of a model."""

    def __init__(
        self,
        base_url: str = "",
        headers: HeadersInput = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ):
        """
        Initialize the client.

        Args:
            base_url: Prefix for relative URLs
            headers: Default headers for every request
            client: Existing httpx client to use (not closed by this client)
            timeout: Request timeout in seconds for an owned client
        """
        self.headers = headers
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
        )

    async def __aenter__(self) -> "ModelAPIClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def get(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: HeadersInput = None,
    ) -> Dict[str, Any]:
        """Fetch a model response."""
        return await self._request("GET", url, params=params, headers=headers)

    async def post(self, url: str, data: Any, params: Optional[Mapping[str, Any]] = None,
                   headers: HeadersInput = None) -> Dict[str, Any]:
        """Create a record."""
        return await self._request("POST", url, data=data, params=params, headers=headers)

    async def patch(self, url: str, data: Any, params: Optional[Mapping[str, Any]] = None,
                    headers: HeadersInput = None) -> Dict[str, Any]:
        """Send a partial update."""
        return await self._request("PATCH", url, data=data, params=params, headers=headers)

    async def put(self, url: str, data: Any, params: Optional[Mapping[str, Any]] = None,
                  headers: HeadersInput = None) -> Dict[str, Any]:
        """Replace a record."""
        return await self._request("PUT", url, data=data, params=params, headers=headers)

    async def delete(self, url: str, data: Any, params: Optional[Mapping[str, Any]] = None,
                     headers: HeadersInput = None) -> Dict[str, Any]:
        """Delete a record or fields of it."""
        return await self._request("DELETE", url, data=data, params=params, headers=headers)

    async def _request(
        self,
        method: str,
        url: str,
        data: Any = _NO_BODY,
        params: Optional[Mapping[str, Any]] = None,
        headers: HeadersInput = None,
    ) -> Dict[str, Any]:
        resolved_headers = await resolve_headers(headers if headers is not None else self.headers)
        request_kwargs: Dict[str, Any] = {}
        if resolved_headers:
            request_kwargs["headers"] = resolved_headers
        if params:
            request_kwargs["params"] = dict(params)
        if data is not _NO_BODY:
            request_kwargs["json"] = {"data": data}

        response = await self._client.request(method, url, **request_kwargs)
        if not response.is_success:
            body = response.text or response.reason_phrase
            logger.debug(f"{method} {url} failed with {response.status_code}")
            raise ModelRequestError(response.status_code, body)
        return response.json()
