"""HTTP transport for list endpoints."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import aiohttp

from ..config import DEFAULT_TIMEOUT
from ..core.exceptions import NotModifiedError, TransportError
from ..models import PageResponse

logger = logging.getLogger(__name__)


class PageTransport(Protocol):
    """Protocol for transports used by the pagination resource.

    ``get`` returns the decoded body with headers on 2xx and raises on any
    other status. A 304 must surface as an exception whose ``status_code``
    (or ``status``) is 304.
    """

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> PageResponse: ...


class HTTPClient:
    """Async HTTP client wrapper.

    The client keeps no per-request state besides its session: conditional
    request headers (``If-None-Match``, ``If-Modified-Since``) are supplied
    by the caller, so one client can be shared by many resources.
    """

    def __init__(self, base_url: str | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def _resolve_url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"
        return url

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> PageResponse:
        """GET request.

        A 2xx body that is not valid JSON is returned as ``body=None``.

        Raises:
            NotModifiedError: Server answered 304
            TransportError: Any other non-2xx status
        """
        url = self._resolve_url(url)
        async with self.session.get(url, params=params, headers=dict(headers or {})) as response:
            if response.status == 304:
                raise NotModifiedError(f"GET {url} not modified")
            if not 200 <= response.status < 300:
                raise TransportError(
                    f"GET {url} failed with status {response.status}",
                    status_code=response.status,
                )
            try:
                body = await response.json(content_type=None)
            except (ValueError, aiohttp.ContentTypeError) as e:
                logger.warning(
                    "Response body is not JSON",
                    extra={"url": url, "status": response.status, "error": str(e)},
                )
                body = None
            response_headers = _flatten_headers(response.headers)

        logger.debug("GET completed", extra={"url": url, "status": response.status})
        return PageResponse(status=response.status, body=body, headers=response_headers)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _flatten_headers(headers: Any) -> dict[str, str]:
    """Collapse repeated header fields into one comma-joined value."""
    flat: dict[str, str] = {}
    for name, value in headers.items():
        if name in flat:
            flat[name] = f"{flat[name]}, {value}"
        else:
            flat[name] = value
    return flat
