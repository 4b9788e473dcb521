"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class PagingError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidPageKeyError(PagingError, ValueError):
    """Page key does not resolve to a positive page number.

    Raised before any request is issued, e.g. for ``"abc"``, ``"-3"`` or
    ``"prev"`` while the first page is displayed.
    """

    def __init__(self, page_key: Any, message: str | None = None) -> None:
        super().__init__(message or f"Invalid page key: {page_key!r}")
        self.page_key = page_key


class NoLinkAvailableError(PagingError, LookupError):
    """No response has referenced the requested page yet."""

    def __init__(self, page_number: int, message: str | None = None) -> None:
        super().__init__(message or f"No link available for page {page_number}")
        self.page_number = page_number


class FetchInProgressError(PagingError):
    """Another fetch is still outstanding on the same resource."""

    pass


class TransportError(PagingError):
    """Error response from the list endpoint."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotModifiedError(TransportError):
    """Endpoint answered 304; the cached representation is still valid."""

    def __init__(self, message: str = "Not modified") -> None:
        super().__init__(message, status_code=304)


def is_not_modified(error: BaseException) -> bool:
    """Check whether a transport failure is a 304 answer.

    Works for our own ``TransportError`` (``status_code``) as well as
    ``aiohttp.ClientResponseError`` (``status``).
    """
    status = getattr(error, "status_code", None)
    if status is None:
        status = getattr(error, "status", None)
    return status == 304
