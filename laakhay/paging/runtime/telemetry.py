"""Structured logging for page fetches.

This module provides telemetry hooks for the pagination resource, emitting
structured log records (fields in ``extra``) for each request lifecycle step.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_request(
    *,
    url: str,
    page_number: int,
    max_items: int | None,
    skip_count: int,
) -> None:
    """Log a page request about to be issued.

    Args:
        url: Target list endpoint
        page_number: Page the request is for
        max_items: Requested page size (None when unset)
        skip_count: Requested offset
    """
    logger.debug(
        "page_request",
        extra={
            "url": url,
            "page_number": page_number,
            "max_items": max_items,
            "skip_count": skip_count,
        },
    )


def log_page_response(
    *,
    url: str,
    page_number: int,
    count_pages: int,
    items: int,
    relations: list[str],
    latency_ms: float | None = None,
) -> None:
    """Log a successful page response.

    Args:
        url: Target list endpoint
        page_number: Page now displayed
        count_pages: Page count after the response
        items: Number of items on the page
        relations: Relations found in the Link header
        latency_ms: Round-trip latency in milliseconds (optional)
    """
    logger.info(
        "page_response",
        extra={
            "url": url,
            "page_number": page_number,
            "count_pages": count_pages,
            "items": items,
            "relations": relations,
            "latency_ms": latency_ms,
        },
    )


def log_page_not_modified(*, url: str, page_number: int, cached: bool) -> None:
    """Log a 304 answer.

    Args:
        url: Target list endpoint
        page_number: Page now displayed
        cached: Whether cached objects were available for the page
    """
    logger.info(
        "page_not_modified",
        extra={"url": url, "page_number": page_number, "cached": cached},
    )


def log_page_error(
    *,
    url: str,
    page_number: int,
    error_type: str,
    error_message: str,
    status_code: int | None = None,
) -> None:
    """Log a failed page request.

    Args:
        url: Target list endpoint
        page_number: Page that was requested
        error_type: Exception class name
        error_message: Exception message
        status_code: HTTP status when known
    """
    logger.error(
        "page_error",
        extra={
            "url": url,
            "page_number": page_number,
            "error_type": error_type,
            "error_message": error_message,
            "status_code": status_code,
        },
    )
