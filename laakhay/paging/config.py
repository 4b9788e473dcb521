"""Shared paging constants and configuration.

This module centralizes the wire names used by list endpoints (link header,
query parameter names) and the transport defaults so the resource and the
HTTP client agree on them.
"""

from __future__ import annotations

from dataclasses import dataclass

# Response header carrying the page relations (looked up case-insensitively)
LINK_HEADER = "link"

# Query parameters used by the list endpoints for offset/limit paging
MAX_ITEMS_PARAM = "maxItems"
SKIP_COUNT_PARAM = "skipCount"

# Total request timeout in seconds
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class PagingConfig:
    """Paging configuration.

    Attributes:
        link_header: Name of the response header holding page links
        max_items_param: Query parameter carrying the page size
        skip_count_param: Query parameter carrying the offset
        timeout: Total request timeout in seconds for the HTTP client
        conditional_requests: Whether resources send the cache validators
            (If-None-Match / If-Modified-Since) of pages they have cached so
            the server can answer 304
    """

    link_header: str = LINK_HEADER
    max_items_param: str = MAX_ITEMS_PARAM
    skip_count_param: str = SKIP_COUNT_PARAM
    timeout: float = DEFAULT_TIMEOUT
    conditional_requests: bool = True

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.link_header:
            raise ValueError("link_header must be a non-empty string")
        if not self.max_items_param or not self.skip_count_param:
            raise ValueError("Query parameter names must be non-empty strings")
        if self.max_items_param == self.skip_count_param:
            raise ValueError("max_items_param and skip_count_param must differ")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")


DEFAULT_CONFIG = PagingConfig()
