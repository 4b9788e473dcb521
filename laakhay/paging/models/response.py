"""Transport response model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PageResponse:
    """Successful answer of the list endpoint.

    Attributes:
        status: HTTP status code (2xx)
        body: Decoded JSON body, None when empty
        headers: Response headers
    """

    status: int
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        value = self.headers.get(name)
        if value is not None:
            return value
        lowered = name.lower()
        for key, candidate in self.headers.items():
            if key.lower() == lowered:
                return candidate
        return None

    def validators(self) -> dict[str, str]:
        """Conditional request headers for refetching this response.

        ``ETag`` maps to ``If-None-Match`` and ``Last-Modified`` to
        ``If-Modified-Since``; absent headers are left out.
        """
        validators: dict[str, str] = {}
        etag = self.header("etag")
        if etag:
            validators["If-None-Match"] = etag
        last_modified = self.header("last-modified")
        if last_modified:
            validators["If-Modified-Since"] = last_modified
        return validators
