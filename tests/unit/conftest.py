"""Shared fixtures for paging unit tests."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from laakhay.paging import NotModifiedError, PageResponse


class FakeListEndpoint:
    """In-memory list endpoint speaking the skipCount/maxItems + Link protocol.

    Pages are sliced from ``items`` by the request parameters. A ``Link``
    header with first/prev/next/last is attached whenever the list does
    not fit in one page.
    """

    def __init__(self, count_objects: int, url: str = "/api/object") -> None:
        self.url = url
        self.items = [
            {"id": f"testId_{n}", "attributes": {"name": f"testName{n}"}}
            for n in range(count_objects)
        ]
        self.calls: list[dict[str, Any]] = []
        self.queued_errors: list[Exception] = []
        self.extra_headers: dict[str, str] = {}

    def page_link(self, skip_count: int, max_items: int) -> str:
        return f"{self.url}?skipCount={skip_count}&maxItems={max_items}"

    def respond_not_modified(self) -> None:
        self.queued_errors.append(NotModifiedError())

    def respond_error(self, error: Exception) -> None:
        self.queued_errors.append(error)

    def link_header(self, skip_count: int, max_items: int) -> str | None:
        total = len(self.items)
        if max_items <= 0 or total <= max_items:
            return None
        last_skip = ((total - 1) // max_items) * max_items
        relations = [
            ("first", 0),
            ("last", last_skip),
        ]
        if skip_count + max_items < total:
            relations.append(("next", skip_count + max_items))
        if skip_count > 0:
            relations.append(("prev", max(skip_count - max_items, 0)))
        return ",".join(
            f'<{self.page_link(skip, max_items)}>; rel="{rel}"' for rel, skip in relations
        )

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> PageResponse:
        params = dict(params or {})
        self.calls.append({"url": url, "params": params, "headers": headers})
        # Yield like a real round trip
        await asyncio.sleep(0)

        if self.queued_errors:
            raise self.queued_errors.pop(0)

        max_items = int(params.get("maxItems", len(self.items)))
        skip_count = int(params.get("skipCount", 0))
        page = self.items[skip_count : skip_count + max_items]

        response_headers = dict(self.extra_headers)
        link = self.link_header(skip_count, max_items)
        if link is not None:
            response_headers["Link"] = link
        return PageResponse(status=200, body=page, headers=response_headers)


@pytest.fixture
def make_endpoint():
    """Factory for FakeListEndpoint instances."""

    def factory(count_objects: int, url: str = "/api/object") -> FakeListEndpoint:
        return FakeListEndpoint(count_objects, url=url)

    return factory
