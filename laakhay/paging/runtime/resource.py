"""Pagination resource for Link-header list endpoints.

Architecture:
    PaginationResource drives one list endpoint page by page. It owns:
    - RequestParameters: query sent with every request (shared with caller)
    - PageCache: page number -> link (+ objects once fetched)
    - ObjectKeyIndex: optional key indirection into a caller-owned store
    - PageInfo: current page number and page count (shared with caller)

    Each public fetch issues exactly one GET through the transport. Request
    parameters and the current page number are updated before the request
    goes out; links, page count and the page view are updated when the
    response arrives. A 304 answer re-displays the cached objects of the
    current page instead of failing.

Design Decisions:
    - One fetch at a time: a fetch issued while another is outstanding
      raises FetchInProgressError and leaves all state untouched
    - Page keys are validated before any request: InvalidPageKeyError,
      NoLinkAvailableError
    - Transport errors other than 304 propagate unchanged; the current page
      number, max_items and skip_count are restored to their values before
      the failed call
    - A 304 for a page with no cached objects leaves the view, the current
      page number and the request parameters as they were before the call
    - Cache validators (ETag / Last-Modified) are kept per page in this
      resource's cache and only sent when that page has objects cached for
      the same query; the transport itself is stateless
    - The page count follows the ``last`` link of every successful response
      and may shrink; cached pages beyond it are not evicted

See Also:
    - PageCache: Link bookkeeping and page count derivation
    - HTTPClient: Default aiohttp transport with conditional GET
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from time import perf_counter
from typing import Any

from ..cache import KeyedObjectStore, ObjectKeyIndex, PageCache
from ..config import DEFAULT_CONFIG, PagingConfig
from ..core.enums import PageLabel
from ..core.exceptions import (
    FetchInProgressError,
    InvalidPageKeyError,
    NoLinkAvailableError,
    is_not_modified,
)
from ..links import parse_links, parse_request_params
from ..models import PageInfo, PageResponse, RequestParameters
from .adapters import ItemAdapter
from .http import PageTransport
from .telemetry import log_page_error, log_page_not_modified, log_page_request, log_page_response

logger = logging.getLogger(__name__)


class PaginationResource:
    """Client-side paging controller for one list endpoint."""

    def __init__(
        self,
        url: str,
        transport: PageTransport,
        data: RequestParameters | dict[str, Any] | None = None,
        *,
        object_key: str | None = None,
        object_store: KeyedObjectStore | MutableMapping[Any, Any] | None = None,
        item_adapter: ItemAdapter | None = None,
        config: PagingConfig | None = None,
    ) -> None:
        """Initialize resource.

        Args:
            url: List endpoint URL (relative URLs are resolved by the transport)
            transport: Transport issuing the GET requests
            data: Initial request parameters and caller filters
            object_key: Item field used as key in keyed mode
            object_store: Caller-owned store for full items in keyed mode
            item_adapter: Converts raw JSON items (identity by default)
            config: Wire names and transport settings

        Raises:
            ValueError: Only one of object_key/object_store was given
        """
        if (object_key is None) != (object_store is None):
            raise ValueError("object_key and object_store must be provided together")

        self.url = url
        self._transport = transport
        self._config = config or DEFAULT_CONFIG
        self._adapter = item_adapter or ItemAdapter()

        if isinstance(data, RequestParameters):
            self._data = data
        else:
            self._data = RequestParameters.model_validate(data or {})

        self._object_key = object_key
        self._index = (
            ObjectKeyIndex(object_key, object_store)
            if object_key is not None and object_store is not None
            else None
        )
        self._cache = PageCache(
            max_items_param=self._config.max_items_param,
            skip_count_param=self._config.skip_count_param,
        )
        self._pages_info = PageInfo()
        self._page_objects: list[Any] = []
        self._in_flight = False

    @property
    def cache(self) -> PageCache:
        return self._cache

    @property
    def in_flight(self) -> bool:
        """Whether a fetch is outstanding."""
        return self._in_flight

    async def fetch_objects(self, max_items: int | None = None) -> list[Any]:
        """Fetch the first page.

        Args:
            max_items: Page size override; keeps the current size when falsy

        Returns:
            Items of the first page

        Raises:
            FetchInProgressError: Another fetch is outstanding
        """
        self._check_idle()
        previous = self._position()

        if max_items:
            self._data.max_items = max_items
        self._data.skip_count = 0
        self._pages_info.current_page_number = 1

        return await self._request(previous)

    async def fetch_page_objects(self, page_key: str | int) -> list[Any]:
        """Fetch a page by relation or number.

        Args:
            page_key: ``"first"``, ``"prev"``, ``"next"``, ``"last"`` or a
                decimal page number

        Returns:
            Items of the requested page

        Raises:
            FetchInProgressError: Another fetch is outstanding
            InvalidPageKeyError: Key does not resolve to a positive page number
            NoLinkAvailableError: No response has linked that page yet
        """
        self._check_idle()
        page_number = self._resolve_page_number(page_key)

        entry = self._cache.get_entry(page_number)
        if entry is None or not entry.link:
            raise NoLinkAvailableError(page_number)

        previous = self._position()
        self._pages_info.current_page_number = page_number

        params = parse_request_params(
            entry.link,
            max_items_param=self._config.max_items_param,
            skip_count_param=self._config.skip_count_param,
        )
        self._data.max_items = params.max_items
        self._data.skip_count = params.skip_count

        return await self._request(previous)

    def get_pages_info(self) -> PageInfo:
        return self._pages_info

    def get_page_objects(self) -> list[Any]:
        """Items of the current page, resolved through the store in keyed mode."""
        if self._index is None:
            return list(self._page_objects)
        return self._index.resolve(self._page_objects)

    def get_request_data_object(self) -> RequestParameters:
        return self._data

    def get_object_key(self) -> str | None:
        return self._object_key

    def _check_idle(self) -> None:
        if self._in_flight:
            raise FetchInProgressError(f"A fetch is already in progress for {self.url}")

    def _resolve_page_number(self, page_key: str | int) -> int:
        label = PageLabel.from_key(page_key)
        current = self._pages_info.current_page_number
        if label is PageLabel.FIRST:
            page_number = 1
        elif label is PageLabel.PREVIOUS:
            page_number = current - 1
        elif label is PageLabel.NEXT:
            page_number = current + 1
        elif label is PageLabel.LAST:
            page_number = self._pages_info.count_pages
        elif isinstance(page_key, bool):
            raise InvalidPageKeyError(page_key)
        elif isinstance(page_key, int):
            page_number = page_key
        else:
            text = str(page_key).strip()
            # ASCII digits only: int() would also take "+3", "1_0" and other scripts
            if not (text.isascii() and text.isdecimal()):
                raise InvalidPageKeyError(page_key)
            page_number = int(text)

        if page_number < 1:
            raise InvalidPageKeyError(page_key)
        return page_number

    def _position(self) -> tuple[int, int | None, int]:
        return (
            self._pages_info.current_page_number,
            self._data.max_items,
            self._data.skip_count,
        )

    def _restore(self, position: tuple[int, int | None, int]) -> None:
        page_number, max_items, skip_count = position
        self._pages_info.current_page_number = page_number
        self._data.max_items = max_items
        self._data.skip_count = skip_count

    async def _request(self, previous: tuple[int, int | None, int]) -> list[Any]:
        page_number = self._pages_info.current_page_number
        query = self._data.to_query(
            max_items_param=self._config.max_items_param,
            skip_count_param=self._config.skip_count_param,
        )
        headers = (
            self._cache.conditional_headers(page_number, query)
            if self._config.conditional_requests
            else {}
        )
        log_page_request(
            url=self.url,
            page_number=page_number,
            max_items=self._data.max_items,
            skip_count=self._data.skip_count,
        )

        self._in_flight = True
        started = perf_counter()
        try:
            response = await self._transport.get(self.url, params=query, headers=headers or None)
        except Exception as e:
            if is_not_modified(e):
                cached = self._show_cached_page()
                if not cached:
                    self._restore(previous)
                log_page_not_modified(url=self.url, page_number=page_number, cached=cached)
                return self.get_page_objects()
            self._restore(previous)
            log_page_error(
                url=self.url,
                page_number=page_number,
                error_type=type(e).__name__,
                error_message=str(e),
                status_code=getattr(e, "status_code", getattr(e, "status", None)),
            )
            raise
        finally:
            self._in_flight = False

        self._apply_response(response, query, latency_ms=(perf_counter() - started) * 1000.0)
        return self.get_page_objects()

    def _apply_response(
        self, response: PageResponse, query: dict[str, str], *, latency_ms: float
    ) -> None:
        links = parse_links(response.header(self._config.link_header))
        count_pages = self._cache.update_links(links, self._pages_info.current_page_number)
        if count_pages is not None:
            self._pages_info.count_pages = count_pages

        items = self._adapter.parse_many(response.body)
        objects = self._index.normalize(items) if self._index is not None else items
        self._cache.record_objects(
            self._pages_info.current_page_number,
            objects,
            query=query,
            validators=response.validators(),
        )
        self._page_objects = list(objects)

        log_page_response(
            url=self.url,
            page_number=self._pages_info.current_page_number,
            count_pages=self._pages_info.count_pages,
            items=len(objects),
            relations=sorted(links),
            latency_ms=latency_ms,
        )

    def _show_cached_page(self) -> bool:
        """Display the cached objects of the current page, if any."""
        entry = self._cache.get_entry(self._pages_info.current_page_number)
        if entry is None or entry.objects is None:
            return False
        self._page_objects = list(entry.objects)
        return True
