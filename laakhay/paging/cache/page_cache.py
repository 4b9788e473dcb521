"""Per-page link and object cache.

The cache maps page numbers to the link that fetches the page and, once the
page has been fetched, the objects it returned. Entries are created lazily
the first time a response references a page and are never evicted.

Note:
    The page count is re-derived from the ``last`` relation of every
    successful response and may shrink. Entries beyond a shrunk count are
    kept as they are; they are only replaced when a later response links
    the same page number again.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..config import MAX_ITEMS_PARAM, SKIP_COUNT_PARAM
from ..core.enums import PageLabel
from ..links import parse_request_params
from ..models import PageEntry

logger = logging.getLogger(__name__)


class PageCache:
    """Page number -> PageEntry table."""

    def __init__(
        self,
        *,
        max_items_param: str = MAX_ITEMS_PARAM,
        skip_count_param: str = SKIP_COUNT_PARAM,
    ) -> None:
        self._pages: dict[int, PageEntry] = {}
        self._max_items_param = max_items_param
        self._skip_count_param = skip_count_param

    def __len__(self) -> int:
        return len(self._pages)

    def __contains__(self, page_number: object) -> bool:
        return page_number in self._pages

    def page_numbers(self) -> list[int]:
        """Known page numbers in ascending order."""
        return sorted(self._pages)

    def get_entry(self, page_number: int) -> PageEntry | None:
        return self._pages.get(page_number)

    def record_page(self, page_number: int | None, link: str | None) -> None:
        """Create or update the link of a page.

        No-op when the page number is missing/non-positive or the link is
        empty.
        """
        if not page_number or page_number < 1 or not link:
            return
        entry = self._pages.get(page_number)
        if entry is None:
            self._pages[page_number] = PageEntry(link=link)
        else:
            entry.link = link

    def record_objects(
        self,
        page_number: int,
        objects: Iterable[Any],
        *,
        query: Mapping[str, str] | None = None,
        validators: Mapping[str, str] | None = None,
    ) -> bool:
        """Attach freshly fetched objects to a known page.

        Args:
            page_number: Page the objects belong to
            objects: Items or item keys
            query: Query the page was fetched with
            validators: Conditional request headers for refetching the page

        Returns:
            False when the page has no entry yet (nothing is stored)
        """
        entry = self._pages.get(page_number)
        if entry is None:
            return False
        entry.objects = list(objects)
        entry.query = dict(query) if query is not None else None
        entry.validators = dict(validators or {})
        return True

    def conditional_headers(self, page_number: int, query: Mapping[str, str]) -> dict[str, str]:
        """Validators to send when refetching a page with ``query``.

        Empty unless the page has cached objects fetched with the same query,
        so a 304 answer always has cached data to fall back on.
        """
        entry = self._pages.get(page_number)
        if entry is None or entry.objects is None or entry.query != dict(query):
            return {}
        return dict(entry.validators)

    def count_pages(self, last_link: str | None) -> int | None:
        """Derive the total page count from the ``last`` link.

        Returns:
            ``skip_count // max_items + 1``, or None when there is no link
            or it carries no page size
        """
        if not last_link:
            return None
        params = parse_request_params(
            last_link,
            max_items_param=self._max_items_param,
            skip_count_param=self._skip_count_param,
        )
        if params.max_items <= 0:
            logger.debug("Last link carries no page size", extra={"link": last_link})
            return None
        return params.skip_count // params.max_items + 1

    def update_links(self, links: Mapping[str, str], current_page_number: int) -> int | None:
        """Record the adjacent-page links of a response.

        Args:
            links: Relation -> URL mapping parsed from the Link header
            current_page_number: Page the response belongs to

        Returns:
            Page count derived from the ``last`` relation, None without one
        """
        if not links:
            return None

        self.record_page(1, links.get(PageLabel.FIRST.value))

        last_link = links.get(PageLabel.LAST.value)
        count_pages = self.count_pages(last_link)
        self.record_page(count_pages, last_link)

        self.record_page(current_page_number - 1, links.get(PageLabel.PREVIOUS.value))
        self.record_page(current_page_number + 1, links.get(PageLabel.NEXT.value))
        return count_pages
