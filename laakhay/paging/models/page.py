"""Page cache entry and link parameter models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PageParams:
    """Offset/limit pair parsed from a page link.

    Attributes:
        max_items: Page size (0 when the link does not carry it)
        skip_count: Offset of the first item (0 when absent)
    """

    max_items: int = 0
    skip_count: int = 0


@dataclass
class PageEntry:
    """Cached state of one page.

    Attributes:
        link: URL that fetches this page
        objects: Items (or item keys) from the last successful fetch,
            None until the page has been fetched
        query: Query the objects were fetched with
        validators: Conditional request headers answering that fetch
            (``If-None-Match`` / ``If-Modified-Since``)
    """

    link: str
    objects: list[Any] | None = None
    query: dict[str, str] | None = None
    validators: dict[str, str] = field(default_factory=dict)

    @property
    def is_fetched(self) -> bool:
        return self.objects is not None
