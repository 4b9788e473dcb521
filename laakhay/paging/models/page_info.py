"""Page position model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PageInfo:
    """Live view of the paging position.

    The resource hands out this object by reference, so callers observe
    updates after each fetch.
    """

    count_pages: int = 1
    current_page_number: int = 1
