"""Unit tests for PageCache."""

from __future__ import annotations

from laakhay.paging import PageCache


def _link(skip: int, max_items: int = 15) -> str:
    return f"/api/object?skipCount={skip}&maxItems={max_items}"


class TestPageCacheRecording:
    """Test entry creation and updates."""

    def test_record_page_creates_entry(self):
        """Test first link for a page creates an unfetched entry."""
        cache = PageCache()
        cache.record_page(2, _link(15))

        entry = cache.get_entry(2)
        assert entry is not None
        assert entry.link == _link(15)
        assert entry.objects is None
        assert not entry.is_fetched

    def test_record_page_updates_link_and_keeps_objects(self):
        """Test re-recording a page only replaces its link."""
        cache = PageCache()
        cache.record_page(1, _link(0))
        cache.record_objects(1, ["a", "b"])

        cache.record_page(1, _link(0, 30))

        entry = cache.get_entry(1)
        assert entry.link == _link(0, 30)
        assert entry.objects == ["a", "b"]

    def test_record_page_ignores_invalid_input(self):
        """Test zero/negative/None page numbers and empty links are no-ops."""
        cache = PageCache()
        cache.record_page(0, _link(0))
        cache.record_page(-1, _link(0))
        cache.record_page(None, _link(0))
        cache.record_page(3, "")
        cache.record_page(3, None)
        assert len(cache) == 0

    def test_record_objects_requires_entry(self):
        """Test objects are only attached to known pages."""
        cache = PageCache()
        assert cache.record_objects(1, ["a"]) is False
        assert cache.get_entry(1) is None

        cache.record_page(1, _link(0))
        assert cache.record_objects(1, (x for x in ["a", "b"])) is True
        assert cache.get_entry(1).objects == ["a", "b"]

    def test_conditional_headers_require_cached_objects(self):
        """Test validators are only handed out for fetched pages."""
        cache = PageCache()
        query = {"maxItems": "15", "skipCount": "0"}
        assert cache.conditional_headers(1, query) == {}

        cache.record_page(1, _link(0))
        assert cache.conditional_headers(1, query) == {}

        cache.record_objects(1, ["a"], query=query, validators={"If-None-Match": '"v1"'})
        assert cache.conditional_headers(1, dict(query)) == {"If-None-Match": '"v1"'}

    def test_conditional_headers_scoped_to_query(self):
        cache = PageCache()
        cache.record_page(1, _link(0))
        cache.record_objects(
            1, ["a"], query={"maxItems": "15", "skipCount": "0"}, validators={"If-None-Match": '"v1"'}
        )

        assert cache.conditional_headers(1, {"maxItems": "10", "skipCount": "0"}) == {}

    def test_introspection(self):
        """Test len, membership and ordering helpers."""
        cache = PageCache()
        cache.record_page(4, _link(45))
        cache.record_page(1, _link(0))
        assert len(cache) == 2
        assert 4 in cache
        assert 2 not in cache
        assert cache.page_numbers() == [1, 4]


class TestPageCacheCount:
    """Test page count derivation."""

    def test_count_pages_from_last_link(self):
        """Test floor(skip / max) + 1."""
        cache = PageCache()
        assert cache.count_pages(_link(45)) == 4
        assert cache.count_pages(_link(0)) == 1
        assert cache.count_pages(_link(40, 20)) == 3

    def test_count_pages_without_usable_link(self):
        """Test missing link or page size gives None."""
        cache = PageCache()
        assert cache.count_pages(None) is None
        assert cache.count_pages("/api/object?skipCount=45") is None

    def test_count_pages_custom_params(self):
        """Test configured parameter names are honoured."""
        cache = PageCache(max_items_param="limit", skip_count_param="offset")
        assert cache.count_pages("/api?offset=20&limit=10") == 3


class TestPageCacheUpdateLinks:
    """Test recording adjacent-page links."""

    def test_update_links_from_first_page(self):
        """Test first/next/last land on 1/2/count."""
        cache = PageCache()
        count = cache.update_links(
            {"first": _link(0), "next": _link(15), "last": _link(45)},
            current_page_number=1,
        )
        assert count == 4
        assert cache.page_numbers() == [1, 2, 4]
        assert cache.get_entry(2).link == _link(15)

    def test_update_links_prev_relative_to_current(self):
        """Test prev/next are placed around the current page."""
        cache = PageCache()
        cache.update_links(
            {"prev": _link(15), "next": _link(45), "last": _link(45)},
            current_page_number=3,
        )
        assert cache.get_entry(2).link == _link(15)
        assert cache.get_entry(4).link == _link(45)

    def test_prev_from_first_page_is_ignored(self):
        """Test prev of page 1 (page 0) is not recorded."""
        cache = PageCache()
        cache.update_links({"prev": _link(0)}, current_page_number=1)
        assert len(cache) == 0

    def test_update_links_without_last(self):
        """Test no count is derived without a last relation."""
        cache = PageCache()
        assert cache.update_links({"first": _link(0)}, current_page_number=1) is None
        assert cache.update_links({}, current_page_number=1) is None
        assert cache.page_numbers() == [1]

    def test_shrinking_count_keeps_higher_pages(self):
        """Test a smaller page count does not evict cached pages."""
        cache = PageCache()
        cache.update_links({"last": _link(45)}, current_page_number=1)
        count = cache.update_links({"last": _link(15)}, current_page_number=1)
        assert count == 2
        assert 4 in cache
