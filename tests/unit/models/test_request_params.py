"""Unit tests for RequestParameters."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from laakhay.paging import RequestParameters


class TestRequestParameters:
    """Test construction, mutation and query rendering."""

    def test_defaults(self):
        params = RequestParameters()
        assert params.max_items is None
        assert params.skip_count == 0
        assert params.filters == {}

    def test_accepts_wire_names_and_coerces(self):
        """Test maxItems/skipCount aliases and string counts."""
        params = RequestParameters.model_validate({"maxItems": "15", "skipCount": "30"})
        assert params.max_items == 15
        assert params.skip_count == 30

    def test_accepts_field_names(self):
        params = RequestParameters(max_items=10, skip_count=20)
        assert params.max_items == 10
        assert params.skip_count == 20

    def test_filters_carried_opaquely(self):
        """Test unknown fields become filters."""
        params = RequestParameters.model_validate({"maxItems": 5, "name": "ws", "scope": "all"})
        assert params.filters == {"name": "ws", "scope": "all"}

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError):
            RequestParameters(max_items=-1)

    def test_assignment_is_validated(self):
        """Test mutation goes through validation."""
        params = RequestParameters()
        params.skip_count = "45"
        assert params.skip_count == 45
        with pytest.raises(ValidationError):
            params.skip_count = -5

    def test_to_query(self):
        """Test query rendering with wire names and string values."""
        params = RequestParameters.model_validate({"maxItems": 15, "archived": False, "owner": None})
        assert params.to_query() == {
            "archived": "false",
            "maxItems": "15",
            "skipCount": "0",
        }

    def test_to_query_omits_unset_max_items(self):
        assert RequestParameters().to_query() == {"skipCount": "0"}

    def test_to_query_custom_names(self):
        params = RequestParameters(max_items=20, skip_count=40)
        assert params.to_query(max_items_param="limit", skip_count_param="offset") == {
            "limit": "20",
            "offset": "40",
        }
