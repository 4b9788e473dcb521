"""Request parameter model for list endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..config import MAX_ITEMS_PARAM, SKIP_COUNT_PARAM


class RequestParameters(BaseModel):
    """Query parameters sent with every page request.

    ``max_items``/``skip_count`` accept their wire names (``maxItems``,
    ``skipCount``) as well. Any other field is a caller filter and is sent
    as-is. The instance is shared with the caller and mutated before each
    request.
    """

    max_items: int | None = Field(default=None, ge=0, alias="maxItems")
    skip_count: int = Field(default=0, ge=0, alias="skipCount")

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        validate_assignment=True,
    )

    @property
    def filters(self) -> dict[str, Any]:
        """Caller-supplied fields other than the paging counts."""
        return dict(self.model_extra or {})

    def to_query(
        self,
        *,
        max_items_param: str = MAX_ITEMS_PARAM,
        skip_count_param: str = SKIP_COUNT_PARAM,
    ) -> dict[str, str]:
        """Render the query-string mapping, dropping unset values."""
        query: dict[str, Any] = dict(self.filters)
        query[max_items_param] = self.max_items
        query[skip_count_param] = self.skip_count
        return {key: _to_query_value(value) for key, value in query.items() if value is not None}


def _to_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
