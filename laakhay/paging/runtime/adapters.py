"""Item adapters applied to raw list payloads."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class ItemAdapter:
    """Turns one raw JSON item into a caller item. Identity by default."""

    def parse(self, raw: Any) -> Any:
        return raw

    def parse_many(self, body: Any) -> list[Any]:
        """Parse a response body; anything but a JSON array is an empty page."""
        if not isinstance(body, list):
            if body is not None:
                logger.warning(
                    "Unexpected list payload, treating as empty page",
                    extra={"payload_type": type(body).__name__},
                )
            return []
        items: list[Any] = []
        for raw in body:
            item = self.parse(raw)
            if item is not None:
                items.append(item)
        return items


class ModelItemAdapter(ItemAdapter):
    """Validates raw items into a pydantic model.

    Items that fail validation are dropped and logged.
    """

    def __init__(self, model: type[BaseModel]) -> None:
        self.model = model

    def parse(self, raw: Any) -> Any:
        try:
            return self.model.model_validate(raw)
        except ValidationError as e:
            logger.warning(
                "Dropping item that failed validation",
                extra={"model": self.model.__name__, "error_count": e.error_count()},
            )
            return None
