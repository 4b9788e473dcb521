"""Key-based object indirection.

In keyed mode the page cache stores only item keys. Full items live in a
store owned by the caller (typically shared between several resources that
list overlapping objects), which the index reaches through the
``KeyedObjectStore`` interface: lookup and upsert, never deletion.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyedObjectStore(Protocol):
    """Protocol for caller-owned item stores."""

    def lookup(self, key: Any) -> Any | None:
        """Return the item stored under ``key``, or None."""
        ...

    def upsert(self, key: Any, item: Any) -> None:
        """Store ``item`` under ``key``."""
        ...


class MappingObjectStore:
    """KeyedObjectStore over a caller-owned mutable mapping."""

    def __init__(self, mapping: MutableMapping[Any, Any] | None = None) -> None:
        self._mapping: MutableMapping[Any, Any] = mapping if mapping is not None else {}

    @property
    def mapping(self) -> MutableMapping[Any, Any]:
        return self._mapping

    def lookup(self, key: Any) -> Any | None:
        return self._mapping.get(key)

    def upsert(self, key: Any, item: Any) -> None:
        # Unchanged items keep their stored identity
        if key in self._mapping and self._mapping[key] == item:
            return
        self._mapping[key] = item


def as_object_store(store: KeyedObjectStore | MutableMapping[Any, Any]) -> KeyedObjectStore:
    """Wrap plain mappings into a MappingObjectStore."""
    if isinstance(store, KeyedObjectStore):
        return store
    if isinstance(store, MutableMapping):
        return MappingObjectStore(store)
    raise TypeError(
        f"object_store must implement lookup()/upsert() or be a mutable mapping, "
        f"got {type(store).__name__}"
    )


class ObjectKeyIndex:
    """Stores item keys per page and resolves them through a shared store."""

    def __init__(self, object_key: str, store: KeyedObjectStore | MutableMapping[Any, Any]) -> None:
        if not object_key:
            raise ValueError("object_key must be a non-empty string")
        self.object_key = object_key
        self.store = as_object_store(store)

    def extract_key(self, item: Any) -> Any | None:
        """Read the key field from a mapping item or an attribute-style item."""
        if isinstance(item, Mapping):
            return item.get(self.object_key)
        return getattr(item, self.object_key, None)

    def normalize(self, items: Iterable[Any]) -> list[Any]:
        """Upsert items into the store and return their keys in order.

        Items without a key are skipped.
        """
        keys: list[Any] = []
        for item in items:
            key = self.extract_key(item)
            if key is None:
                logger.warning(
                    "Skipping item without key field",
                    extra={"object_key": self.object_key},
                )
                continue
            self.store.upsert(key, item)
            keys.append(key)
        return keys

    def resolve(self, keys: Iterable[Any]) -> list[Any]:
        """Map keys back to full items, skipping keys missing from the store."""
        items: list[Any] = []
        for key in keys:
            item = self.store.lookup(key)
            if item is None:
                logger.debug("Key no longer in object store", extra={"key": key})
                continue
            items.append(item)
        return items
