"""Page cache and key-based object index."""

from .object_index import KeyedObjectStore, MappingObjectStore, ObjectKeyIndex, as_object_store
from .page_cache import PageCache

__all__ = [
    "PageCache",
    "ObjectKeyIndex",
    "KeyedObjectStore",
    "MappingObjectStore",
    "as_object_store",
]
