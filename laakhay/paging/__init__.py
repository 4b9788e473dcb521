"""Laakhay Paging - Link-header pagination with conditional GET caching."""

from .api import PagingClient
from .cache import KeyedObjectStore, MappingObjectStore, ObjectKeyIndex, PageCache
from .config import PagingConfig
from .core import (
    FetchInProgressError,
    InvalidPageKeyError,
    NoLinkAvailableError,
    NotModifiedError,
    PageLabel,
    PagingError,
    TransportError,
)
from .links import parse_links, parse_request_params
from .models import PageEntry, PageInfo, PageParams, PageResponse, RequestParameters
from .runtime import (
    HTTPClient,
    ItemAdapter,
    ModelItemAdapter,
    PageTransport,
    PaginationResource,
)

__version__ = "0.1.0"

__all__ = [
    # Facade
    "PagingClient",
    "PaginationResource",
    # Transport
    "HTTPClient",
    "PageTransport",
    "PageResponse",
    # Items
    "ItemAdapter",
    "ModelItemAdapter",
    "KeyedObjectStore",
    "MappingObjectStore",
    "ObjectKeyIndex",
    # Cache & parsing
    "PageCache",
    "PageEntry",
    "PageParams",
    "parse_links",
    "parse_request_params",
    # State
    "PageInfo",
    "PageLabel",
    "RequestParameters",
    "PagingConfig",
    # Errors
    "PagingError",
    "InvalidPageKeyError",
    "NoLinkAvailableError",
    "FetchInProgressError",
    "TransportError",
    "NotModifiedError",
]
