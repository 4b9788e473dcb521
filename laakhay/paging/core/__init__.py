"""Core components."""

from .enums import PageLabel
from .exceptions import (
    FetchInProgressError,
    InvalidPageKeyError,
    NoLinkAvailableError,
    NotModifiedError,
    PagingError,
    TransportError,
    is_not_modified,
)

__all__ = [
    "PageLabel",
    "PagingError",
    "InvalidPageKeyError",
    "NoLinkAvailableError",
    "FetchInProgressError",
    "TransportError",
    "NotModifiedError",
    "is_not_modified",
]
