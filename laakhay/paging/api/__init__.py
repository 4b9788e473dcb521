"""High-level API."""

from .client import PagingClient

__all__ = ["PagingClient"]
