"""PagingClient facade for creating pagination resources.

Architecture:
    PagingClient owns one transport (an aiohttp HTTPClient unless one is
    injected) and hands out PaginationResource instances bound to it, one
    per list endpoint. Resources share the transport, and with it the
    aiohttp session; each resource keeps its own cache validators.

Design Decisions:
    - Transport injection allows testing with fake transports
    - Only an owned transport is closed by close()
    - Context manager pattern ensures proper resource cleanup
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from ..cache import KeyedObjectStore
from ..config import DEFAULT_CONFIG, PagingConfig
from ..models import RequestParameters
from ..runtime.adapters import ItemAdapter
from ..runtime.http import HTTPClient, PageTransport
from ..runtime.resource import PaginationResource

logger = logging.getLogger(__name__)


class PagingClient:
    """Factory for pagination resources sharing one transport."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        config: PagingConfig | None = None,
        transport: PageTransport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            base_url: Prefix for relative resource URLs (owned transport only)
            config: Wire names and transport settings
            transport: Transport to use instead of an owned HTTPClient
        """
        self._config = config or DEFAULT_CONFIG
        self._owns_transport = transport is None
        self._transport: PageTransport = transport or HTTPClient(
            base_url=base_url,
            timeout=self._config.timeout,
        )
        self._closed = False

    @property
    def transport(self) -> PageTransport:
        return self._transport

    @property
    def config(self) -> PagingConfig:
        return self._config

    def create_resource(
        self,
        url: str,
        data: RequestParameters | dict[str, Any] | None = None,
        *,
        object_key: str | None = None,
        object_store: KeyedObjectStore | MutableMapping[Any, Any] | None = None,
        item_adapter: ItemAdapter | None = None,
    ) -> PaginationResource:
        """Create a pagination resource for a list endpoint.

        Args:
            url: List endpoint URL
            data: Initial request parameters and filters
            object_key: Item key field for keyed mode
            object_store: Caller-owned item store for keyed mode
            item_adapter: Raw item converter

        Returns:
            A new PaginationResource bound to this client's transport
        """
        if self._closed:
            raise RuntimeError("PagingClient is closed")
        logger.debug("Creating pagination resource", extra={"url": url, "object_key": object_key})
        return PaginationResource(
            url,
            self._transport,
            data,
            object_key=object_key,
            object_store=object_store,
            item_adapter=item_adapter,
            config=self._config,
        )

    async def close(self) -> None:
        """Close the client and the transport it owns."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing PagingClient")
        if self._owns_transport and isinstance(self._transport, HTTPClient):
            await self._transport.close()

    async def __aenter__(self) -> PagingClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
