"""Runtime: transport, item adapters, telemetry and the pagination resource."""

from .adapters import ItemAdapter, ModelItemAdapter
from .http import HTTPClient, PageTransport
from .resource import PaginationResource

__all__ = [
    "HTTPClient",
    "ItemAdapter",
    "ModelItemAdapter",
    "PageTransport",
    "PaginationResource",
]
