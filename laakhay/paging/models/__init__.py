"""Data models for paging state and transport responses.

Model Categories:
    - Position: PageInfo
    - Requests: RequestParameters (pydantic, shared with the caller)
    - Cache: PageEntry, PageParams
    - Transport: PageResponse
"""

from .page import PageEntry, PageParams
from .page_info import PageInfo
from .request_params import RequestParameters
from .response import PageResponse

__all__ = [
    "PageEntry",
    "PageInfo",
    "PageParams",
    "PageResponse",
    "RequestParameters",
]
