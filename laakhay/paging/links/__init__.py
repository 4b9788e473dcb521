"""Link header and page-link parsing."""

from .parser import parse_links, parse_request_params

__all__ = ["parse_links", "parse_request_params"]
