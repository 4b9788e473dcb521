"""Link header and page-link parsing.

Link headers follow RFC 5988 / RFC 8288::

    <https://host/api/items?skipCount=0&maxItems=15>; rel="first",
    <https://host/api/items?skipCount=45&maxItems=15>; rel="last"

The header is read with a small scanner instead of a regular expression:
each ``<...>`` target is taken verbatim (commas and semicolons inside the URL
are preserved), then the ``;``-separated parameters that follow it, up to the
next target, are searched for ``rel``.

Both functions are pure and never raise: malformed input degrades to an
empty mapping or zero counts.
"""

from __future__ import annotations

from urllib.parse import parse_qsl, urlsplit

from ..config import MAX_ITEMS_PARAM, SKIP_COUNT_PARAM
from ..models import PageParams


def parse_links(header_value: str | None) -> dict[str, str]:
    """Parse a ``Link`` header value into a relation -> URL mapping.

    Args:
        header_value: Raw header value, None when the header is absent

    Returns:
        Mapping of lower-cased relation name to URL. When a relation occurs
        more than once the last occurrence wins. A ``rel`` holding several
        space-separated relation types registers the URL under each one.
    """
    links: dict[str, str] = {}
    if not header_value:
        return links

    position = 0
    length = len(header_value)
    while position < length:
        start = header_value.find("<", position)
        if start < 0:
            break
        end = header_value.find(">", start + 1)
        if end < 0:
            break

        url = header_value[start + 1 : end].strip()
        next_start = header_value.find("<", end + 1)
        params_end = next_start if next_start >= 0 else length
        relations = _extract_relations(header_value[end + 1 : params_end])

        if url:
            for relation in relations:
                links[relation] = url

        position = params_end
    return links


def _extract_relations(params: str) -> list[str]:
    """Return the relation types declared in a link's parameter section."""
    for param in params.split(";"):
        name, sep, value = param.partition("=")
        if not sep or name.strip().lower() != "rel":
            continue
        value = value.strip().rstrip(",").strip()
        if len(value) >= 2 and value[0] == value[-1] == '"':
            value = value[1:-1]
        return [relation.lower() for relation in value.split()]
    return []


def parse_request_params(
    url: str | None,
    *,
    max_items_param: str = MAX_ITEMS_PARAM,
    skip_count_param: str = SKIP_COUNT_PARAM,
) -> PageParams:
    """Extract the page size and offset carried by a page link.

    Accepts absolute URLs, relative URLs and bare query strings. Counts that
    are missing, non-numeric or negative default to 0.

    Args:
        url: Page link (may be None)
        max_items_param: Query parameter carrying the page size
        skip_count_param: Query parameter carrying the offset

    Returns:
        PageParams with the two counts
    """
    if not url:
        return PageParams()

    try:
        query = urlsplit(url).query
    except ValueError:
        return PageParams()
    if not query and "?" not in url and "=" in url:
        query = url

    values: dict[str, str] = {}
    for key, value in parse_qsl(query, keep_blank_values=True):
        values[key] = value

    return PageParams(
        max_items=_to_count(values.get(max_items_param)),
        skip_count=_to_count(values.get(skip_count_param)),
    )


def _to_count(value: str | None) -> int:
    if value is None:
        return 0
    try:
        count = int(value.strip(), 10)
    except ValueError:
        return 0
    return count if count > 0 else 0
