#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from laakhay.paging import PagingClient, PagingError


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Walk a Link-header paged list endpoint")
    p.add_argument("base_url", help="Server root, e.g. https://che.example.com")
    p.add_argument("path", nargs="?", default="/api/workspace")
    p.add_argument("max_items", nargs="?", type=int, default=15)
    p.add_argument(
        "pages",
        nargs="*",
        default=["next", "last", "prev", "first"],
        help="Page keys to visit after the first page",
    )
    p.add_argument("--key", default=None, help="Item key field for keyed mode")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    shared: dict = {}
    async with PagingClient(args.base_url) as client:
        resource = client.create_resource(
            args.path,
            object_key=args.key,
            object_store=shared if args.key else None,
        )
        objects = await resource.fetch_objects(args.max_items)
        info = resource.get_pages_info()
        print(f"page {info.current_page_number}/{info.count_pages}: {len(objects)} items")

        for key in args.pages:
            try:
                objects = await resource.fetch_page_objects(key)
            except PagingError as e:
                print(f"{key:>6}: {e}")
                continue
            print(f"{key:>6} -> page {info.current_page_number}/{info.count_pages}: {len(objects)} items")

    if args.key:
        print(f"{len(shared)} distinct items seen")


if __name__ == "__main__":
    asyncio.run(main())
