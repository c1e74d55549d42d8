#!/usr/bin/env python3
"""
Infinite scroll demo - pages an in-memory collection through the controller.

Usage:
    python -m infinite_scroll.main
    python -m infinite_scroll.main --records 120 --page-size 25 --reverse
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from typing import Optional, Sequence

from infinite_scroll.config import AppSettings
from infinite_scroll.core.di_container import ScrollContainer
from infinite_scroll.services import InMemoryDataSource

logger = logging.getLogger("InfiniteScroll.Demo")


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def run_demo(
    settings: AppSettings, records: int = 100, page_size: int = 20
) -> dict:
    """Load every page, then apply one of each local edit.

    Returns a summary of the final list state.
    """
    source = InMemoryDataSource(
        [{"id": i, "title": f"Item {i}"} for i in range(1, records + 1)],
        page_size=page_size,
    )
    container = ScrollContainer.create(
        source, settings=settings, key_extractor=lambda item, index: item["id"]
    )
    handle = container.handle

    await handle.wait_idle()
    logger.info(f"Initial load: {len(handle.get_items())} of {handle.total} items")

    while handle.has_more and not handle.error:
        handle.load_more()
        await handle.wait_idle()
        logger.info(f"Loaded {len(handle.get_items())} of {handle.total} items")

    handle.push({"id": records + 1, "title": "Pushed"})
    handle.unshift({"id": 0, "title": "Unshifted"})
    handle.replace(lambda item: item["id"] == 1, {"id": 1, "title": "Replaced"})
    handle.remove(lambda item: item["id"] == 2)

    items = handle.get_items()
    summary = {
        "count": len(items),
        "total": handle.total,
        "first": items[0] if items else None,
        "last": items[-1] if items else None,
        "requests": len(source.requested_offsets),
        "state": handle.state.value,
    }
    container.dispose()
    return summary


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Infinite scroll controller demo")
    parser.add_argument("--config", help="Path to a YAML settings file")
    parser.add_argument("--records", type=int, default=100)
    parser.add_argument("--page-size", type=int, default=20)
    parser.add_argument("--reverse", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    settings = AppSettings.load(args.config)
    if args.reverse:
        settings = replace(settings, scroll=replace(settings.scroll, reverse=True))

    summary = asyncio.run(run_demo(settings, args.records, args.page_size))
    print(
        f"Showing {summary['count']} of {summary['total']} items "
        f"after {summary['requests']} requests"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
