"""In-memory paginated data source."""

import asyncio
import logging
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger("InfiniteScroll.MemorySource")


class InMemoryDataSource:
    """Serves ``{"items", "total", "offset"}`` pages out of a list.

    Instances are callable with an offset, so they can be handed straight
    to the controller as ``load_items``.
    """

    def __init__(
        self,
        records: Optional[Iterable[Any]] = None,
        page_size: int = 50,
        delay: float = 0.0,
    ):
        """Initialize InMemoryDataSource.

        Args:
            records: Initial records, in fetch order
            page_size: Maximum number of items returned per call
            delay: Seconds to sleep before answering each call
        """
        self.records: List[Any] = list(records or [])
        self.page_size = page_size
        self.delay = delay
        self.requested_offsets: List[int] = []
        self._failures_left = 0
        self._failure_message = "Injected failure"

    def fail_next(self, count: int = 1, message: str = "Injected failure") -> None:
        """Make the next ``count`` calls raise ``ConnectionError``."""
        self._failures_left = count
        self._failure_message = message

    def get_total_count(self) -> int:
        return len(self.records)

    def get_page(self, offset: int) -> Dict[str, Any]:
        offset = max(offset, 0)
        items = self.records[offset : offset + self.page_size]
        return {"items": items, "total": self.get_total_count(), "offset": offset}

    async def __call__(self, offset: int) -> Dict[str, Any]:
        self.requested_offsets.append(offset)
        if self.delay:
            await asyncio.sleep(self.delay)

        if self._failures_left > 0:
            self._failures_left -= 1
            logger.debug(f"Failing request at offset {offset}")
            raise ConnectionError(self._failure_message)

        return self.get_page(offset)
