"""Data source boundary: calls the host fetch function and validates pages."""

import inspect
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, List

from infinite_scroll.core.protocols import DataSourcePort
from infinite_scroll.exceptions import ConfigurationError, DataSourceFailure

logger = logging.getLogger("InfiniteScroll.DataSource")


@dataclass(frozen=True)
class Page:
    """One response from the data source.

    ``offset`` is echoed back by the source and kept for logging only.
    """

    items: List[Any] = field(default_factory=list)
    total: int = 0
    offset: int = 0

    @classmethod
    def from_response(cls, response: Any, requested_offset: int = 0) -> "Page":
        """Build a page from a mapping or an object with the same fields.

        Raises:
            DataSourceFailure: if the response does not look like a page.
        """
        if isinstance(response, Page):
            return response

        if isinstance(response, Mapping):
            get = response.get
        elif hasattr(response, "items") and hasattr(response, "total"):

            def get(key, default=None):
                return getattr(response, key, default)

        else:
            raise DataSourceFailure(
                f"Unexpected response type {type(response).__name__}",
                offset=requested_offset,
            )

        items = get("items", [])
        total = get("total", 0)
        offset = get("offset", requested_offset)

        if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
            raise DataSourceFailure(
                "Response 'items' must be a sequence", offset=requested_offset
            )
        if isinstance(total, float) and total.is_integer():
            total = int(total)
        if isinstance(total, bool) or not isinstance(total, int):
            raise DataSourceFailure(
                f"Response 'total' must be an integer, got {total!r}",
                offset=requested_offset,
            )
        if isinstance(offset, bool) or not isinstance(offset, int):
            offset = requested_offset

        return cls(items=list(items), total=total, offset=offset)


class DataSourceService:
    """Wraps the host's ``load_items(offset)`` function.

    Every failure, whatever its cause, comes out as ``DataSourceFailure``.
    """

    def __init__(self, load_items: DataSourcePort):
        if not callable(load_items):
            raise ConfigurationError("load_items must be callable")
        self.load_items = load_items

    async def fetch(self, offset: int) -> Page:
        logger.debug(f"Requesting page at offset {offset}")
        try:
            result = self.load_items(offset)
            if inspect.isawaitable(result):
                result = await result
        except DataSourceFailure:
            raise
        except Exception as e:
            raise DataSourceFailure(
                f"Data source failed at offset {offset}: {e}", offset=offset
            ) from e

        page = Page.from_response(result, requested_offset=offset)
        logger.debug(
            f"Received {len(page.items)} items at offset {offset} "
            f"(total: {page.total}, echoed offset: {page.offset})"
        )
        return page
