"""Page Loader Manager - sequences data source calls and merges pages."""

import logging
import time
from typing import Any, Callable, Hashable, Optional

from infinite_scroll.exceptions import DataSourceFailure
from infinite_scroll.managers.list_store_manager import ListStoreManager
from infinite_scroll.managers.pagination_manager import (
    PaginationManager,
    compute_has_more,
)
from infinite_scroll.services.data_source import DataSourceService, Page

logger = logging.getLogger("InfiniteScroll.PageLoader")

KeyExtractor = Callable[[Any, int], Hashable]


def positional_key(item: Any, index: int) -> Hashable:
    return index


class PageLoaderManager:
    """Fetches pages from the data source into a ListStoreManager.

    ``load_more`` is single-flight and only appends items whose key is not
    already stored. ``reload`` always fetches offset 0 and rebuilds the
    list, dropping duplicates inside the response as well. Neither call
    raises on data source failure; the error flag is set instead.

    Without ``discard_stale_responses`` the response that settles last
    wins, even if an older request produced it.
    """

    def __init__(
        self,
        store: ListStoreManager,
        pagination: PaginationManager,
        data_source: DataSourceService,
        key_extractor: Optional[KeyExtractor] = None,
        discard_stale_responses: bool = False,
    ):
        """Initialize PageLoaderManager.

        Args:
            store: Store that receives fetched items
            pagination: Load/error flags for this loader
            data_source: Wrapped host fetch function
            key_extractor: ``(item, index) -> key`` identity function;
                positional index when omitted
            discard_stale_responses: Apply a response only if it belongs to
                a newer request than the last applied one
        """
        self.store = store
        self.pagination = pagination
        self.data_source = data_source
        self.key_extractor = key_extractor or positional_key
        self.discard_stale_responses = discard_stale_responses
        self.disposed = False

    @property
    def has_more(self) -> bool:
        return compute_has_more(len(self.store), self.store.get_total())

    async def load_more(self) -> None:
        """Fetch the page after the items already held."""
        if self.disposed:
            logger.debug("load_more ignored: loader disposed")
            return
        if not self.pagination.can_load_more(self.has_more):
            logger.debug(
                f"Cannot load more (loading: {self.pagination.loading}, "
                f"has_more: {self.has_more})"
            )
            return

        sequence = self.pagination.start_loading()
        offset = len(self.store)
        failed = False
        try:
            page = await self.data_source.fetch(offset)
        except DataSourceFailure as e:
            failed = True
            logger.error(f"Error loading more items: {e}")
        else:
            self._append_page(page, sequence)
        finally:
            self.pagination.finish_loading(failed)

    async def reload(self) -> None:
        """Fetch offset 0 and rebuild the list from it."""
        if self.disposed:
            logger.debug("reload ignored: loader disposed")
            return

        sequence = self.pagination.start_reload()
        start_time = time.time()
        logger.info("Reloading items from offset 0...")
        failed = False
        try:
            page = await self.data_source.fetch(0)
        except DataSourceFailure as e:
            failed = True
            logger.error(f"Error reloading items: {e}")
        else:
            self._replace_with_page(page, sequence)
            logger.info(f"Reload finished in {time.time() - start_time:.2f} seconds")
        finally:
            self.pagination.finish_reload(failed)

    def _should_apply(self, sequence: int) -> bool:
        if self.disposed:
            logger.warning("Response arrived after dispose, discarding")
            return False
        if self.discard_stale_responses and not self.pagination.accept(sequence):
            logger.warning(f"Discarding stale response #{sequence}")
            return False
        return True

    def _append_page(self, page: Page, sequence: int) -> None:
        if not self._should_apply(sequence):
            return

        existing = self.store.get_items()
        existing_keys = {
            self.key_extractor(item, index) for index, item in enumerate(existing)
        }
        base = len(existing)
        survivors = [
            item
            for local_index, item in enumerate(page.items)
            if self.key_extractor(item, base + local_index) not in existing_keys
        ]

        dropped = len(page.items) - len(survivors)
        if dropped:
            logger.debug(f"Dropped {dropped} already loaded items")

        self.store.apply(existing + tuple(survivors), page.total)
        logger.debug(f"Showing {len(self.store)} of {page.total} items")

    def _replace_with_page(self, page: Page, sequence: int) -> None:
        if not self._should_apply(sequence):
            return

        seen = set()
        kept = []
        for index, item in enumerate(page.items):
            key = self.key_extractor(item, index)
            if key in seen:
                continue
            seen.add(key)
            kept.append(item)

        dropped = len(page.items) - len(kept)
        if dropped:
            logger.debug(f"Dropped {dropped} duplicate items from reload")

        self.store.apply(kept, page.total)
        logger.info(f"Showing {len(kept)} of {page.total} items")
