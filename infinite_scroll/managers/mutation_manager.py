"""Imperative surface for hosts: reload, load more and local list edits."""

import asyncio
import concurrent.futures
import logging
from typing import Any, Callable, Coroutine, List, Optional, Set, Tuple, Union

from infinite_scroll.core.protocols import DataSourcePort, TriggerPort
from infinite_scroll.exceptions import ConfigurationError
from infinite_scroll.managers.list_store_manager import ListStoreManager, Observer
from infinite_scroll.managers.page_loader_manager import KeyExtractor, PageLoaderManager
from infinite_scroll.managers.pagination_manager import LoadState, PaginationManager
from infinite_scroll.services.data_source import DataSourceService

logger = logging.getLogger("InfiniteScroll.Mutations")

Predicate = Callable[[Any], bool]
Scheduled = Union[asyncio.Task, concurrent.futures.Future]


class InfiniteScrollHandle:
    """Controller handle for one infinitely scrolling list.

    Must be created inside the event loop it will run on; creation issues
    the initial ``reload()`` right away. Local edits (``push``, ``unshift``,
    ``replace``, ``remove``) apply immediately and are never sent to the
    data source. ``remove`` always lowers ``total`` by exactly one, however
    many items matched.
    """

    def __init__(
        self,
        load_items: DataSourcePort,
        reverse: bool = False,
        key_extractor: Optional[KeyExtractor] = None,
        discard_stale_responses: bool = False,
        require_key_extractor: bool = False,
    ):
        if key_extractor is not None and not callable(key_extractor):
            raise ConfigurationError("key_extractor must be callable")
        if require_key_extractor and key_extractor is None:
            raise ConfigurationError(
                "key_extractor is required when require_key_extractor is set"
            )
        try:
            self._loop = asyncio.get_running_loop()
        except RuntimeError as e:
            raise ConfigurationError(
                "InfiniteScrollHandle must be created inside a running event loop"
            ) from e

        self.reverse = reverse
        self.store = ListStoreManager()
        self.pagination = PaginationManager(on_change=self.store.notify)
        self.loader = PageLoaderManager(
            self.store,
            self.pagination,
            DataSourceService(load_items),
            key_extractor=key_extractor,
            discard_stale_responses=discard_stale_responses,
        )
        self.disposed = False
        self._tasks: Set[Scheduled] = set()
        self._triggers: List[TriggerPort] = []

        self.reload()

    # Fetching

    def reload(self) -> Optional[Scheduled]:
        if self.disposed:
            logger.debug("reload() called on disposed handle")
            return None
        return self._spawn(self.loader.reload())

    def load_more(self) -> Optional[Scheduled]:
        if self.disposed:
            logger.debug("load_more() called on disposed handle")
            return None
        return self._spawn(self.loader.load_more())

    async def wait_idle(self) -> None:
        """Wait until every fetch scheduled through this handle has settled."""
        while True:
            pending = [task for task in self._tasks if not task.done()]
            if not pending:
                return
            await asyncio.gather(
                *(
                    task if isinstance(task, asyncio.Future) else asyncio.wrap_future(task)
                    for task in pending
                ),
                return_exceptions=True,
            )

    # Local edits

    def get_items(self) -> Tuple[Any, ...]:
        return self.store.get_items()

    def replace(self, predicate: Predicate, item: Any) -> None:
        if self._ignored("replace"):
            return
        self.store.replace_items(
            item if predicate(existing) else existing
            for existing in self.store.get_items()
        )

    def remove(self, predicate: Predicate) -> None:
        if self._ignored("remove"):
            return
        items = self.store.get_items()
        kept = [existing for existing in items if not predicate(existing)]
        logger.debug(f"Removed {len(items) - len(kept)} items")
        self.store.apply(kept, self.store.get_total() - 1)

    def push(self, item: Any) -> None:
        if self._ignored("push"):
            return
        self.store.apply(self.store.get_items() + (item,), self.store.get_total() + 1)

    def unshift(self, item: Any) -> None:
        if self._ignored("unshift"):
            return
        self.store.apply((item,) + self.store.get_items(), self.store.get_total() + 1)

    # State

    @property
    def total(self) -> int:
        return self.store.get_total()

    @property
    def has_more(self) -> bool:
        return self.loader.has_more

    @property
    def error(self) -> bool:
        return self.pagination.error

    @property
    def is_loading(self) -> bool:
        return self.pagination.loading

    @property
    def first_load_done(self) -> bool:
        return self.pagination.first_load_done

    @property
    def state(self) -> LoadState:
        return self.pagination.state

    @property
    def sentinel_edge(self) -> Optional[str]:
        """Edge whose visibility should trigger ``load_more``, if any."""
        if self.disposed or not self.first_load_done or not self.has_more:
            return None
        return "start" if self.reverse else "end"

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        return self.store.subscribe(observer)

    # Lifecycle

    def attach_trigger(self, trigger: TriggerPort) -> None:
        if self._ignored("attach_trigger"):
            return
        trigger.attach()
        self._triggers.append(trigger)

    def set_data_source(self, load_items: DataSourcePort) -> None:
        """Swap the fetch function, re-subscribing triggers to the new one."""
        if self._ignored("set_data_source"):
            return
        self.loader.data_source = DataSourceService(load_items)
        for trigger in self._triggers:
            trigger.detach()
            trigger.attach()
        logger.info("Data source replaced")

    def dispose(self) -> None:
        if self.disposed:
            return
        self.disposed = True
        self.loader.disposed = True
        for trigger in self._triggers:
            trigger.detach()
        self._triggers.clear()
        self.store.clear_observers()
        logger.info(
            f"Disposed with {len(self.store)} items, "
            f"{sum(1 for task in self._tasks if not task.done())} fetches in flight"
        )

    def _ignored(self, operation: str) -> bool:
        if self.disposed:
            logger.debug(f"{operation}() called on disposed handle")
        return self.disposed

    def _spawn(self, coro: Coroutine) -> Scheduled:
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        if running is self._loop:
            task = self._loop.create_task(coro)
        else:
            task = asyncio.run_coroutine_threadsafe(coro, self._loop)

        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: Scheduled) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"Fetch task failed: {exc!r}")
