"""Dependency injection container."""

from dataclasses import dataclass, field
from typing import Optional

from infinite_scroll.config import AppSettings
from infinite_scroll.core.protocols import DataSourcePort
from infinite_scroll.managers.mutation_manager import InfiniteScrollHandle
from infinite_scroll.managers.page_loader_manager import KeyExtractor


@dataclass
class ScrollContainer:
    settings: AppSettings
    load_items: DataSourcePort
    key_extractor: Optional[KeyExtractor] = None

    _handle: Optional[InfiniteScrollHandle] = field(
        default=None, init=False, repr=False
    )

    @property
    def handle(self) -> InfiniteScrollHandle:
        if self._handle is None:
            scroll = self.settings.scroll
            self._handle = InfiniteScrollHandle(
                self.load_items,
                reverse=scroll.reverse,
                key_extractor=self.key_extractor,
                discard_stale_responses=scroll.discard_stale_responses,
                require_key_extractor=scroll.require_key_extractor,
            )
        return self._handle

    def create_trigger(self, adjustment):
        """Build a GTK scroll trigger for ``adjustment``.

        The trigger is attached to the handle unless triggers are disabled
        in the settings.
        """
        from infinite_scroll.triggers.scroll_edge_trigger import ScrollEdgeTrigger

        trigger = ScrollEdgeTrigger(
            self.handle, adjustment, threshold_px=self.settings.trigger.threshold_px
        )
        if self.settings.trigger.enabled:
            self.handle.attach_trigger(trigger)
        return trigger

    def dispose(self) -> None:
        if self._handle is not None:
            self._handle.dispose()

    @classmethod
    def create(
        cls,
        load_items: DataSourcePort,
        settings: Optional[AppSettings] = None,
        key_extractor: Optional[KeyExtractor] = None,
    ) -> "ScrollContainer":
        return cls(
            settings=settings or AppSettings.load(),
            load_items=load_items,
            key_extractor=key_extractor,
        )
