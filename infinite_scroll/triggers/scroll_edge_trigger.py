"""GTK scroll trigger that requests more items near the list edge."""

import logging

import gi

gi.require_version("Gtk", "4.0")
from gi.repository import GLib, Gtk

from infinite_scroll.managers.mutation_manager import InfiniteScrollHandle
from infinite_scroll.utils.scroll_math import is_near_edge

logger = logging.getLogger("InfiniteScroll.Trigger")


class ScrollEdgeTrigger:
    """Watches a scrolled window's vertical adjustment.

    The monitored edge follows the handle: the top in reverse mode, the
    bottom otherwise. Nothing fires until the first fetch has settled and
    more items are available. Besides scrolling, the position is checked
    again when attaching, when the content or viewport size changes, and
    after every list or load-state change, so an edge that is already in
    view keeps loading without a scroll.
    """

    def __init__(
        self,
        handle: InfiniteScrollHandle,
        adjustment: Gtk.Adjustment,
        threshold_px: int = 50,
    ):
        """Initialize ScrollEdgeTrigger.

        Args:
            handle: Controller handle whose load_more() is called
            adjustment: Vertical adjustment of the ScrolledWindow
            threshold_px: Distance from the edge that counts as reached
        """
        self.handle = handle
        self.adjustment = adjustment
        self.threshold_px = threshold_px
        self._handler_id = None
        self._changed_id = None
        self._unsubscribe = None
        self._idle_id = None

    @property
    def attached(self) -> bool:
        return self._handler_id is not None

    def attach(self) -> None:
        if self._handler_id is not None:
            return
        self._handler_id = self.adjustment.connect(
            "value-changed", self._on_value_changed
        )
        self._changed_id = self.adjustment.connect("changed", self._on_value_changed)
        self._unsubscribe = self.handle.subscribe(self._on_list_changed)
        logger.debug("Scroll trigger attached")
        self.check()

    def detach(self) -> None:
        if self._handler_id is not None:
            self.adjustment.disconnect(self._handler_id)
            self._handler_id = None
        if self._changed_id is not None:
            self.adjustment.disconnect(self._changed_id)
            self._changed_id = None
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self._idle_id is not None:
            GLib.source_remove(self._idle_id)
            self._idle_id = None
        logger.debug("Scroll trigger detached")

    def check(self) -> None:
        """Evaluate the current position without waiting for a scroll."""
        if self.attached:
            self._on_value_changed(self.adjustment)

    def _on_list_changed(self, items, total) -> None:
        self.check()

    def _on_value_changed(self, adjustment) -> None:
        edge = self.handle.sentinel_edge
        if edge is None or self.handle.is_loading:
            return

        if not is_near_edge(
            adjustment.get_value(),
            adjustment.get_upper(),
            adjustment.get_page_size(),
            self.threshold_px,
            at_start=(edge == "start"),
            lower=adjustment.get_lower(),
        ):
            return

        if self._idle_id is None:
            logger.info(f"Scrolled to {edge} of list, loading more...")
            self._idle_id = GLib.idle_add(self._request_load)

    def _request_load(self) -> bool:
        self._idle_id = None
        if self.attached:
            self.handle.load_more()
        return False  # Don't repeat
