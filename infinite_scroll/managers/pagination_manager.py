"""Pagination state management for infinite scroll."""

import enum
from typing import Callable, Optional


class LoadState(enum.Enum):
    INITIALIZING = "initializing"
    IDLE = "idle"
    LOADING_MORE = "loadingMore"
    RELOADING = "reloading"
    ERROR = "error"


def compute_has_more(item_count: int, total: int) -> bool:
    return total == 0 or item_count < total


class PaginationManager:
    """Holds the load/error flags of one controller.

    ``loading`` is the single-flight guard for ``load_more``. ``error`` is
    sticky until the next attempt starts. ``first_load_done`` flips to True
    when a fetch settles and back to False when a reload starts.
    """

    def __init__(self, on_change: Optional[Callable[[], None]] = None):
        self.on_change = on_change
        self.loading = False
        self.error = False
        self.first_load_done = False
        self.reloads_in_flight = 0
        self.loading_more = False
        self._ever_settled = False
        self._issued_sequence = 0
        self._applied_sequence = 0

    def can_load_more(self, has_more: bool) -> bool:
        return has_more and not self.loading

    def start_loading(self) -> int:
        self.loading = True
        self.loading_more = True
        self.error = False
        self._changed()
        return self.next_sequence()

    def finish_loading(self, failed: bool) -> None:
        self.loading = False
        self.loading_more = False
        if failed:
            self.error = True
        self.first_load_done = True
        self._ever_settled = True
        self._changed()

    def start_reload(self) -> int:
        self.loading = True
        self.error = False
        self.first_load_done = False
        self.reloads_in_flight += 1
        self._changed()
        return self.next_sequence()

    def finish_reload(self, failed: bool) -> None:
        self.loading = False
        self.reloads_in_flight = max(self.reloads_in_flight - 1, 0)
        if failed:
            self.error = True
        self.first_load_done = True
        self._ever_settled = True
        self._changed()

    def next_sequence(self) -> int:
        self._issued_sequence += 1
        return self._issued_sequence

    def accept(self, sequence: int) -> bool:
        """Record ``sequence`` as applied unless a newer one already was."""
        if sequence <= self._applied_sequence:
            return False
        self._applied_sequence = sequence
        return True

    @property
    def state(self) -> LoadState:
        if self.reloads_in_flight:
            return LoadState.RELOADING if self._ever_settled else LoadState.INITIALIZING
        if self.loading_more:
            return LoadState.LOADING_MORE
        if self.error:
            return LoadState.ERROR
        if not self._ever_settled:
            return LoadState.INITIALIZING
        return LoadState.IDLE

    def _changed(self) -> None:
        if self.on_change:
            self.on_change()
