"""Ordered item collection and aggregate total, with synchronous observers."""

from typing import Any, Callable, Iterable, List, Tuple

Observer = Callable[[Tuple[Any, ...], int], None]


class ListStoreManager:
    """Single source of truth for the materialized list.

    Items are held as a tuple that is replaced, never mutated in place, so
    ``get_items()`` hands out the current snapshot without copying.
    """

    def __init__(self):
        self._items: Tuple[Any, ...] = ()
        self._total = 0
        self._observers: List[Observer] = []

    def get_items(self) -> Tuple[Any, ...]:
        return self._items

    def get_total(self) -> int:
        return self._total

    def __len__(self) -> int:
        return len(self._items)

    def replace_items(self, items: Iterable[Any]) -> None:
        self._items = tuple(items)
        self.notify()

    def append_items(self, items: Iterable[Any]) -> None:
        self._items = self._items + tuple(items)
        self.notify()

    def set_total(self, total: int) -> None:
        self._total = total
        self.notify()

    def apply(self, items: Iterable[Any], total: int) -> None:
        """Replace items and total together, notifying once."""
        self._items = tuple(items)
        self._total = total
        self.notify()

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer; returns a function that unregisters it."""
        self._observers.append(observer)

        def unsubscribe():
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def clear_observers(self) -> None:
        self._observers.clear()

    def notify(self) -> None:
        items, total = self._items, self._total
        for observer in list(self._observers):
            observer(items, total)
