"""Data source fake whose calls stay pending until the test settles them."""

import asyncio
from typing import Any, List, Optional


class PendingCall:
    """One outstanding ``load_items(offset)`` call."""

    def __init__(self, offset: int):
        self.offset = offset
        self._event = asyncio.Event()
        self._response: Any = None
        self._error: Optional[BaseException] = None

    def resolve(self, items: List[Any], total: int, offset: Optional[int] = None):
        self._response = {
            "items": list(items),
            "total": total,
            "offset": self.offset if offset is None else offset,
        }
        self._event.set()

    def reject(self, error: Optional[BaseException] = None):
        self._error = error or ConnectionError("server unavailable")
        self._event.set()

    async def wait(self) -> Any:
        await self._event.wait()
        if self._error is not None:
            raise self._error
        return self._response


class GatedDataSource:
    """Records every call and blocks it until resolved or rejected."""

    def __init__(self):
        self.calls: List[PendingCall] = []

    async def __call__(self, offset: int) -> Any:
        call = PendingCall(offset)
        self.calls.append(call)
        return await call.wait()

    @property
    def offsets(self) -> List[int]:
        return [call.offset for call in self.calls]

    @property
    def last(self) -> PendingCall:
        return self.calls[-1]


async def settle(rounds: int = 10) -> None:
    """Let scheduled tasks run up to their next blocking await."""
    for _ in range(rounds):
        await asyncio.sleep(0)
