"""Protocol definitions for the controller's collaborators."""

from typing import Any, Awaitable, Mapping, Protocol, Union


class DataSourcePort(Protocol):
    def __call__(
        self, offset: int
    ) -> Union[Awaitable[Mapping[str, Any]], Mapping[str, Any]]: ...


class TriggerPort(Protocol):
    def attach(self) -> None: ...

    def detach(self) -> None: ...
