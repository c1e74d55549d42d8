"""Paginated list controller for infinitely scrolling views."""

from .exceptions import ConfigurationError, DataSourceFailure, InfiniteScrollError
from .managers import InfiniteScrollHandle, LoadState
from .services import InMemoryDataSource, Page

__all__ = [
    "ConfigurationError",
    "DataSourceFailure",
    "InMemoryDataSource",
    "InfiniteScrollError",
    "InfiniteScrollHandle",
    "LoadState",
    "Page",
]
