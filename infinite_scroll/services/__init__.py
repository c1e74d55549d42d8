"""Data source services."""

from .data_source import DataSourceService, Page
from .memory_source import InMemoryDataSource

__all__ = ["DataSourceService", "InMemoryDataSource", "Page"]
