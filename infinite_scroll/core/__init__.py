"""Core interfaces and dependency injection."""

from .protocols import DataSourcePort, TriggerPort

__all__ = ["DataSourcePort", "TriggerPort"]
