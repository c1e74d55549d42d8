"""Configuration management."""

from .settings import AppSettings, ScrollSettings, TriggerSettings

__all__ = ["AppSettings", "ScrollSettings", "TriggerSettings"]
