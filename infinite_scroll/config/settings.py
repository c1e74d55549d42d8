"""Controller settings configuration."""

import logging
from dataclasses import dataclass
from typing import Optional

import yaml

logger = logging.getLogger("InfiniteScroll.Settings")

DEFAULT_CONFIG_PATH = "infinite_scroll.yml"


@dataclass(frozen=True)
class ScrollSettings:
    reverse: bool = False
    discard_stale_responses: bool = False
    require_key_extractor: bool = False


@dataclass(frozen=True)
class TriggerSettings:
    threshold_px: int = 50
    enabled: bool = True


@dataclass(frozen=True)
class AppSettings:
    scroll: ScrollSettings
    trigger: TriggerSettings

    @classmethod
    def defaults(cls) -> "AppSettings":
        return cls(scroll=ScrollSettings(), trigger=TriggerSettings())

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppSettings":
        if path is None:
            path = DEFAULT_CONFIG_PATH

        config = cls._load_yaml(path)
        return cls(
            scroll=ScrollSettings(
                reverse=bool(config.get("reverse", False)),
                discard_stale_responses=bool(
                    config.get("discard_stale_responses", False)
                ),
                require_key_extractor=bool(
                    config.get("require_key_extractor", False)
                ),
            ),
            trigger=TriggerSettings(
                threshold_px=int(config.get("threshold_px", 50)),
                enabled=bool(config.get("trigger_enabled", True)),
            ),
        )

    @staticmethod
    def _load_yaml(path: str) -> dict:
        try:
            with open(path, "r") as f:
                config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            return {}
        except yaml.YAMLError as e:
            logger.warning(f"Ignoring unparsable settings file {path}: {e}")
            return {}

        if not isinstance(config, dict):
            logger.warning(f"Ignoring settings file {path}: expected a mapping")
            return {}
        return config
