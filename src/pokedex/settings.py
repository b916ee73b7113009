from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from datetime import datetime
from importlib import resources
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass
class DisplaySettings:
    short_date_format: str = "%m/%d/%y"
    medium_date_format: str = "%b %d, %Y"

    def short_date(self, value: datetime) -> str:
        return value.strftime(self.short_date_format)

    def medium_date(self, value: datetime) -> str:
        return value.strftime(self.medium_date_format)


@dataclass
class StatSettings:
    min: int = 0
    max: int = 999

    def clamp(self, value: int) -> int:
        return max(self.min, min(self.max, int(value)))


@dataclass
class Settings:
    display: DisplaySettings = field(default_factory=DisplaySettings)
    stats: StatSettings = field(default_factory=StatSettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        display = DisplaySettings(**data.get("display", {}))
        stats = StatSettings(**data.get("stats", {}))
        if stats.min > stats.max:
            raise ValueError(f"stats.min ({stats.min}) must not exceed stats.max ({stats.max})")
        return Settings(display=display, stats=stats)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults and optional user override file.

        If user_path is provided and exists, overlay values onto defaults.
        """
        try:
            with resources.files("pokedex.config").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings
