"""
JSON persistence for plugin settings and cached data.
"""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.json"


class PluginStorage:
    """Reads and writes settings.json and named cache files."""

    def __init__(self, *, settings_dir: Path, cache_dir: Path) -> None:
        self.settings_dir = settings_dir
        self.cache_dir = cache_dir

    @property
    def settings_file(self) -> Path:
        return self.settings_dir / SETTINGS_FILE

    def load_settings(self) -> dict[str, Any]:
        if not self.settings_file.exists():
            return {}
        return json.loads(self.settings_file.read_text(encoding="utf-8"))

    def save_settings(self, settings: dict[str, Any]) -> None:
        self.settings_dir.mkdir(parents=True, exist_ok=True)
        self.settings_file.write_text(json.dumps(settings, indent=2), encoding="utf-8")
        logger.debug("Saved settings to %s", self.settings_file)

    def cache_file(self, name: str) -> Path:
        return self.cache_dir / f"{name}.json"

    def load_cache(self, name: str) -> Any:
        return json.loads(self.cache_file(name).read_text(encoding="utf-8"))

    def save_cache(self, name: str, data: Any) -> None:
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        path = self.cache_file(name)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        logger.debug("Saved cache %r to %s", name, path)

    def cache_age(self, name: str) -> float:
        """Seconds since the cache file was written, 0 when it does not exist."""
        path = self.cache_file(name)
        if not path.exists():
            return 0.0
        return time.time() - path.stat().st_mtime

    def is_cache_old(self, name: str, max_age: float = 0) -> bool:
        age = self.cache_age(name)
        if age == 0:
            return True
        return age > max_age
