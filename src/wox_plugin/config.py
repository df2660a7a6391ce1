"""
Path resolution for plugin, settings and cache directories.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from .models import PluginInfo


DEFAULT_APP_DATA = "~/AppData/Roaming"
ENV_APP_DATA = "APPDATA"
MANIFEST_NAME = "plugin.json"


def resolve_app_data(override_path: str | None = None) -> Path:
    """
    Resolve the application-data root.

    Precedence:
    1) explicit override_path
    2) APPDATA
    3) default path
    """
    raw_path = override_path or os.getenv(ENV_APP_DATA) or DEFAULT_APP_DATA
    return Path(raw_path).expanduser().resolve()


def resolve_plugin_dir(override_path: str | None = None) -> Path:
    """Plugin directory: explicit override or the running script's folder."""
    if override_path:
        return Path(override_path).expanduser().resolve()
    return Path(sys.argv[0]).resolve().parent


def load_manifest(plugin_dir: Path) -> PluginInfo:
    manifest_path = plugin_dir / MANIFEST_NAME
    return PluginInfo.model_validate_json(manifest_path.read_text(encoding="utf-8"))


@dataclass(frozen=True)
class PluginPaths:
    """Directories a plugin reads from and writes to."""

    plugin_dir: Path
    settings_dir: Path
    cache_dir: Path

    @classmethod
    def resolve(
        cls,
        info: PluginInfo,
        *,
        plugin_dir: Path,
        app_data: str | None = None,
    ) -> "PluginPaths":
        root = resolve_app_data(app_data) / "Wox"
        settings_dir = root / "Settings" / "Plugins" / info.dir_name
        cache_dir = root / "Cache" / info.dir_name
        settings_dir.mkdir(parents=True, exist_ok=True)
        cache_dir.mkdir(parents=True, exist_ok=True)
        return cls(plugin_dir=plugin_dir, settings_dir=settings_dir, cache_dir=cache_dir)
