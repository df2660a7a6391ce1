"""
Plugin facade: handler registration, request dispatch and result building.
"""

from __future__ import annotations

import logging
import shutil
import sys
from typing import Any, Callable

from .config import PluginPaths, load_manifest, resolve_plugin_dir
from .magic import MagicActionRegistry, Polarity, is_magic_query, resolve_magic
from .models import Item, RpcRequest
from .results import ResultList
from .search import RankOptions, SortBy, rank_results
from .shell import open_folder, open_url
from .storage import PluginStorage


logger = logging.getLogger(__name__)

Handler = Callable[..., Any]


class UnknownCommandError(KeyError):
    """Raised when a request names a handler that was never registered."""


class Plugin:
    """
    Entry point for a Wox plugin.

    Example:
        >>> plugin = Plugin()
        >>> def query(plugin, text):
        ...     plugin.add("Github", "How people build software", "Images/gh.png",
        ...                "openUrl", "https://github.com/", False)
        ...     plugin.sort(text)
        ...     print(plugin.results())
        >>> plugin.register("query", query)
        >>> plugin.run()
    """

    def __init__(
        self,
        help_url: str = "",
        *,
        plugin_dir: str | None = None,
        app_data: str | None = None,
    ) -> None:
        resolved_dir = resolve_plugin_dir(plugin_dir)
        self.info = load_manifest(resolved_dir)
        self.paths = PluginPaths.resolve(
            self.info, plugin_dir=resolved_dir, app_data=app_data
        )
        self.storage = PluginStorage(
            settings_dir=self.paths.settings_dir, cache_dir=self.paths.cache_dir
        )
        self.settings: dict[str, Any] = self.storage.load_settings()
        self.help_url = help_url
        self.data = ResultList()
        self.magic = MagicActionRegistry()
        self._handlers: dict[str, Handler] = {}
        self._register_magic_actions()

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def register(self, name: str, handler: Handler) -> None:
        self._handlers[name] = handler

    def call(self, name: str, *params: str) -> Any:
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownCommandError(name)
        logger.debug("Calling %s with %d params", name, len(params))
        return handler(self, *params)

    def run(self, raw_request: str | None = None) -> Any:
        """Parse the launcher request and answer it."""
        if raw_request is None:
            raw_request = sys.argv[1]
        request = RpcRequest.model_validate_json(raw_request)
        params = request.string_parameters()

        if params and is_magic_query(params[0]):
            self.data = resolve_magic(params[0], self.magic)
            print(self.results())
            return None
        return self.call(request.method, *params)

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def add(
        self,
        title: str,
        subtitle: str = "",
        icon: str = "",
        command: str = "",
        parameter: str = "",
        keep_open_after_action: bool = True,
    ) -> Item:
        item = Item.build(title, subtitle, icon, command, parameter, keep_open_after_action)
        self.data.append(item)
        return item

    def insert(
        self,
        title: str,
        subtitle: str = "",
        icon: str = "",
        command: str = "",
        parameter: str = "",
        keep_open_after_action: bool = True,
        position: int = 0,
    ) -> Item:
        item = Item.build(title, subtitle, icon, command, parameter, keep_open_after_action)
        self.data.insert(item, position)
        return item

    def sort(
        self,
        query: str,
        sort_by: SortBy | str = SortBy.TITLE_SUBTITLE,
        min_score: float = 0.0,
        max_results: int = 0,
    ) -> None:
        """Fuzzy-rank the current results; a blank query leaves them as added."""
        options = RankOptions(
            sort_by=sort_by, min_score=min_score, max_results=max_results
        )
        if not query.strip():
            return
        rank_results(self.data, query, options=options)

    def results(self) -> str:
        return self.data.to_response().to_wire()

    # ------------------------------------------------------------------
    # Settings and cache
    # ------------------------------------------------------------------

    def save_settings(self) -> None:
        self.storage.save_settings(self.settings)

    def load_cache(self, name: str) -> Any:
        return self.storage.load_cache(name)

    def save_cache(self, name: str, data: Any) -> None:
        self.storage.save_cache(name, data)

    def is_cache_old(self, name: str, max_age: float = 0) -> bool:
        return self.storage.is_cache_old(name, max_age)

    # ------------------------------------------------------------------
    # Magic actions
    # ------------------------------------------------------------------

    def _add_magic(
        self,
        id: str,
        description: str,
        command: str,
        handler: Handler,
        polarity: Polarity = Polarity.POSITIVE,
    ) -> None:
        self.magic.add(id, description, command, polarity)
        self.register(command, handler)

    def _register_magic_actions(self) -> None:
        if self.help_url:
            self._add_magic("help", "Open plugin help URL in browser", "openHelp", _open_help)
        self._add_magic("cache", "Open plugin's cache dir", "openCache", _open_cache)
        self._add_magic("settings", "Open plugin's settings dir", "openSettings", _open_settings)
        self._add_magic(
            "delcache", "Delete plugin's cached data", "deleteCache", _delete_cache, Polarity.NEGATIVE
        )
        self._add_magic(
            "delsettings", "Delete plugin's settings", "deleteSettings", _delete_settings, Polarity.NEGATIVE
        )
        self._add_magic("data", "Open plugin's dir", "openData", _open_data)


def _open_help(plugin: Plugin, *params: str) -> None:
    open_url(plugin.help_url)


def _open_data(plugin: Plugin, *params: str) -> None:
    open_folder(str(plugin.paths.plugin_dir))


def _open_cache(plugin: Plugin, *params: str) -> None:
    open_folder(str(plugin.paths.cache_dir))


def _open_settings(plugin: Plugin, *params: str) -> None:
    open_folder(str(plugin.paths.settings_dir))


def _delete_cache(plugin: Plugin, *params: str) -> None:
    if plugin.paths.cache_dir.exists():
        shutil.rmtree(plugin.paths.cache_dir)


def _delete_settings(plugin: Plugin, *params: str) -> None:
    if plugin.paths.settings_dir.exists():
        shutil.rmtree(plugin.paths.settings_dir)
    plugin.settings = {}
