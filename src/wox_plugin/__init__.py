"""
wox_plugin - helpers for writing Wox launcher plugins.

This package loads the plugin manifest, settings and cache, dispatches
launcher requests to registered handlers, and fuzzy-ranks the results a
plugin returns. It also provides the built-in ``plugin:`` command palette.

Example usage:
    >>> from wox_plugin import Plugin
    >>> plugin = Plugin()
    >>> def query(plugin, text):
    ...     plugin.add("Github", "How people build software", "Images/gh.png",
    ...                "openUrl", "https://github.com/", False)
    ...     plugin.sort(text, min_score=10)
    ...     print(plugin.results())
    >>> plugin.register("query", query)
    >>> plugin.run()
"""

from .magic import (
    MAGIC_PREFIX,
    MagicAction,
    MagicActionRegistry,
    Polarity,
    is_magic_query,
    resolve_magic,
)
from .models import Action, Item, PluginInfo, Response, RpcRequest
from .plugin import Plugin, UnknownCommandError
from .results import InvalidPositionError, ResultList
from .search import (
    EmptyQueryError,
    InvalidOptionError,
    RankOptions,
    RankOptionsError,
    SortBy,
    UnknownSortFieldError,
    rank_results,
    score,
)

__all__ = [
    # Plugin
    "Plugin",
    "UnknownCommandError",
    # Models
    "Action",
    "Item",
    "PluginInfo",
    "Response",
    "RpcRequest",
    # Results
    "ResultList",
    "InvalidPositionError",
    # Ranking
    "score",
    "rank_results",
    "RankOptions",
    "SortBy",
    "RankOptionsError",
    "UnknownSortFieldError",
    "InvalidOptionError",
    "EmptyQueryError",
    # Command palette
    "MAGIC_PREFIX",
    "MagicAction",
    "MagicActionRegistry",
    "Polarity",
    "is_magic_query",
    "resolve_magic",
]
