"""
Built-in command palette ("magic actions") reached with the ``plugin:`` prefix.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .models import Item
from .results import ResultList
from .search import SortBy, rank_results


logger = logging.getLogger(__name__)

MAGIC_PREFIX = "plugin:"
INFO_ICON = "Images/info.png"
DELETE_ICON = "Images/delete.png"
MAGIC_MIN_SCORE = 10.0


class Polarity(str, Enum):
    """Only decides which icon a magic action is shown with."""

    POSITIVE = "positive"
    NEGATIVE = "negative"

    @property
    def icon(self) -> str:
        return DELETE_ICON if self is Polarity.NEGATIVE else INFO_ICON


@dataclass(frozen=True)
class MagicAction:
    """A maintenance command listed by the palette."""

    id: str
    description: str
    command: str
    polarity: Polarity = Polarity.POSITIVE

    def to_item(self) -> Item:
        return Item.build(
            self.description, icon=self.polarity.icon, command=self.command
        )


class MagicActionRegistry:
    """Registered magic actions keyed by id, in registration order."""

    def __init__(self) -> None:
        self._actions: dict[str, MagicAction] = {}

    def add(
        self,
        id: str,
        description: str,
        command: str,
        polarity: Polarity = Polarity.POSITIVE,
    ) -> MagicAction:
        action = MagicAction(
            id=id, description=description, command=command, polarity=polarity
        )
        self._actions[id] = action
        return action

    def get(self, id: str) -> MagicAction | None:
        return self._actions.get(id)

    def snapshot(self) -> tuple[MagicAction, ...]:
        return tuple(self._actions.values())

    def __contains__(self, id: object) -> bool:
        return id in self._actions

    def __iter__(self) -> Iterator[MagicAction]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._actions)


def is_magic_query(query: str) -> bool:
    return query.strip().startswith(MAGIC_PREFIX)


def resolve_magic(query: str, registry: MagicActionRegistry) -> ResultList:
    """
    Build the palette result list for a ``plugin:`` query.

    Every registered action is listed. A non-empty remainder after the prefix
    ranks them by title and drops weak matches. An empty outcome gets a
    single "No Results" placeholder.
    """
    if not is_magic_query(query):
        raise ValueError(f"Not a palette query: {query!r}")
    remainder = query.strip()[len(MAGIC_PREFIX):]
    results = ResultList(action.to_item() for action in registry)

    if remainder:
        rank_results(
            results, remainder, sort_by=SortBy.TITLE, min_score=MAGIC_MIN_SCORE
        )
    if len(results) == 0:
        results.append(Item.build("No Results", icon=INFO_ICON))

    logger.debug("Palette query %r resolved to %d items", remainder, len(results))
    return results
