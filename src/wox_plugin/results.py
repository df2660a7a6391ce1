"""
Ordered result container handed to the ranking pipeline and the serializer.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from .models import Item, Response


class InvalidPositionError(IndexError):
    """Raised when an insert position falls outside ``[0, len]``."""


class ResultList:
    """Mutable, ordered list of result items.

    Insertion order is the display order before ranking and the tie-break
    order after it. Duplicate titles are allowed.
    """

    def __init__(self, items: Iterable[Item] | None = None) -> None:
        self._items: list[Item] = list(items) if items is not None else []

    def append(self, item: Item) -> None:
        self._items.append(item)

    def insert(self, item: Item, position: int = 0) -> None:
        if position < 0 or position > len(self._items):
            raise InvalidPositionError(
                f"Insert position {position} outside [0, {len(self._items)}]"
            )
        self._items.insert(position, item)

    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    def titles(self) -> list[str]:
        return [item.title for item in self._items]

    def replace(self, items: Iterable[Item]) -> None:
        """Swap the whole content in one step."""
        self._items[:] = list(items)

    def clear(self) -> None:
        self._items.clear()

    def to_response(self) -> Response:
        return Response(result=list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Item:
        return self._items[index]
