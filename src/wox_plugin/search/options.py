"""
Ranking options and their validation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from ..models import Item


class SortBy(str, Enum):
    """Which item text is scored against the query."""

    TITLE = "title"
    SUBTITLE = "subtitle"
    TITLE_SUBTITLE = "title_subtitle"

    def text_of(self, item: Item) -> str:
        if self is SortBy.TITLE:
            return item.title
        if self is SortBy.SUBTITLE:
            return item.subtitle
        return item.title_and_subtitle


class RankOptionsError(ValueError):
    """Raised when ranking options are invalid."""


class UnknownSortFieldError(RankOptionsError):
    """Raised for a sort field outside :class:`SortBy`."""


class InvalidOptionError(RankOptionsError):
    """Raised for out-of-range ``min_score`` / ``max_results`` values."""


def parse_sort_by(value: SortBy | str) -> SortBy:
    if isinstance(value, SortBy):
        return value
    try:
        return SortBy(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(member.value for member in SortBy)
        raise UnknownSortFieldError(
            f"Unknown sort field {value!r}. Allowed fields: {allowed}"
        ) from None


@dataclass(frozen=True)
class RankOptions:
    """Options for one ranking call.

    ``min_score`` of 0 disables score filtering and ``max_results`` of 0
    disables truncation.
    """

    sort_by: SortBy = SortBy.TITLE_SUBTITLE
    min_score: float = 0.0
    max_results: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "sort_by", parse_sort_by(self.sort_by))
        min_score = self.min_score
        if isinstance(min_score, bool) or not isinstance(min_score, (int, float)):
            raise InvalidOptionError(f"min_score must be a number: {min_score!r}")
        if math.isnan(min_score):
            raise InvalidOptionError("min_score must not be NaN")
        max_results = self.max_results
        if isinstance(max_results, bool) or not isinstance(max_results, int):
            raise InvalidOptionError(f"max_results must be an integer: {max_results!r}")
        if max_results < 0:
            raise InvalidOptionError(f"max_results must be >= 0: {max_results}")
        object.__setattr__(self, "min_score", float(min_score))

    @classmethod
    def create(
        cls,
        *,
        sort_by: SortBy | str = SortBy.TITLE_SUBTITLE,
        min_score: float = 0.0,
        max_results: int = 0,
    ) -> "RankOptions":
        return cls(sort_by=sort_by, min_score=min_score, max_results=max_results)
