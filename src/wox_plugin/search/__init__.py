"""Fuzzy scoring and ranking of plugin results."""

from .options import (
    InvalidOptionError,
    RankOptions,
    RankOptionsError,
    SortBy,
    UnknownSortFieldError,
    parse_sort_by,
)
from .ranker import EmptyQueryError, rank_results
from .scorer import capital_initials, score, split_atoms

__all__ = [
    "InvalidOptionError",
    "RankOptions",
    "RankOptionsError",
    "SortBy",
    "UnknownSortFieldError",
    "parse_sort_by",
    "EmptyQueryError",
    "rank_results",
    "capital_initials",
    "score",
    "split_atoms",
]
