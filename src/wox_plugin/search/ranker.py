"""
Ranking pipeline: sort, score-threshold filter and truncation of a result list.
"""

from __future__ import annotations

import logging

from ..results import ResultList
from .options import RankOptions, SortBy
from .scorer import score


logger = logging.getLogger(__name__)


class EmptyQueryError(ValueError):
    """Raised when ranking is requested for a zero-length query."""


def rank_results(
    results: ResultList,
    query: str,
    *,
    sort_by: SortBy | str = SortBy.TITLE_SUBTITLE,
    min_score: float = 0.0,
    max_results: int = 0,
    options: RankOptions | None = None,
) -> ResultList:
    """
    Rank ``results`` in place against ``query`` and return it.

    Items are ordered by descending score of the text selected by
    ``sort_by``. Ties keep their previous relative order. With a non-zero
    ``min_score`` only items scoring strictly above it survive, and a
    non-zero ``max_results`` keeps at most that many items.

    Invalid options and an empty query raise before the list is touched.
    """
    if options is None:
        options = RankOptions.create(
            sort_by=sort_by, min_score=min_score, max_results=max_results
        )
    if not query:
        raise EmptyQueryError("Cannot rank results against an empty query.")

    query = query.lower()
    scored = [
        (score(query, options.sort_by.text_of(item)), item) for item in results
    ]
    scored.sort(key=lambda pair: pair[0], reverse=True)

    if options.min_score != 0:
        scored = [pair for pair in scored if pair[0] > options.min_score]
    if options.max_results != 0 and len(scored) >= options.max_results:
        scored = scored[: options.max_results]

    logger.debug(
        "Ranked %d items for %r (sort_by=%s), kept %d",
        len(results),
        query,
        options.sort_by.value,
        len(scored),
    )
    results.replace(item for _, item in scored)
    return results
