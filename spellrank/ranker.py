"""Top-k ranking of dictionary words by edit distance to a query.

Every non-empty dictionary entry is scored with :func:`~.distance.distance`.
The result holds the ``k`` entries with the smallest distance, ascending;
equal distances keep their original dictionary order.  Scored entries are
carried as ``(distance, index, word)`` triples so a bounded heap selection
(and the merge of per-worker partial results) reproduces exactly what a
stable sort of the whole scored set followed by truncation would give.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Iterator, List, Optional, Tuple

from .distance import distance
from .exceptions import InvalidArgument, ResourceExceeded
from .logger import get_logger
from .models import Suggestion

logger = get_logger(__name__)

DEFAULT_TOP_K = 10

_Scored = Tuple[int, int, str]


def _check_count(name: str, value, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidArgument(f"{name} must be >= {minimum}, got {value}")
    return value


def _score_range(query: str, words: Sequence[str], start: int, stop: int) -> Iterator[_Scored]:
    for index in range(start, stop):
        word = words[index]
        if not word:
            continue
        yield distance(query, word), index, word


def _top_k(query: str, words: Sequence[str], start: int, stop: int, k: int) -> List[_Scored]:
    return heapq.nsmallest(k, _score_range(query, words, start, stop))


def _chunk_bounds(total: int, parts: int) -> List[Tuple[int, int]]:
    size = -(-total // parts)
    return [(start, min(start + size, total)) for start in range(0, total, size)]


def rank(
    query: str,
    dictionary: Iterable[str],
    k: int = DEFAULT_TOP_K,
    *,
    workers: int = 1,
    max_query_length: Optional[int] = None,
) -> List[Suggestion]:
    """Return up to *k* :class:`Suggestion` items closest to *query*.

    *dictionary* is any ordered collection of words; blank entries are
    skipped and duplicates are scored independently.  ``workers > 1``
    spreads the scoring over a thread pool without changing the result.

    Raises ``InvalidArgument`` for a negative *k* or ``workers < 1`` and
    ``ResourceExceeded`` when *query* is longer than *max_query_length*.
    """
    k = _check_count("k", k, 0)
    workers = _check_count("workers", workers, 1)
    if max_query_length is not None and len(query) > max_query_length:
        raise ResourceExceeded(
            f"query is {len(query)} characters long, limit is {max_query_length}"
        )
    if k == 0:
        return []

    words = dictionary if isinstance(dictionary, Sequence) else list(dictionary)
    total = len(words)
    if workers == 1 or total < workers * 2:
        best = _top_k(query, words, 0, total, k)
    else:
        bounds = _chunk_bounds(total, workers)
        logger.debug("Scoring %d words for %r in %d chunks", total, query, len(bounds))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="rank") as pool:
            partials = list(pool.map(lambda b: _top_k(query, words, b[0], b[1], k), bounds))
        best = heapq.nsmallest(k, itertools.chain.from_iterable(partials))

    logger.debug("Ranked %d words for %r, returning %d", total, query, len(best))
    return [Suggestion(word, dist) for dist, _index, word in best]
