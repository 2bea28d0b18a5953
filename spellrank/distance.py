"""Levenshtein edit distance (Wagner–Fischer, rolling rows).

Only two rows of the dynamic-programming table are kept alive, and the
shorter string always indexes the columns, so working memory is
``O(min(len(s1), len(s2)))`` while time stays ``O(len(s1) * len(s2))``.
"""

from __future__ import annotations

from typing import List


def distance(s1: str, s2: str) -> int:
    """Return the minimum number of single-character insertions, deletions
    or substitutions needed to turn *s1* into *s2*.

    Every code point counts as one character; no case folding or Unicode
    normalization is applied.

    >>> distance("kitten", "sitting")
    3
    """
    if s1 == s2:
        return 0
    # The metric is symmetric: let the shorter string index the columns.
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    if not s2:
        return len(s1)

    prev: List[int] = list(range(len(s2) + 1))
    cur: List[int] = [0] * (len(s2) + 1)
    for i, c1 in enumerate(s1, start=1):
        cur[0] = i
        for j, c2 in enumerate(s2, start=1):
            cost = 0 if c1 == c2 else 1
            cur[j] = min(
                prev[j] + 1,  # deletion
                cur[j - 1] + 1,  # insertion
                prev[j - 1] + cost,  # substitution / match
            )
        prev, cur = cur, prev
    return prev[-1]
