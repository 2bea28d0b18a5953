"""
spellrank: approximate string matching against a word list.

Ranks every word of a dictionary by Levenshtein distance to a query and
returns the closest matches:

    >>> from spellrank import rank
    >>> rank("cat", ["cat", "cats", "car", "care", "dog"], k=3)
    [Suggestion(word='cat', distance=0), Suggestion(word='cats', distance=1), Suggestion(word='car', distance=1)]

Loading the word list (``spellrank.dictionary``) and the command line
(``python -m spellrank``) are thin layers around :func:`rank`.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .distance import distance
from .exceptions import (
    DictionaryError,
    FetchError,
    InvalidArgument,
    MissingDependencyError,
    ResourceExceeded,
    SpellRankError,
)
from .models import Suggestion
from .ranker import DEFAULT_TOP_K, rank

__all__ = [
    "DEFAULT_TOP_K",
    "DictionaryError",
    "FetchError",
    "InvalidArgument",
    "MissingDependencyError",
    "ResourceExceeded",
    "SpellRankError",
    "Suggestion",
    "distance",
    "rank",
]
