"""Custom exception hierarchy for spellrank.

Using specific exceptions instead of bare ``RuntimeError`` makes it easier
to catch expected errors (bad arguments, network issues, missing word list)
without accidentally swallowing programming mistakes.
"""

from __future__ import annotations


class SpellRankError(Exception):
    """Base exception for all spellrank errors."""


class InvalidArgument(SpellRankError, ValueError):
    """A caller passed an argument outside its contract (e.g. ``k < 0``)."""


class ResourceExceeded(SpellRankError):
    """An input is larger than the configured resource limit."""


class FetchError(SpellRankError):
    """Failed to download the word list."""


class DictionaryError(SpellRankError):
    """The word-list file is missing or cannot be read."""


class MissingDependencyError(SpellRankError):
    """A required third-party module (requests) is not installed."""
