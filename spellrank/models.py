from __future__ import annotations

from typing import NamedTuple


class Suggestion(NamedTuple):
    """A dictionary word paired with its edit distance to the query."""

    word: str
    distance: int

    def preview_text(self) -> str:
        return f"{self.word} (Distance: {self.distance})"
