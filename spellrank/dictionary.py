"""Word-list loading: download once, cache on disk, parse one word per line."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Union

from . import http_client
from .config import DEFAULT_WORD_LIST_URL
from .exceptions import DictionaryError
from .logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def ensure_word_list(
    path: PathLike,
    url: str = DEFAULT_WORD_LIST_URL,
    timeout: Optional[int] = None,
) -> Path:
    """Return *path*, downloading the word list from *url* first if it is missing.

    Raises ``FetchError`` when the download fails and ``DictionaryError``
    when the file cannot be written.
    """
    target = Path(path)
    if target.exists():
        return target
    logger.warning("%s does not exist. Downloading the word list from %s", target, url)
    text = http_client.get_text(url, timeout=timeout, accept="text/plain")
    partial = target.with_name(target.name + ".part")
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        partial.write_text(text, encoding="utf-8")
        os.replace(partial, target)
    except OSError as e:
        # Only a complete download ever lands at target.
        partial.unlink(missing_ok=True)
        raise DictionaryError(f"Cannot write word list to {target}: {e}") from e
    logger.info("Saved word list to %s (%d bytes)", target, len(text))
    return target


def parse_word_list(text: str) -> List[str]:
    """Split *text* into words: one per line, trimmed, blank lines dropped.

    File order is preserved and duplicates are kept.
    """
    words: List[str] = []
    for line in text.split("\n"):
        word = line.strip()
        if word:
            words.append(word)
    return words


def load_dictionary(path: PathLike) -> List[str]:
    target = Path(path)
    try:
        text = target.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise DictionaryError(f"Cannot read word list {target}: {e}") from e
    words = parse_word_list(text)
    logger.info("Dictionary loaded from %s with %d words", target, len(words))
    return words
