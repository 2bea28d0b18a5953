"""Command-line front end: read a word, print the closest dictionary matches."""

from __future__ import annotations

import argparse
import sys
from typing import Dict, List, Optional, Sequence

from .config import get_config, normalize_config, save_config
from .dictionary import ensure_word_list, load_dictionary
from .exceptions import SpellRankError
from .logger import VALID_LEVELS, get_logger, set_log_level
from .models import Suggestion
from .ranker import rank

logger = get_logger(__name__)

PROMPT = "Enter a word? "


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="spellrank",
        description="Suggest the closest dictionary words by edit distance.",
    )
    p.add_argument("word", nargs="?", help="Word to look up (prompted for when omitted)")
    p.add_argument("-k", "--top", type=int, default=None, help="Number of suggestions to print")
    p.add_argument("-d", "--dictionary", default=None, help="Path of the word list (one word per line)")
    p.add_argument("--url", default=None, help="Where to download the word list from when it is missing")
    p.add_argument("-w", "--workers", type=int, default=None, help="Threads used for scoring")
    p.add_argument("--log-level", choices=VALID_LEVELS, type=str.upper, default=None)
    p.add_argument("--config", default=None, help="Path of the JSON config file")
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Store the given options in the config file for later runs",
    )
    return p


def _overrides(args: argparse.Namespace) -> Dict:
    values = {
        "top_k": args.top,
        "word_list_path": args.dictionary,
        "word_list_url": args.url,
        "workers": args.workers,
        "log_level": args.log_level,
    }
    return {key: val for key, val in values.items() if val is not None}


def _apply_overrides(cfg: Dict, overrides: Dict) -> Dict:
    merged = dict(cfg)
    merged.update(overrides)
    return normalize_config(merged)


def _read_word() -> str:
    try:
        return input(PROMPT)
    except EOFError:
        print()
        raise SpellRankError("no word given") from None


def format_suggestions(word: str, suggestions: List[Suggestion], k: int) -> str:
    lines = [f"Top {k} suggestions for '{word}':"]
    lines.extend(s.preview_text() for s in suggestions)
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        overrides = _overrides(args)
        if args.save_config:
            save_config(overrides, args.config)
        cfg = _apply_overrides(get_config(args.config), overrides)
        set_log_level(cfg["log_level"])

        path = ensure_word_list(cfg["word_list_path"], cfg["word_list_url"], cfg["download_timeout"])
        dictionary = load_dictionary(path)
        print(f"Dictionary loaded with {len(dictionary)} words")

        word = args.word if args.word is not None else _read_word()
        suggestions = rank(
            word,
            dictionary,
            cfg["top_k"],
            workers=cfg["workers"],
            max_query_length=cfg["max_query_length"],
        )
    except SpellRankError as e:
        logger.error("spellrank failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(format_suggestions(word, suggestions, cfg["top_k"]))
    return 0
