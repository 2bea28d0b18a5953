from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Optional

from .logger import DEFAULT_LOG_LEVEL, VALID_LEVELS, get_logger

logger = get_logger(__name__)

DEFAULT_WORD_LIST_URL = "https://raw.githubusercontent.com/dwyl/english-words/master/words.txt"

DEFAULT_CONFIG: Dict = {
    # Local cache of the word list; downloaded from word_list_url when missing.
    "word_list_path": "words.txt",
    "word_list_url": DEFAULT_WORD_LIST_URL,
    "download_timeout": 30,
    "top_k": 10,
    "workers": 1,
    # null => no limit on query length
    "max_query_length": None,
    "log_level": DEFAULT_LOG_LEVEL,
}

CONFIG_PATH = Path(os.environ.get("SPELLRANK_CONFIG") or Path.home() / ".spellrank" / "config.json")


def _config_path(path: Optional[Path]) -> Path:
    return Path(path) if path is not None else CONFIG_PATH


def _read_config_json(path: Path) -> Dict:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not an object", path)
        return {}
    return data


def _deep_copy_defaults() -> Dict:
    return json.loads(json.dumps(DEFAULT_CONFIG))


def _clamped_int(raw, default: int, low: int, high: int) -> int:
    if isinstance(raw, bool):
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return max(low, min(value, high))


def normalize_config(raw_cfg: Dict) -> Dict:
    """Merge *raw_cfg* over the defaults, dropping unknown keys and clamping numbers."""
    raw = raw_cfg if isinstance(raw_cfg, dict) else {}
    merged = _deep_copy_defaults()
    merged.update({key: val for key, val in raw.items() if key in DEFAULT_CONFIG})
    merged["word_list_path"] = normalize_text(merged.get("word_list_path"), DEFAULT_CONFIG["word_list_path"])
    merged["word_list_url"] = normalize_text(merged.get("word_list_url"), DEFAULT_WORD_LIST_URL)
    merged["download_timeout"] = _clamped_int(merged.get("download_timeout"), DEFAULT_CONFIG["download_timeout"], 1, 300)
    merged["top_k"] = _clamped_int(merged.get("top_k"), DEFAULT_CONFIG["top_k"], 0, 1000)
    merged["workers"] = _clamped_int(merged.get("workers"), DEFAULT_CONFIG["workers"], 1, 64)
    merged["max_query_length"] = normalize_max_query_length(merged.get("max_query_length"))
    merged["log_level"] = normalize_log_level(merged.get("log_level"))
    return merged


def _write_json(path: Path, payload: Dict):
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)


def get_config(path: Optional[Path] = None) -> Dict:
    """Load the stored config merged over the defaults, normalized."""
    cfg_path = _config_path(path)
    stored = _read_config_json(cfg_path)
    logger.debug("Loaded config from %s (%d stored keys)", cfg_path, len(stored))
    return normalize_config(stored)


def save_config(updates: Dict, path: Optional[Path] = None) -> Dict:
    cfg_path = _config_path(path)
    cfg = get_config(cfg_path)
    cfg.update(updates)
    cfg = normalize_config(cfg)
    _write_json(cfg_path, cfg)
    logger.info("Config saved to %s", cfg_path)
    return cfg


def normalize_text(raw, default: str) -> str:
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    return default


def normalize_max_query_length(raw) -> Optional[int]:
    """``None`` (unlimited) or a positive integer."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


def normalize_log_level(raw) -> str:
    if isinstance(raw, str):
        level = raw.strip().upper()
        if level in VALID_LEVELS:
            return level
    return DEFAULT_LOG_LEVEL
