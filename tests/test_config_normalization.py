from __future__ import annotations

import json

import spellrank.config as config_mod


def test_get_config_defaults_when_file_missing(tmp_path):
    cfg = config_mod.get_config(tmp_path / "missing.json")
    assert cfg == config_mod.DEFAULT_CONFIG
    assert cfg is not config_mod.DEFAULT_CONFIG


def test_get_config_normalizes_stored_values(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "word_list_path": "  /data/words.txt ",
                "word_list_url": "",
                "download_timeout": "9999",
                "top_k": "-5",
                "workers": True,
                "max_query_length": "64",
                "log_level": " debug ",
                "unknown_key": 1,
            }
        ),
        encoding="utf-8",
    )

    cfg = config_mod.get_config(path)

    assert cfg["word_list_path"] == "/data/words.txt"
    assert cfg["word_list_url"] == config_mod.DEFAULT_WORD_LIST_URL
    assert cfg["download_timeout"] == 300
    assert cfg["top_k"] == 0
    assert cfg["workers"] == 1
    assert cfg["max_query_length"] == 64
    assert cfg["log_level"] == "DEBUG"
    assert "unknown_key" not in cfg


def test_get_config_ignores_malformed_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert config_mod.get_config(path) == config_mod.DEFAULT_CONFIG

    path.write_text("[1, 2]", encoding="utf-8")
    assert config_mod.get_config(path) == config_mod.DEFAULT_CONFIG


def test_get_config_uses_module_path_by_default(monkeypatch, tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"top_k": 3}), encoding="utf-8")
    monkeypatch.setattr(config_mod, "CONFIG_PATH", path)
    assert config_mod.get_config()["top_k"] == 3


def test_save_config_normalizes_and_writes_file(tmp_path):
    path = tmp_path / "nested" / "config.json"

    saved = config_mod.save_config({"workers": 500, "log_level": "nope", "top_k": 4}, path)

    assert saved["workers"] == 64
    assert saved["log_level"] == config_mod.DEFAULT_CONFIG["log_level"]
    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored == saved
    assert config_mod.get_config(path)["top_k"] == 4


def test_normalize_helpers_bounds_and_defaults():
    assert config_mod.normalize_max_query_length(None) is None
    assert config_mod.normalize_max_query_length(0) is None
    assert config_mod.normalize_max_query_length("abc") is None
    assert config_mod.normalize_max_query_length(12) == 12
    assert config_mod.normalize_log_level("info") == "INFO"
    assert config_mod.normalize_log_level(3) == config_mod.DEFAULT_CONFIG["log_level"]
    assert config_mod.normalize_text("  x ", "d") == "x"
    assert config_mod.normalize_text(None, "d") == "d"
