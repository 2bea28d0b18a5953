from __future__ import annotations

import pytest

import spellrank.http_client as http_mod
from spellrank.exceptions import MissingDependencyError


def test_require_requests_missing(monkeypatch):
    monkeypatch.setattr(http_mod, "_requests", lambda: None)
    with pytest.raises(MissingDependencyError):
        http_mod.require_requests()


def test_get_uses_default_timeout_and_extra_headers(monkeypatch):
    calls = {}

    class _Requests:
        def get(self, url, **kwargs):
            calls["url"] = url
            calls.update(kwargs)
            return "response"

    monkeypatch.setattr(http_mod, "require_requests", lambda: _Requests())

    resp = http_mod.get("https://example.com/", extra_headers={"X-Test": "1"})

    assert resp == "response"
    assert calls["url"] == "https://example.com/"
    assert calls["timeout"] == http_mod.DEFAULT_TIMEOUT
    assert calls["headers"] == {"User-Agent": http_mod.USER_AGENT, "X-Test": "1"}
