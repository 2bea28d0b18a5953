"""HTTP access for the word-list download, on top of a lazily imported ``requests``."""

from __future__ import annotations

import importlib
from typing import Optional

from .exceptions import FetchError, MissingDependencyError
from .logger import get_logger

logger = get_logger(__name__)

USER_AGENT = "spellrank/0.1 (+https://github.com/dwyl/english-words)"

DEFAULT_TIMEOUT = 15


def _requests():
    try:
        return importlib.import_module("requests")
    except ImportError:
        return None


def require_requests():
    """Return the ``requests`` module or raise ``MissingDependencyError``."""
    mod = _requests()
    if not mod:
        raise MissingDependencyError("requests module not found. Install it with `pip install requests`.")
    return mod


def get(
    url: str,
    *,
    timeout: int | tuple | None = None,
    accept: Optional[str] = None,
    extra_headers: Optional[dict] = None,
):
    """Perform an HTTP GET with standard headers, logging, and error handling.

    Returns a ``requests.Response`` object.
    Raises ``FetchError`` on connection failures.
    """
    requests = require_requests()
    headers = {"User-Agent": USER_AGENT}
    if accept:
        headers["Accept"] = accept
    if extra_headers:
        headers.update(extra_headers)

    effective_timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
    logger.debug("HTTP GET %s (timeout=%s)", url, effective_timeout)

    try:
        resp = requests.get(url, headers=headers, timeout=effective_timeout)
    except Exception as e:
        logger.error("HTTP request to %s failed: %s", url, e)
        raise FetchError(f"Request failed: {e}") from e

    return resp


def get_text(url: str, **kwargs) -> str:
    """GET *url* and return the decoded body.

    Keyword arguments are forwarded to :func:`get`.
    Raises ``FetchError`` on HTTP 4xx/5xx.
    """
    resp = get(url, **kwargs)
    if resp.status_code >= 400:
        logger.error("HTTP %s for %s", resp.status_code, url)
        raise FetchError(f"HTTP {resp.status_code} for {url}")
    return resp.text
