"""Retrieve a published search index over HTTP.

Deployed Documenter sites serve the index next to their pages (for example
``https://example.org/Pkg.jl/dev/search_index.js``). :func:`fetch_search_index`
downloads and decodes it; :func:`load_source` lets callers pass either a URL or
a local path.

Example
-------
>>> from documenter_index.fetch import fetch_search_index
>>> index = fetch_search_index(
...     "https://example.org/Pkg.jl/dev/search_index.js"
... )  # doctest: +SKIP
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urlsplit

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .codec import load_search_index, parse_search_index
from .models import SearchIndex


def is_url(source: str | Path) -> bool:
    """Return ``True`` when ``source`` is an HTTP(S) URL."""
    if isinstance(source, Path):
        return False
    return urlsplit(source).scheme in {"http", "https"}


def _build_session() -> requests.Session:
    session = requests.Session()
    retry = Retry(
        total=5,
        read=5,
        connect=3,
        backoff_factor=0.5,
        status_forcelist=(500, 502, 503, 504),
        allowed_methods=("GET", "HEAD"),
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def fetch_search_index(url: str, *, timeout: int = 30) -> SearchIndex:
    """Download and decode the search index published at ``url``.

    Raises
    ------
    requests.HTTPError
        If the server answers with a non-success status.
    SearchIndexFormatError
        If the response body is not a search index.
    """
    session = _build_session()
    try:
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
        resp.encoding = "utf-8"
        return parse_search_index(resp.text)
    finally:
        session.close()


def load_source(source: str | Path, *, timeout: int = 30) -> SearchIndex:
    """Load an index from a URL or a filesystem path."""
    if is_url(source):
        return fetch_search_index(str(source), timeout=timeout)
    return load_search_index(Path(source))


__all__ = ["fetch_search_index", "is_url", "load_source"]
