"""Utilities for loading, checking, and rewriting Documenter search indexes.

This package reads the ``search_index.js`` asset that Documenter ships with a
built documentation site, exposes its records as immutable dataclasses, and
offers the ``docindex`` CLI for validating and converting the table.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``SearchIndex``/``DocEntry``/``Category``: the record model.
- ``parse_search_index``/``load_search_index``: decoders for the asset.

Examples
--------
>>> from documenter_index import Category, parse_search_index
>>> index = parse_search_index('{"docs": []}')
>>> len(index)
0
>>> Category("method").is_api
True
"""

from __future__ import annotations

from .cli import app, main
from .codec import dumps_js, dumps_json, load_search_index, parse_search_index
from .models import Category, DocEntry, PageGroup, SearchIndex, SearchIndexFormatError

__all__ = [
    "Category",
    "DocEntry",
    "PageGroup",
    "SearchIndex",
    "SearchIndexFormatError",
    "app",
    "dumps_js",
    "dumps_json",
    "load_search_index",
    "main",
    "parse_search_index",
]
