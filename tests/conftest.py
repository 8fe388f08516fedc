"""Shared fixtures for documenter_index tests.

``sample_index_path`` points at a real ``search_index.js`` produced by
Documenter for the PersistenceDiagrams.jl docs: 40 records split into an
``API`` run of 35 and a ``Home`` run of 5, with the site root written as the
empty location.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from documenter_index.codec import load_search_index
from documenter_index.models import Category, DocEntry, SearchIndex

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def make_entry(
    location: str = "a",
    page: str = "P",
    *,
    title: str = "T",
    text: str = "",
    category: Category | str = Category.PAGE,
) -> DocEntry:
    """Construct a DocEntry with terse defaults for table-driven tests."""
    return DocEntry(
        location=location,
        page=page,
        title=title,
        text=text,
        category=Category(category),
    )


@pytest.fixture
def sample_index_path() -> Path:
    """Return the path of the recorded Documenter asset."""
    return FIXTURES_DIR / "search_index.js"


@pytest.fixture
def sample_index(sample_index_path: Path) -> SearchIndex:
    """Return the recorded Documenter asset decoded into a SearchIndex."""
    return load_search_index(sample_index_path)
