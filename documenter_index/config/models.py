"""Typed dataclasses describing documenter_index configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import DEFAULT_VARIABLE_NAME
from ..models import Category


class IndexConfigError(ValueError):
    """Raised when the index configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class IndexConfig:
    """Resolved settings shared by the CLI commands.

    Attributes
    ----------
    source : str or None
        Path or HTTP(S) URL of the search index to read.
    output : Path or None
        Destination used by ``convert`` when no ``--output`` is given.
    variable_name : str
        Global variable assigned when writing the JavaScript layout.
    categories : list[Category]
        Category tags accepted by ``validate``.
    allow_root_location : bool
        Accept the empty location that marks the site root.
    """

    source: str | None = None
    output: Path | None = None
    variable_name: str = DEFAULT_VARIABLE_NAME
    categories: list[Category] = dc.field(default_factory=lambda: list(Category))
    allow_root_location: bool = False


__all__ = ["IndexConfig", "IndexConfigError"]
