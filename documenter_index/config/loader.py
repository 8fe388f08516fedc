"""Load index configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import DEFAULT_VARIABLE_NAME
from ..codec import IDENTIFIER_PATTERN
from ..models import Category
from .models import IndexConfig, IndexConfigError


def load_index_config(path: Path) -> IndexConfig:
    """Load the YAML configuration describing where the index lives.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/index.yaml``).

    Returns
    -------
    IndexConfig
        Parsed configuration with defaults applied for omitted keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    IndexConfigError
        If a value is invalid (unknown or empty categories, a bad variable
        name, a non-string source or output, or a non-boolean
        ``allow_root_location``).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from documenter_index.config import load_index_config
    >>> config = load_index_config(Path("config/index.yaml"))  # doctest: +SKIP
    >>> config.variable_name  # doctest: +SKIP
    'documenterSearchIndex'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    source = _optional_path_text(raw.get("source"), "source")
    output = _optional_path_text(raw.get("output"), "output")
    variable_name = raw.get("variable_name", DEFAULT_VARIABLE_NAME)
    if not isinstance(variable_name, str) or not IDENTIFIER_PATTERN.match(
        variable_name
    ):
        msg = f"Invalid variable_name {variable_name!r}."
        raise IndexConfigError(msg)

    allow_root_location = raw.get("allow_root_location", False)
    if not isinstance(allow_root_location, bool):
        msg = "allow_root_location must be true or false."
        raise IndexConfigError(msg)

    return IndexConfig(
        source=source,
        output=Path(output) if output else None,
        variable_name=variable_name,
        categories=_parse_categories(raw.get("categories")),
        allow_root_location=allow_root_location,
    )


def _optional_path_text(value: object | None, key: str) -> str | None:
    """Return a stripped path or URL string, or None when unset or blank."""
    match value:
        case None:
            return None
        case str() as text:
            return text.strip() or None
        case _:
            msg = f"{key} must be a path or URL string."
            raise IndexConfigError(msg)


def _parse_categories(value: object | None) -> list[Category]:
    """Return the configured category tags, defaulting to every tag."""
    match value:
        case None:
            return list(Category)
        case str() as text:
            names = [segment for segment in text.replace(",", " ").split() if segment]
        case list():
            names = [str(segment).strip() for segment in value]
        case _:
            msg = "categories must be a list of category tags."
            raise IndexConfigError(msg)
    if not names:
        msg = "categories must name at least one category tag."
        raise IndexConfigError(msg)
    categories: list[Category] = []
    for name in names:
        try:
            category = Category(name)
        except ValueError as exc:
            known = ", ".join(member.value for member in Category)
            msg = f"Unknown category '{name}'. Known categories: {known}"
            raise IndexConfigError(msg) from exc
        if category not in categories:
            categories.append(category)
    return categories


__all__ = ["load_index_config"]
