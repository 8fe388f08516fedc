"""Cyclopts CLI entrypoint for inspecting and converting Documenter search indexes.

The ``docindex`` console script defined here loads a ``search_index.js`` asset
from disk or from a deployed documentation site, checks its structural
integrity, lists the page runs it contains, and rewrites it as JavaScript or
plain JSON. Typical usage involves running ``docindex validate`` in CI after a
docs build, and ``docindex convert`` when another tool needs the table as JSON.

Examples
--------
Validate the index produced by a local docs build:

>>> from documenter_index.cli import app
>>> app(["validate", "--source", "docs/build/search_index.js"])  # doctest: +SKIP

Convert a published index to JSON:

>>> app(
...     [
...         "convert",
...         "--source",
...         "https://example.org/Pkg.jl/dev/search_index.js",
...         "--output",
...         "index.json",
...     ]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .codec import IndexFormat, write_search_index
from .config import IndexConfig, load_index_config
from .fetch import load_source
from .grouping import summarize
from .models import SearchIndex, SearchIndexFormatError
from .validation import validate_index

DEFAULT_CONFIG = Path("config/index.yaml")

app = App(name="docindex", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_config(config: Path | None) -> IndexConfig:
    """Load ``config`` or, when unset, the default file if it exists."""
    if config is not None:
        return load_index_config(config)
    if DEFAULT_CONFIG.exists():
        return load_index_config(DEFAULT_CONFIG)
    return IndexConfig()


def _load(source: str | None, settings: IndexConfig) -> SearchIndex:
    """Load the index named by ``source`` or the configured default.

    Format errors are reported on stderr and end the command with status 1.
    """
    target = source or settings.source
    if not target:
        msg = "No search index source given; pass --source or set it in the config."
        raise ValueError(msg)
    try:
        return load_source(target)
    except SearchIndexFormatError as exc:
        print(f"error: {target}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


SourceOption = typ.Annotated[
    str | None,
    Parameter(help="Path or URL of search_index.js", env_var="INPUT_SOURCE"),
]
ConfigOption = typ.Annotated[
    Path | None, Parameter(help="Path to index config", env_var="INPUT_CONFIG")
]


@app.command(help="Check the search index for structural problems.")
def validate(
    *,
    source: SourceOption = None,
    config: ConfigOption = None,
    allow_root_location: typ.Annotated[
        bool | None,
        Parameter(
            help="Accept the empty location used for the site root",
            env_var="INPUT_ALLOW_ROOT_LOCATION",
        ),
    ] = None,
) -> None:
    """Validate a search index and report every issue found.

    Parameters
    ----------
    source : str or None, optional
        Path or URL of the index; falls back to ``source`` in the config.
    config : Path or None, optional
        Path to ``index.yaml``; defaults to ``config/index.yaml`` when present.
    allow_root_location : bool or None, optional
        Override the config's ``allow_root_location`` setting.

    Raises
    ------
    SystemExit
        With status 1 when the index cannot be decoded or has issues.
    """
    settings = _resolve_config(config)
    index = _load(source, settings)
    allow_root = (
        settings.allow_root_location
        if allow_root_location is None
        else allow_root_location
    )
    issues = validate_index(
        index,
        allowed_categories=settings.categories,
        allow_root_location=allow_root,
    )
    for issue in issues:
        print(str(issue), file=sys.stderr)
    if issues:
        raise SystemExit(1)
    print(f"ok: {len(index)} entries")


@app.command(help="Rewrite the search index as JavaScript or JSON.")
def convert(
    *,
    source: SourceOption = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Where to write the converted index", env_var="INPUT_OUTPUT"),
    ] = None,
    fmt: typ.Annotated[
        IndexFormat | None,
        Parameter(
            name="--format",
            help="Output format (js or json); inferred from the suffix by default",
            env_var="INPUT_FORMAT",
        ),
    ] = None,
    variable_name: typ.Annotated[
        str | None,
        Parameter(
            help="Variable assigned in the JavaScript layout",
            env_var="INPUT_VARIABLE_NAME",
        ),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Load a search index and write it back out.

    Parameters
    ----------
    source : str or None, optional
        Path or URL of the index; falls back to ``source`` in the config.
    output : Path or None, optional
        Destination file; falls back to ``output`` in the config.
    fmt : IndexFormat or None, optional
        ``js`` or ``json``; inferred from the output suffix when ``None``.
    variable_name : str or None, optional
        Overrides the config's ``variable_name``.
    config : Path or None, optional
        Path to ``index.yaml``.

    Raises
    ------
    ValueError
        If no output path is given on the command line or in the config.
    """
    settings = _resolve_config(config)
    destination = output or settings.output
    if destination is None:
        msg = "No output path given; pass --output or set it in the config."
        raise ValueError(msg)
    index = _load(source, settings)
    written = write_search_index(
        index,
        destination,
        fmt,
        variable_name=variable_name or settings.variable_name,
    )
    print(f"wrote {_format_path(written)}")


@app.command(help="List the page runs of the search index.")
def pages(*, source: SourceOption = None, config: ConfigOption = None) -> None:
    """Print ``<start>\\t<page>\\t<count>`` for every page run."""
    settings = _resolve_config(config)
    index = _load(source, settings)
    for group in index.groups():
        print(f"{group.start}\t{group.page}\t{len(group)}")


@app.command(help="Summarize record counts per page and category.")
def stats(*, source: SourceOption = None, config: ConfigOption = None) -> None:
    """Print entry, anchor, and per-category counts for every page run."""
    settings = _resolve_config(config)
    index = _load(source, settings)
    for summary in summarize(index):
        breakdown = ", ".join(
            f"{category}={count}" for category, count in summary.categories
        )
        print(
            f"{summary.page}: {summary.entries} entries, "
            f"{summary.anchors} anchors ({breakdown})"
        )
    print(f"total: {len(index)} entries across {len(index.pages())} pages")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docindex`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
