r"""Read and write the search index asset.

Documenter ships the index as a small JavaScript file that assigns one object
to a global variable::

    var documenterSearchIndex = {"docs":
    [{"location":"...","page":"...","title":"...","text":"...","category":"..."}]
    }

This module decodes that file (or a bare JSON document holding the same
object) into a :class:`~documenter_index.models.SearchIndex` and writes it back
out. :func:`dumps_js` reproduces Documenter's layout exactly, so loading an
asset and emitting it again yields the same bytes.

Examples
--------
>>> index = parse_search_index(
...     'var documenterSearchIndex = {"docs":\n[{"location":"","page":"Home",'
...     '"title":"Home","text":"","category":"page"}]\n}\n'
... )
>>> len(index)
1
>>> dumps_js(index).splitlines()[0]
'var documenterSearchIndex = {"docs":'
"""

from __future__ import annotations

import enum
import json
import re
import typing as typ

from ._constants import DEFAULT_VARIABLE_NAME, DOCS_KEY, JS_PREFIX_TEMPLATE
from .models import SearchIndex, SearchIndexFormatError

if typ.TYPE_CHECKING:
    from pathlib import Path

ASSIGNMENT_PATTERN = re.compile(
    r"^\s*(?:var|let|const)\s+(?P<name>[A-Za-z_$][\w$]*)\s*=\s*", re.ASCII
)
IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][\w$]*$", re.ASCII)


class IndexFormat(enum.StrEnum):
    """On-disk representations supported by :func:`write_search_index`."""

    JS = "js"
    JSON = "json"


def split_asset(text: str) -> tuple[str | None, str]:
    """Separate the variable assignment from the JSON body of an asset.

    Returns
    -------
    tuple[str | None, str]
        The assigned variable name (``None`` for bare JSON) and the JSON text
        with any trailing semicolon removed.
    """
    match = ASSIGNMENT_PATTERN.match(text)
    if not match:
        return None, text.strip()
    body = text[match.end() :].rstrip()
    if body.endswith(";"):
        body = body[:-1].rstrip()
    return match.group("name"), body


def parse_search_index(text: str) -> SearchIndex:
    """Decode a JavaScript asset or JSON document into a search index.

    Parameters
    ----------
    text : str
        Contents of ``search_index.js`` or of a JSON file holding the
        ``{"docs": [...]}`` object.

    Returns
    -------
    SearchIndex
        Records in the order they appear in ``docs``.

    Raises
    ------
    SearchIndexFormatError
        If the body is not valid JSON or does not have the expected shape.
    """
    _, body = split_asset(text)
    if not body:
        msg = "Search index content is empty."
        raise SearchIndexFormatError(msg)
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as exc:
        msg = f"Search index is not valid JSON: {exc}"
        raise SearchIndexFormatError(msg) from exc
    return SearchIndex.from_payload(payload)


def _dump_entry(payload: dict[str, str]) -> str:
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def dumps_js(index: SearchIndex, variable_name: str = DEFAULT_VARIABLE_NAME) -> str:
    """Render ``index`` in Documenter's ``search_index.js`` layout.

    Raises
    ------
    ValueError
        If ``variable_name`` is not a valid JavaScript identifier.
    """
    if not IDENTIFIER_PATTERN.match(variable_name):
        msg = f"Invalid JavaScript variable name: {variable_name!r}"
        raise ValueError(msg)
    body = ",".join(_dump_entry(entry.to_payload()) for entry in index)
    prefix = JS_PREFIX_TEMPLATE.format(name=variable_name)
    return f'{prefix}{{"{DOCS_KEY}":\n[{body}]\n}}\n'


def dumps_json(index: SearchIndex, *, indent: int | None = 2) -> str:
    """Render ``index`` as a standalone JSON document."""
    return json.dumps(index.to_payload(), ensure_ascii=False, indent=indent) + "\n"


def detect_format(path: Path) -> IndexFormat:
    """Infer the asset format from the file suffix (``.json`` or JavaScript)."""
    if path.suffix.lower() == ".json":
        return IndexFormat.JSON
    return IndexFormat.JS


def load_search_index(path: Path) -> SearchIndex:
    """Read and decode the search index stored at ``path``.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    SearchIndexFormatError
        If the file content cannot be decoded.
    """
    if not path.exists():
        msg = f"Search index file '{path}' not found."
        raise FileNotFoundError(msg)
    return parse_search_index(path.read_text(encoding="utf-8"))


def write_search_index(
    index: SearchIndex,
    path: Path,
    fmt: IndexFormat | str | None = None,
    *,
    variable_name: str = DEFAULT_VARIABLE_NAME,
) -> Path:
    """Serialize ``index`` to ``path`` and return the written path.

    Parameters
    ----------
    index : SearchIndex
        Records to write.
    path : Path
        Destination file; parent directories are created as needed.
    fmt : IndexFormat or str, optional
        ``"js"`` or ``"json"``; inferred from the suffix when omitted.
    variable_name : str, optional
        Global variable assigned in the JavaScript layout.
    """
    resolved = IndexFormat(fmt) if fmt else detect_format(path)
    if resolved is IndexFormat.JSON:
        content = dumps_json(index)
    else:
        content = dumps_js(index, variable_name)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


__all__ = [
    "IndexFormat",
    "detect_format",
    "dumps_js",
    "dumps_json",
    "load_search_index",
    "parse_search_index",
    "split_asset",
    "write_search_index",
]
