"""Typed records describing a Documenter search index.

A search index is an ordered list of :class:`DocEntry` records. Each record
points at a documentation page or anchor and carries the rendered text the
client-side search widget matches against. Records sharing a ``page`` value
sit next to each other, so the page structure is recovered positionally by
:func:`documenter_index.grouping.group_by_page`.

Examples
--------
>>> entry = DocEntry.from_payload(
...     {
...         "location": "api/#Pkg.birth",
...         "page": "API",
...         "title": "Pkg.birth",
...         "text": "birth(interval)",
...         "category": "function",
...     }
... )
>>> entry.anchor
'Pkg.birth'
>>> entry.category.is_api
True
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from ._constants import DOCS_KEY, ENTRY_FIELDS

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class SearchIndexFormatError(ValueError):
    """Raised when search index content cannot be decoded into entries."""


class Category(enum.StrEnum):
    """Category tag attached to every search index record."""

    PAGE = "page"
    SECTION = "section"
    TYPE = "type"
    FUNCTION = "function"
    METHOD = "method"

    @property
    def is_api(self) -> bool:
        """Return ``True`` for API-reference tags, ``False`` for navigation."""
        return self not in {Category.PAGE, Category.SECTION}


@dc.dataclass(frozen=True, slots=True)
class DocEntry:
    """One documentation fragment recorded in the search index.

    Attributes
    ----------
    location : str
        Relative URL path plus an optional ``#fragment``. Documenter writes
        the site root as the empty string.
    page : str
        Human-readable page name shared by every record on that page.
    title : str
        Title of the page or of the documented symbol.
    text : str
        Rendered documentation body; empty for pure navigation records.
    category : Category
        Navigational or API-reference tag.
    """

    location: str
    page: str
    title: str
    text: str
    category: Category

    @property
    def anchor(self) -> str | None:
        """Return the fragment identifier after ``#``, if the location has one."""
        _, sep, fragment = self.location.partition("#")
        return fragment if sep else None

    @property
    def path(self) -> str:
        """Return the location with any fragment removed."""
        return self.location.partition("#")[0]

    def to_payload(self) -> dict[str, str]:
        """Return a JSON-ready mapping with keys in Documenter's field order."""
        return {
            "location": self.location,
            "page": self.page,
            "title": self.title,
            "text": self.text,
            "category": self.category.value,
        }

    @classmethod
    def from_payload(
        cls, payload: cabc.Mapping[str, typ.Any], *, position: int | None = None
    ) -> DocEntry:
        """Build an entry from a decoded JSON object.

        Parameters
        ----------
        payload : Mapping[str, Any]
            Decoded record holding exactly the five entry fields.
        position : int, optional
            Index of the record within ``docs``; only used in error messages.

        Returns
        -------
        DocEntry
            The immutable record.

        Raises
        ------
        SearchIndexFormatError
            If a field is missing, unexpected, or not a string, or if the
            category tag is unknown.
        """
        where = f"entry {position}" if position is not None else "entry"
        missing = [name for name in ENTRY_FIELDS if name not in payload]
        if missing:
            msg = f"{where} is missing field(s): {', '.join(missing)}"
            raise SearchIndexFormatError(msg)
        extra = sorted(set(payload) - set(ENTRY_FIELDS))
        if extra:
            msg = f"{where} has unexpected field(s): {', '.join(extra)}"
            raise SearchIndexFormatError(msg)
        for name in ENTRY_FIELDS:
            if not isinstance(payload[name], str):
                msg = f"{where} field '{name}' must be a string"
                raise SearchIndexFormatError(msg)
        try:
            category = Category(payload["category"])
        except ValueError as exc:
            msg = f"{where} has unknown category {payload['category']!r}"
            raise SearchIndexFormatError(msg) from exc
        return cls(
            location=payload["location"],
            page=payload["page"],
            title=payload["title"],
            text=payload["text"],
            category=category,
        )


@dc.dataclass(frozen=True, slots=True)
class PageGroup:
    """A contiguous run of records that share the same ``page`` value."""

    page: str
    entries: tuple[DocEntry, ...]
    start: int

    def __len__(self) -> int:
        return len(self.entries)


@dc.dataclass(frozen=True, slots=True)
class SearchIndex:
    """Ordered, immutable collection of search index records."""

    docs: tuple[DocEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.docs)

    def __iter__(self) -> cabc.Iterator[DocEntry]:
        return iter(self.docs)

    def __getitem__(self, position: int) -> DocEntry:
        return self.docs[position]

    def groups(self) -> list[PageGroup]:
        """Return the page runs of this index in document order."""
        from .grouping import group_by_page

        return group_by_page(self.docs)

    def pages(self) -> list[str]:
        """Return distinct page names in order of first appearance."""
        return list(dict.fromkeys(entry.page for entry in self.docs))

    def by_category(self, category: Category | str) -> list[DocEntry]:
        """Return every record tagged with ``category``, in index order."""
        wanted = Category(category)
        return [entry for entry in self.docs if entry.category is wanted]

    def lookup(self, location: str) -> list[DocEntry]:
        """Return every record whose location equals ``location``."""
        return [entry for entry in self.docs if entry.location == location]

    def to_payload(self) -> dict[str, list[dict[str, str]]]:
        """Return the ``{"docs": [...]}`` mapping that Documenter serializes."""
        return {DOCS_KEY: [entry.to_payload() for entry in self.docs]}

    @classmethod
    def from_payload(cls, payload: typ.Any) -> SearchIndex:  # noqa: ANN401 - decoded JSON
        """Build an index from the decoded top-level object.

        Raises
        ------
        SearchIndexFormatError
            If ``payload`` is not an object with a ``docs`` list of records.
        """
        if not isinstance(payload, dict):
            msg = "Top-level search index value must be an object."
            raise SearchIndexFormatError(msg)
        if DOCS_KEY not in payload:
            msg = f"Search index object has no '{DOCS_KEY}' key."
            raise SearchIndexFormatError(msg)
        raw_docs = payload[DOCS_KEY]
        if not isinstance(raw_docs, list):
            msg = f"'{DOCS_KEY}' must be a list of entries."
            raise SearchIndexFormatError(msg)
        entries: list[DocEntry] = []
        for position, raw in enumerate(raw_docs):
            match raw:
                case dict():
                    entries.append(DocEntry.from_payload(raw, position=position))
                case _:
                    msg = f"entry {position} must be an object"
                    raise SearchIndexFormatError(msg)
        return cls(docs=tuple(entries))


__all__ = [
    "Category",
    "DocEntry",
    "PageGroup",
    "SearchIndex",
    "SearchIndexFormatError",
]
