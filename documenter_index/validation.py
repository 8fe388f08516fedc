"""Structural integrity checks for a loaded search index.

The checks mirror what the search widget silently relies on: every record
points somewhere, uses a known category tag, anchors are not duplicated, and
a page's records are not scattered across the table.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .models import Category

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import SearchIndex


@dc.dataclass(frozen=True, slots=True)
class IndexIssue:
    """A single integrity problem found at ``position`` in the index."""

    position: int
    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.position}: {self.code}: {self.message}"


class IndexValidationError(ValueError):
    """Raised when a search index fails one or more integrity checks."""

    def __init__(self, issues: cabc.Sequence[IndexIssue]) -> None:
        self.issues = list(issues)
        noun = "issue" if len(self.issues) == 1 else "issues"
        super().__init__(f"Search index has {len(self.issues)} {noun}.")


def validate_index(
    index: SearchIndex,
    *,
    allowed_categories: cabc.Iterable[Category | str] | None = None,
    allow_root_location: bool = False,
) -> list[IndexIssue]:
    """Return every integrity issue in ``index``, ordered by position.

    Parameters
    ----------
    index : SearchIndex
        Records to check.
    allowed_categories : Iterable[Category | str], optional
        Category tags accepted by the consumer; defaults to every
        :class:`Category`.
    allow_root_location : bool, optional
        Accept the empty location Documenter writes for the site root.

    Returns
    -------
    list[IndexIssue]
        Empty when the index is sound.
    """
    allowed = (
        {Category(value) for value in allowed_categories}
        if allowed_categories is not None
        else set(Category)
    )
    issues: list[IndexIssue] = []
    seen_anchors: dict[str, int] = {}
    closed_pages: set[str] = set()
    current_page: str | None = None

    for position, entry in enumerate(index):
        if not entry.location and not allow_root_location:
            issues.append(
                IndexIssue(position, "empty-location", "location is empty")
            )
        if entry.category not in allowed:
            issues.append(
                IndexIssue(
                    position,
                    "unknown-category",
                    f"category '{entry.category}' is not allowed",
                )
            )
        if entry.anchor is not None:
            first = seen_anchors.setdefault(entry.location, position)
            if first != position:
                issues.append(
                    IndexIssue(
                        position,
                        "duplicate-anchor",
                        f"location '{entry.location}' already used by entry {first}",
                    )
                )
        if entry.page != current_page:
            if entry.page in closed_pages:
                issues.append(
                    IndexIssue(
                        position,
                        "page-not-contiguous",
                        f"page '{entry.page}' resumes after another page",
                    )
                )
            if current_page is not None:
                closed_pages.add(current_page)
            current_page = entry.page
    return issues


def ensure_valid(
    index: SearchIndex,
    *,
    allowed_categories: cabc.Iterable[Category | str] | None = None,
    allow_root_location: bool = False,
) -> SearchIndex:
    """Return ``index`` unchanged, raising :class:`IndexValidationError` on issues."""
    issues = validate_index(
        index,
        allowed_categories=allowed_categories,
        allow_root_location=allow_root_location,
    )
    if issues:
        raise IndexValidationError(issues)
    return index


__all__ = ["IndexIssue", "IndexValidationError", "ensure_valid", "validate_index"]
