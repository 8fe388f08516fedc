"""Recover page structure from the flat search index.

Documenter writes the records of each page back to back, so a page is simply
a maximal run of adjacent records with the same ``page`` value. Grouping is
positional: a page name that reappears after another page produces a second
group rather than being merged into the first.

Example
-------
>>> from documenter_index.models import Category, DocEntry
>>> entries = [
...     DocEntry("a", "P", "T", "", Category.PAGE),
...     DocEntry("a#x", "P", "x", "", Category.TYPE),
... ]
>>> [(group.page, len(group)) for group in group_by_page(entries)]
[('P', 2)]
"""

from __future__ import annotations

import collections
import dataclasses as dc
import itertools
import typing as typ

from .models import Category, PageGroup

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import DocEntry, SearchIndex


def group_by_page(entries: cabc.Iterable[DocEntry]) -> list[PageGroup]:
    """Split ``entries`` into contiguous runs that share a ``page`` value.

    Parameters
    ----------
    entries : Iterable[DocEntry]
        Records in index order.

    Returns
    -------
    list[PageGroup]
        One group per run, each holding its records in their original order
        together with the position of the run's first record.
    """
    groups: list[PageGroup] = []
    start = 0
    for page, run in itertools.groupby(entries, key=lambda entry: entry.page):
        members = tuple(run)
        groups.append(PageGroup(page=page, entries=members, start=start))
        start += len(members)
    return groups


@dc.dataclass(frozen=True, slots=True)
class PageSummary:
    """Record counts for one page run.

    ``categories`` pairs each tag present on the page with its count, in
    :class:`Category` order.
    """

    page: str
    start: int
    entries: int
    anchors: int
    categories: tuple[tuple[Category, int], ...]


def summarize(index: SearchIndex) -> list[PageSummary]:
    """Return per-page record counts in page order."""
    summaries: list[PageSummary] = []
    for group in index.groups():
        counts = collections.Counter(entry.category for entry in group.entries)
        summaries.append(
            PageSummary(
                page=group.page,
                start=group.start,
                entries=len(group),
                anchors=sum(1 for entry in group.entries if entry.anchor is not None),
                categories=tuple(
                    (category, counts[category])
                    for category in Category
                    if counts[category]
                ),
            )
        )
    return summaries


__all__ = ["PageSummary", "group_by_page", "summarize"]
