"""Search, filter and paginate a record collection for display.

``derive_view`` is a pure function of its inputs. ``ListViewState`` holds
the ephemeral UI state (search text, active filter, current page) and
enforces that changing the search or filter goes back to page 1.
"""

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from connector_admin.application.entity_kinds import EntityKind

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class ListView:
    """One rendered page of a filtered collection."""

    page_records: tuple[Any, ...]
    total_pages: int
    total_count: int
    page: int
    page_size: int = DEFAULT_PAGE_SIZE


def matches(
    kind: EntityKind, record: Any, search_text: str = "", active_filter: str | None = None
) -> bool:
    """Search (case-insensitive substring on any search field) AND exact filter."""
    if active_filter and getattr(record, kind.filter_field) != active_filter:
        return False
    needle = (search_text or "").lower()
    if not needle:
        return True
    return any(
        needle in str(getattr(record, field) or "").lower()
        for field in kind.search_fields
    )


def filter_records(
    kind: EntityKind,
    records: Iterable[Any],
    search_text: str = "",
    active_filter: str | None = None,
) -> list[Any]:
    """Matching records in their original order."""
    return [r for r in records if matches(kind, r, search_text, active_filter)]


def derive_view(
    kind: EntityKind,
    records: Sequence[Any],
    search_text: str = "",
    active_filter: str | None = None,
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> ListView:
    """Filter ``records`` and cut out page ``page`` (1-based).

    ``total_pages`` is ``ceil(count / page_size)`` and is 0 for an empty
    result. A page outside ``1..total_pages`` comes back empty; keeping the
    page in range is the caller's job.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")

    filtered = filter_records(kind, records, search_text, active_filter)
    total_count = len(filtered)
    total_pages = math.ceil(total_count / page_size)

    if page < 1:
        page_records: tuple[Any, ...] = ()
    else:
        start = (page - 1) * page_size
        page_records = tuple(filtered[start:start + page_size])

    return ListView(
        page_records=page_records,
        total_pages=total_pages,
        total_count=total_count,
        page=page,
        page_size=page_size,
    )


def filter_options(kind: EntityKind, records: Iterable[Any]) -> list[str]:
    """Distinct values of the filter field for a dropdown, sorted."""
    values = {getattr(r, kind.filter_field) for r in records}
    return sorted(v for v in values if v)


def page_range(view: ListView) -> tuple[int, int]:
    """1-based index of the first and last record shown, ``(0, 0)`` when empty."""
    if not view.page_records:
        return (0, 0)
    first = (view.page - 1) * view.page_size + 1
    return (first, first + len(view.page_records) - 1)


class ListViewState:
    """Search text, active filter and current page for one list."""

    def __init__(self) -> None:
        self._search_text = ""
        self._active_filter: str | None = None
        self._page = 1

    @property
    def search_text(self) -> str:
        return self._search_text

    @property
    def active_filter(self) -> str | None:
        return self._active_filter

    @property
    def page(self) -> int:
        return self._page

    def set_search_text(self, text: str) -> None:
        self._search_text = text or ""
        self._page = 1

    def set_filter(self, value: str | None) -> None:
        self._active_filter = value or None
        self._page = 1

    def go_to_page(self, page: int) -> None:
        if page < 1:
            raise ValueError(f"page must be 1 or greater, got {page}")
        self._page = page

    def clamp(self, total_pages: int) -> None:
        """Pull the page back inside ``1..total_pages`` after records go away."""
        self._page = min(self._page, max(total_pages, 1))
