"""Local pagination over an already-ordered, fully materialized collection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Sequence, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class Page(Generic[T]):
    """One slice of a collection plus the counters needed to fetch the next one.

    ``next_page_token`` is the decimal page number to request next, or "" on the
    last page. It is a local counter, not a server-side cursor.
    """

    items: List[T] = field(default_factory=list)
    total_count: int = 0
    limit: int = 1
    page: int = 1
    next_page_token: str = ""

    @property
    def has_next(self) -> bool:
        return bool(self.next_page_token)

    def pagination_info(self) -> Dict[str, Any]:
        return {
            "current_page": self.page,
            "total_count": self.total_count,
            "limit": self.limit,
            "next_page_token": self.next_page_token,
        }


def paginate(items: Sequence[T], limit: int, page: int) -> Page[T]:
    """Slice ``items`` into page ``page`` of size ``limit``.

    ``page`` values below 1 are clamped to 1 and so are ``limit`` values. A page
    past the end is empty (not an error) and carries no next token.
    """
    limit = max(1, int(limit))
    page = max(1, int(page))
    total = len(items)

    start = (page - 1) * limit
    if start >= total:
        return Page(items=[], total_count=total, limit=limit, page=page)

    end = min(start + limit, total)
    next_token = str(page + 1) if end < total else ""
    return Page(
        items=list(items[start:end]),
        total_count=total,
        limit=limit,
        page=page,
        next_page_token=next_token,
    )
