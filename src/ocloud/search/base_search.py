"""Indexing contract shared by every resource domain.

A record becomes searchable by projecting itself into a flat mapping of
declared field names to normalized text. The index builder and match engine
only ever see that mapping, never the typed record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Protocol, Tuple, runtime_checkable


@runtime_checkable
class Indexable(Protocol):
    """Minimal protocol for indexable records."""

    def to_indexable(self) -> Dict[str, str]:
        """Return field name -> lower-cased, trimmed text."""
        ...


def normalize(value: Optional[object]) -> str:
    """Lower-case, trim, and collapse internal whitespace; ``None`` becomes ``""``."""
    if value is None:
        return ""
    return " ".join(str(value).split()).lower()


def join_values(values: Optional[Iterable[object]]) -> str:
    """Flatten a multi-value attribute into one space-joined normalized string."""
    if not values:
        return ""
    parts = [normalize(v) for v in values]
    return " ".join(p for p in parts if p)


@dataclass(frozen=True, slots=True)
class FieldDeclaration:
    """Searchable and boosted field names for one resource domain.

    Attributes
    ----------
    searchable: tuple[str, ...]
        Every field eligible for matching, in declaration order.
    boosted: tuple[str, ...]
        Subset of ``searchable`` whose hits outrank non-boosted hits.
    """

    searchable: Tuple[str, ...]
    boosted: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "searchable", tuple(self.searchable))
        object.__setattr__(self, "boosted", tuple(self.boosted))
        unknown = [f for f in self.boosted if f not in self.searchable]
        if unknown:
            raise ValueError(f"Boosted fields not declared searchable: {', '.join(unknown)}")
