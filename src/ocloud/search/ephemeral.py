"""Ephemeral in-memory index over a homogeneous list of indexable records.

Builds a temporary Whoosh index in RAM for one fetch->index->search cycle with
no persistence. Every declared field is indexed three ways:

* ``f<slot>``      word tokens (lower-cased) for prefix and edit-distance lookups
* ``f<slot>_raw``  the whole field value as a single term
* ``f<slot>_ng``   in-word n-grams for substring-within-word lookups

The normalized text of each record is kept alongside the Whoosh index so the
match engine can scan full values without reading stored fields back.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from whoosh.analysis import LowercaseFilter, RegexTokenizer
from whoosh.fields import ID, NGRAMWORDS, NUMERIC, TEXT, Schema
from whoosh.filedb.filestore import RamStorage
from whoosh.index import Index
from whoosh.searching import Searcher

from ocloud.config import SearchConfig
from ocloud.exceptions import IndexBuildError
from ocloud.search.base_search import Indexable, normalize

logger = logging.getLogger(__name__)


def token_analyzer():
    """Analyzer shared by indexing and pattern tokenization."""
    return RegexTokenizer() | LowercaseFilter()


def _make_schema(n_fields: int, *, ngram_min: int, ngram_max: int) -> Schema:
    columns: Dict[str, Any] = {"pos": NUMERIC(stored=True, unique=True)}
    for slot in range(n_fields):
        columns[f"f{slot}"] = TEXT(analyzer=token_analyzer(), phrase=False)
        columns[f"f{slot}_raw"] = ID()
        columns[f"f{slot}_ng"] = NGRAMWORDS(minsize=ngram_min, maxsize=ngram_max)
    return Schema(**columns)


def _projection(record: Any) -> Mapping[str, Any]:
    if isinstance(record, Mapping):
        return record
    if isinstance(record, Indexable):
        return record.to_indexable() or {}
    raise TypeError(f"{type(record).__name__} does not implement to_indexable()")


def _to_index_rows(
    records: Iterable[Any], fields: Sequence[str]
) -> Iterator[Tuple[int, Dict[str, str]]]:
    for pos, record in enumerate(records):
        doc = _projection(record)
        # Undeclared keys are dropped; missing ones read as "".
        yield pos, {f: normalize(doc.get(f)) for f in fields}


class EphemeralIndex:
    """Searchable structure built once per search call.

    Entries keep their original collection position, so match results
    translate back to records by plain indexing.
    """

    def __init__(self, fields: Tuple[str, ...], texts: List[Dict[str, str]], ix: Index) -> None:
        self.fields = fields
        self._slots = {name: slot for slot, name in enumerate(fields)}
        self._texts = texts
        self._ix = ix
        self._populated = frozenset(f for f in fields if any(row[f] for row in texts))

    def __len__(self) -> int:
        return len(self._texts)

    def has_field(self, field: str) -> bool:
        return field in self._slots

    def populated(self, field: str) -> bool:
        """True when at least one record has a non-empty value for ``field``."""
        return field in self._populated

    def text(self, pos: int, field: str) -> str:
        """Normalized text of ``field`` for the record at ``pos`` ("" if absent)."""
        return self._texts[pos].get(field, "")

    def token_field(self, field: str) -> str:
        return f"f{self._slots[field]}"

    def raw_field(self, field: str) -> str:
        return f"f{self._slots[field]}_raw"

    def ngram_field(self, field: str) -> str:
        return f"f{self._slots[field]}_ng"

    def searcher(self) -> Searcher:
        return self._ix.searcher()


def build_index(
    records: Sequence[Any],
    fields: Sequence[str],
    *,
    config: Optional[SearchConfig] = None,
) -> EphemeralIndex:
    """Index ``records`` over the declared ``fields``.

    Raises
    ------
    IndexBuildError
        If ``fields`` is empty. This is a caller programming error.
    """
    declared = tuple(dict.fromkeys(f for f in fields if f))
    if not declared:
        raise IndexBuildError("Cannot build an index without declared fields")

    cfg = config or SearchConfig()
    schema = _make_schema(len(declared), ngram_min=cfg.ngram_min, ngram_max=cfg.ngram_max)
    storage = RamStorage()
    ix = storage.create_index(schema)

    texts: List[Dict[str, str]] = []
    writer = ix.writer(limitmb=32)
    for pos, row in _to_index_rows(records, declared):
        texts.append(row)
        doc: Dict[str, Any] = {"pos": pos}
        for slot, name in enumerate(declared):
            value = row[name]
            if not value:
                continue
            doc[f"f{slot}"] = value
            doc[f"f{slot}_raw"] = value
            doc[f"f{slot}_ng"] = value
        writer.add_document(**doc)
    writer.commit()

    logger.debug("Built ephemeral index: %d record(s), %d field(s)", len(texts), len(declared))
    return EphemeralIndex(declared, texts, ix)
