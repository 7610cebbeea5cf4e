"""Two-phase fuzzy matcher over an :class:`EphemeralIndex`.

Patterns that look like identifiers or addresses are first tried as exact
values and substrings of whole fields (phase A). Everything phase A did not
claim, and every general pattern, goes through a tolerant pass of token
prefixes, bounded edit distance, and in-word n-grams (phase B).

Ranking is ordinal: phase A before phase B, boosted fields before others,
original position last. Scores never leave this module.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple, TypeVar

from whoosh.query import FuzzyTerm, Prefix, Query, Term
from whoosh.searching import Searcher

from ocloud.config import SearchConfig
from ocloud.exceptions import InvalidPatternError, SearchError
from ocloud.search.base_search import FieldDeclaration
from ocloud.search.ephemeral import EphemeralIndex, build_index, token_analyzer

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Relative weights of phase B hit kinds; only their order matters.
WEIGHT_TOKEN = 2.0
WEIGHT_NGRAM = 1.5
WEIGHT_PREFIX = 1.3
WEIGHT_FUZZY = 1.2

_ADDRESS_RE = re.compile(r"^\d{1,3}(?:\.\d{1,3}){1,3}\.?(?:/\d{1,2})?$")
_SEGMENT_SPLIT_RE = re.compile(r"[.\-_:/]+")
# key:value tags, user@host, paths and CIDRs
_SEPARATOR_RE = re.compile(r"[:@/]")


class PatternKind(Enum):
    SPECIFIC = "specific"
    GENERAL = "general"


@dataclass(frozen=True)
class PatternThresholds:
    """Cut-offs that decide whether a pattern is high-specificity."""

    specific_min_length: int = 15
    identifier_min_length: int = 8
    identifier_min_segments: int = 3

    @classmethod
    def from_config(cls, cfg: SearchConfig) -> "PatternThresholds":
        return cls(
            specific_min_length=cfg.specific_min_length,
            identifier_min_length=cfg.identifier_min_length,
            identifier_min_segments=cfg.identifier_min_segments,
        )


def clean_pattern(pattern: Optional[str]) -> str:
    """Trim and lower-case ``pattern``; reject empty input."""
    p = (pattern or "").strip().lower()
    if not p:
        raise InvalidPatternError("Search pattern must not be empty")
    return p


def classify_pattern(pattern: str, thresholds: Optional[PatternThresholds] = None) -> PatternKind:
    """Classify a pattern as high-specificity (identifier/address-like) or general."""
    th = thresholds or PatternThresholds()
    p = pattern.strip().lower()
    if not p or any(ch.isspace() for ch in p):
        return PatternKind.GENERAL
    if _ADDRESS_RE.match(p):
        return PatternKind.SPECIFIC
    if _SEPARATOR_RE.search(p):
        return PatternKind.SPECIFIC
    segments = [s for s in _SEGMENT_SPLIT_RE.split(p) if s]
    if len(p) >= th.identifier_min_length and len(segments) >= th.identifier_min_segments:
        return PatternKind.SPECIFIC
    if len(p) >= th.specific_min_length:
        return PatternKind.SPECIFIC
    return PatternKind.GENERAL


def max_edit_distance(term: str) -> int:
    """Edit-distance tolerance grows with term length: 0, 1, then 2."""
    n = len(term)
    if n <= 3:
        return 0
    if n <= 7:
        return 1
    return 2


def _exact_phase(
    index: EphemeralIndex, pattern: str, fields: Sequence[str], boosted: frozenset
) -> List[int]:
    ranked: List[Tuple[Tuple[int, int], int]] = []
    for pos in range(len(index)):
        best: Optional[Tuple[int, int]] = None
        for field in fields:
            text = index.text(pos, field)
            if not text:
                continue
            if text == pattern:
                kind = 0
            elif pattern in text:
                kind = 1
            else:
                continue
            key = (kind, 0 if field in boosted else 1)
            if best is None or key < best:
                best = key
        if best is not None:
            ranked.append((best, pos))
    ranked.sort()
    return [pos for _, pos in ranked]


def _term_queries(
    index: EphemeralIndex,
    field: str,
    term: str,
    kind: PatternKind,
    cfg: SearchConfig,
) -> List[Tuple[Query, float]]:
    tok = index.token_field(field)
    dist = max_edit_distance(term)
    queries: List[Tuple[Query, float]] = [
        (Term(tok, term), WEIGHT_TOKEN),
        (Prefix(tok, term), WEIGHT_PREFIX),
    ]
    if dist:
        queries.append(
            (FuzzyTerm(tok, term, maxdist=dist, prefixlength=cfg.fuzzy_prefix_length), WEIGHT_FUZZY)
        )
    if kind is PatternKind.SPECIFIC:
        raw = index.raw_field(field)
        queries.append((Prefix(raw, term), WEIGHT_PREFIX))
        if dist:
            queries.append(
                (
                    FuzzyTerm(raw, term, maxdist=dist, prefixlength=cfg.fuzzy_prefix_length),
                    WEIGHT_FUZZY,
                )
            )
    elif cfg.ngram_min <= len(term) <= cfg.ngram_max:
        queries.append((Term(index.ngram_field(field), term), WEIGHT_NGRAM))
    return queries


def _matching_positions(searcher: Searcher, query: Query) -> List[int]:
    return [int(hit["pos"]) for hit in searcher.search(query, limit=None)]


def _fuzzy_phase(
    index: EphemeralIndex,
    pattern: str,
    kind: PatternKind,
    fields: Sequence[str],
    boosted: frozenset,
    exclude: set,
    cfg: SearchConfig,
) -> List[int]:
    if kind is PatternKind.SPECIFIC:
        terms = [pattern]
    else:
        terms = list(dict.fromkeys(t.text for t in token_analyzer()(pattern)))
    if not terms:
        return []

    weights: Dict[int, float] = {}
    boosted_hit: Dict[int, bool] = {}
    with index.searcher() as searcher:
        for field in fields:
            if not index.populated(field):
                continue
            factor = cfg.boost_factor if field in boosted else 1.0
            for term in terms:
                for query, weight in _term_queries(index, field, term, kind, cfg):
                    for pos in _matching_positions(searcher, query):
                        if pos in exclude:
                            continue
                        weights[pos] = weights.get(pos, 0.0) + weight * factor
                        if field in boosted:
                            boosted_hit[pos] = True

    ranked = sorted(
        weights,
        key=lambda pos: (0 if boosted_hit.get(pos) else 1, -round(weights[pos], 6), pos),
    )
    return ranked


def fuzzy_search(
    index: EphemeralIndex,
    pattern: str,
    fields: Optional[Sequence[str]] = None,
    boosted_fields: Sequence[str] = (),
    *,
    config: Optional[SearchConfig] = None,
) -> List[int]:
    """Return original-collection positions matching ``pattern``, best first.

    Exact and substring hits always lead, but they do not end the search:
    records they did not claim still go through the tolerant pass. A full
    OCID therefore ranks its own record first and may be followed by sibling
    OCIDs within the edit-distance bound.

    Parameters
    ----------
    index: EphemeralIndex
        Index built by :func:`build_index` for this call.
    pattern: str
        Free-text fragment; trimmed and lower-cased here.
    fields: Sequence[str] | None
        Fields to match on. Defaults to every indexed field. Fields the index
        does not know are skipped.
    boosted_fields: Sequence[str]
        Fields whose hits outrank non-boosted hits.

    Raises
    ------
    InvalidPatternError
        If the pattern is empty or whitespace-only.
    """
    p = clean_pattern(pattern)
    cfg = config or SearchConfig()
    wanted = tuple(index.fields if fields is None else fields)
    if not wanted:
        raise SearchError("At least one field is required to search")
    usable = [f for f in wanted if index.has_field(f)]
    if len(usable) != len(wanted):
        logger.debug("Skipping unindexed fields: %s", sorted(set(wanted) - set(usable)))
    boosted = frozenset(f for f in boosted_fields if f in usable)

    kind = classify_pattern(p, PatternThresholds.from_config(cfg))
    exact: List[int] = []
    if kind is PatternKind.SPECIFIC:
        exact = _exact_phase(index, p, usable, boosted)
    fuzzy = _fuzzy_phase(index, p, kind, usable, boosted, set(exact), cfg)

    logger.debug(
        "Pattern %r classified %s: %d exact/substring hit(s), %d fuzzy hit(s)",
        p,
        kind.value,
        len(exact),
        len(fuzzy),
    )
    return exact + fuzzy


def search_records(
    records: Sequence[T],
    pattern: str,
    declaration: FieldDeclaration,
    *,
    config: Optional[SearchConfig] = None,
) -> List[T]:
    """Index ``records``, match ``pattern``, and return the matching records in rank order."""
    clean_pattern(pattern)
    index = build_index(records, declaration.searchable, config=config)
    hits = fuzzy_search(
        index, pattern, declaration.searchable, declaration.boosted, config=config
    )
    return [records[i] for i in hits if 0 <= i < len(records)]
