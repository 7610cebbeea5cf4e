"""Fuzzy search over in-memory resource collections."""

from .base_search import FieldDeclaration, Indexable, join_values, normalize
from .ephemeral import EphemeralIndex, build_index
from .matcher import (
    PatternKind,
    PatternThresholds,
    classify_pattern,
    fuzzy_search,
    search_records,
)
from .tags import extract_tag_values, flatten_tags, tag_fields

__all__ = [
    "EphemeralIndex",
    "FieldDeclaration",
    "Indexable",
    "PatternKind",
    "PatternThresholds",
    "build_index",
    "classify_pattern",
    "extract_tag_values",
    "flatten_tags",
    "fuzzy_search",
    "join_values",
    "normalize",
    "search_records",
    "tag_fields",
]
