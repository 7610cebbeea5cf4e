"""Tag flattening helpers used by the per-domain indexable adapters.

Tags are exposed twice: ``key:value`` pairs so ``env:prod`` matches, and bare
values so ``prod`` alone matches without the key prefix.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

FreeformTags = Optional[Mapping[str, Any]]
DefinedTags = Optional[Mapping[str, Optional[Mapping[str, Any]]]]


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def flatten_tags(freeform: FreeformTags, defined: DefinedTags) -> str:
    """Flatten tags to ``key:value`` and ``namespace.key:value`` tokens, space-joined."""
    parts: List[str] = []
    for key, value in (freeform or {}).items():
        text = _as_text(value)
        if not key or not text:
            continue
        parts.append(f"{key.lower()}:{text.lower()}")
    for namespace, kv in (defined or {}).items():
        if not namespace or not kv:
            continue
        for key, value in kv.items():
            text = _as_text(value)
            if not key or not text:
                continue
            parts.append(f"{namespace.lower()}.{key.lower()}:{text.lower()}")
    return " ".join(parts)


def extract_tag_values(freeform: FreeformTags, defined: DefinedTags) -> str:
    """Collect only tag values (freeform and defined), space-joined."""
    values: List[str] = []
    for value in (freeform or {}).values():
        text = _as_text(value)
        if text:
            values.append(text.lower())
    for kv in (defined or {}).values():
        for value in (kv or {}).values():
            text = _as_text(value)
            if text:
                values.append(text.lower())
    return " ".join(values)


def tag_fields(freeform: FreeformTags, defined: DefinedTags) -> Dict[str, str]:
    """Return the ``TagsKV``/``TagsVal`` pair every tagged domain indexes."""
    return {
        "TagsKV": flatten_tags(freeform, defined),
        "TagsVal": extract_tag_values(freeform, defined),
    }
