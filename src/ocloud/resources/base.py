"""Payload helpers shared by the resource record adapters.

Exports are OCI CLI JSON, which uses kebab-case keys (``display-name``). SDK
dumps use snake_case and the REST API uses camelCase, so every lookup tries
all three spellings.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

Columns = Tuple[Tuple[str, str], ...]


def _variants(key: str) -> List[str]:
    parts = key.replace("_", "-").split("-")
    kebab = "-".join(parts)
    snake = "_".join(parts)
    camel = parts[0] + "".join(p[:1].upper() + p[1:] for p in parts[1:])
    return list(dict.fromkeys([key, kebab, snake, camel]))


def pick(payload: Optional[Mapping[str, Any]], *keys: str, default: Any = None) -> Any:
    """Return the first non-null value found under any spelling of ``keys``."""
    if not payload:
        return default
    for key in keys:
        for variant in _variants(key):
            value = payload.get(variant)
            if value is not None:
                return value
    return default


def pick_str(payload: Optional[Mapping[str, Any]], *keys: str) -> str:
    value = pick(payload, *keys)
    return "" if value is None else str(value)


def pick_int(payload: Optional[Mapping[str, Any]], *keys: str) -> Optional[int]:
    value = pick(payload, *keys)
    if value is None or value == "":
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return None


def pick_float(payload: Optional[Mapping[str, Any]], *keys: str) -> Optional[float]:
    value = pick(payload, *keys)
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def pick_bool(payload: Optional[Mapping[str, Any]], *keys: str) -> Optional[bool]:
    value = pick(payload, *keys)
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1", "enabled")
    return bool(value)


def pick_list(payload: Optional[Mapping[str, Any]], *keys: str) -> List[Any]:
    value = pick(payload, *keys)
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def pick_dict(payload: Optional[Mapping[str, Any]], *keys: str) -> Dict[str, Any]:
    value = pick(payload, *keys)
    return dict(value) if isinstance(value, Mapping) else {}


def names_of(items: Iterable[Any]) -> List[str]:
    """Display names of related resources given as strings or payload dicts."""
    out: List[str] = []
    for item in items or []:
        if isinstance(item, Mapping):
            name = pick_str(item, "display-name", "name")
        else:
            name = "" if item is None else str(item)
        if name:
            out.append(name)
    return out


def fmt_number(value: Optional[float]) -> str:
    """Render a number without a trailing ``.0``; ``None`` becomes ""."""
    if value is None:
        return ""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


class Resource:
    """Mixin for resource dataclasses: JSON-ready dicts and table cells."""

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)  # type: ignore[call-overload]

    def cells(self, columns: Columns) -> List[str]:
        out: List[str] = []
        for _, attr in columns:
            value = getattr(self, attr, "")
            if isinstance(value, (list, tuple)):
                value = ", ".join(str(v) for v in value)
            elif isinstance(value, float):
                value = fmt_number(value)
            elif value is None:
                value = ""
            out.append(str(value))
        return out
