"""Render resource records as aligned text tables or JSON."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

import click

from ocloud.config import TenancyConfig
from ocloud.pagination import Page
from ocloud.resources.registry import ResourceType

Echo = Callable[[str], None]


def _default_echo(message: str) -> None:
    click.echo(message)


def report_empty(page: Optional[Page[Any]], echo: Echo = _default_echo) -> None:
    """Explain an empty result, pointing at a lower page when one exists."""
    echo("No Items found.")
    if page is not None and page.total_count > 0:
        echo(f"Page {page.page} is empty. Total records: {page.total_count}")
        if page.page > 1:
            echo(f"Try a lower page number (e.g., --page {page.page - 1})")


def format_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> List[str]:
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def line(cells: Sequence[str]) -> str:
        return "  ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    out = [line(headers), line(["-" * w for w in widths])]
    out.extend(line(r) for r in rows)
    return out


class Renderer(Protocol):
    def render_records(
        self, records: Sequence[Any], resource: ResourceType, page: Optional[Page[Any]] = None
    ) -> None: ...


class TableRenderer:
    """Plain-text table with a ``tenancy: compartment: title`` heading."""

    def __init__(self, tenancy: Optional[TenancyConfig] = None, echo: Echo = _default_echo) -> None:
        self.tenancy = tenancy or TenancyConfig()
        self.echo = echo

    def title(self, resource: ResourceType) -> str:
        return "{}: {}: {}".format(
            self.tenancy.tenancy_name or "-",
            self.tenancy.compartment_name or "-",
            resource.title,
        )

    def render_records(
        self, records: Sequence[Any], resource: ResourceType, page: Optional[Page[Any]] = None
    ) -> None:
        if not records:
            report_empty(page, self.echo)
            return
        headers = [h for h, _ in resource.columns]
        rows = [r.cells(resource.columns) for r in records]
        self.echo(self.title(resource))
        for text in format_table(headers, rows):
            self.echo(text)
        if page is not None:
            self.echo(self.footer(page))

    @staticmethod
    def footer(page: Page[Any]) -> str:
        shown = min(page.page * page.limit, page.total_count)
        text = f"Page {page.page} | {shown} of {page.total_count} | limit {page.limit}"
        if page.has_next:
            text += f" | next: --page {page.next_page_token}"
        return text


class JsonRenderer:
    """``{"items": [...], "pagination": {...} | null}`` on a single document."""

    def __init__(self, echo: Echo = _default_echo, indent: Optional[int] = 2) -> None:
        self.echo = echo
        self.indent = indent

    @staticmethod
    def payload(records: Sequence[Any], page: Optional[Page[Any]] = None) -> Dict[str, Any]:
        return {
            "items": [r.to_dict() for r in records],
            "pagination": page.pagination_info() if page is not None else None,
        }

    def render_records(
        self, records: Sequence[Any], resource: ResourceType, page: Optional[Page[Any]] = None
    ) -> None:
        self.echo(json.dumps(self.payload(records, page), indent=self.indent, default=str))


def make_renderer(use_json: bool, tenancy: Optional[TenancyConfig] = None) -> Renderer:
    return JsonRenderer() if use_json else TableRenderer(tenancy)
