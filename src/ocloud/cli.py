"""CLI entry points: ocloud <resource> list, ocloud <resource> search, ocloud <resource> find."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Awaitable, TypeVar

import click

from ocloud.config import load_settings
from ocloud.connectors.export import make_connector
from ocloud.display import make_renderer
from ocloud.exceptions import OcloudError
from ocloud.log import configure_logging
from ocloud.resources.registry import RESOURCE_TYPES, ResourceType
from ocloud.services import ResourceService

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _run(coro: Awaitable[T]) -> T:
    try:
        return asyncio.run(coro)  # type: ignore[arg-type]
    except OcloudError as exc:
        raise click.ClickException(str(exc)) from exc


def _service(ctx: click.Context) -> ResourceService:
    obj = ctx.find_root().obj
    if "service" not in obj:
        settings = obj["settings"]
        connector = obj.get("connector") or make_connector(settings)
        obj["service"] = ResourceService(connector, settings)
    return obj["service"]


@click.group()
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option(
    "--export-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding <resource>.json exports",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, export_dir: Path | None) -> None:
    """Browse, paginate and fuzzy-search exported OCI resources."""
    ctx.ensure_object(dict)
    try:
        settings = ctx.obj.get("settings") or load_settings()
    except OcloudError as exc:
        raise click.ClickException(str(exc)) from exc
    if export_dir is not None:
        settings.export.directory = str(export_dir)
        settings.export.base_url = None
    ctx.obj["settings"] = settings
    try:
        configure_logging(log_level or settings.app.log_level)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level") from exc


def _resource_group(rt: ResourceType) -> click.Group:
    @click.group(name=rt.key, help=f"Operations on {rt.title}.")
    def group() -> None:
        pass

    json_option = click.option("--json", "-j", "use_json", is_flag=True, help="Output JSON")

    @group.command(name="list")
    @click.option("--limit", "-m", type=int, default=None, help="Records per page")
    @click.option("--page", "-p", type=int, default=None, help="Page number (1-based)")
    @json_option
    @click.pass_context
    def list_cmd(ctx: click.Context, limit: int | None, page: int | None, use_json: bool) -> None:
        """List records one page at a time."""
        service = _service(ctx)
        result = _run(service.list(rt.key, limit=limit, page=page))
        renderer = make_renderer(use_json, service.settings.tenancy)
        renderer.render_records(result.items, rt, result)

    @group.command(name="search")
    @click.argument("pattern")
    @json_option
    @click.pass_context
    def search_cmd(ctx: click.Context, pattern: str, use_json: bool) -> None:
        """Fuzzy-search records by name, identifier, address, tags and more."""
        service = _service(ctx)
        matches = _run(service.search(rt.key, pattern))
        make_renderer(use_json, service.settings.tenancy).render_records(matches, rt)

    @group.command(name="find")
    @click.argument("name")
    @json_option
    @click.pass_context
    def find_cmd(ctx: click.Context, name: str, use_json: bool) -> None:
        """Find records by exact (or partial) name."""
        service = _service(ctx)
        matches = _run(service.find(rt.key, name))
        make_renderer(use_json, service.settings.tenancy).render_records(matches, rt)

    return group


for _rt in RESOURCE_TYPES.values():
    cli.add_command(_resource_group(_rt))


def main(argv: Any = None) -> None:
    cli.main(args=argv, prog_name="ocloud")


if __name__ == "__main__":  # pragma: no cover
    main()
