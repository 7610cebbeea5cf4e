"""Resource tools for FastMCP.

List, fuzzy-search, and find exported OCI resources of any registered type.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from fastmcp import FastMCP

from ocloud.display import JsonRenderer
from ocloud.resources.registry import RESOURCE_TYPES
from ocloud.services import ResourceService


def register_resource_tools(mcp: FastMCP, get_state: Callable[[], Any]) -> None:
    """Register resource tools on the given FastMCP instance.

    Uses state.service when present; otherwise builds a ResourceService from
    state.connector and state.settings.
    """

    def _service(state_obj: Any) -> ResourceService:
        service = getattr(state_obj, "service", None)
        if service is not None:
            return service
        connector = getattr(state_obj, "connector", None)
        if connector is None:
            raise RuntimeError(
                "No export connector configured. Set OCLOUD_EXPORT__DIRECTORY or OCLOUD_EXPORT__BASE_URL."
            )
        return ResourceService(connector, getattr(state_obj, "settings", None))

    @mcp.tool
    def resource_types() -> List[Dict[str, Any]]:
        """List the resource types that can be listed, searched and found."""
        return [
            {
                "key": rt.key,
                "title": rt.title,
                "searchable_fields": list(rt.fields.searchable),
                "boosted_fields": list(rt.fields.boosted),
            }
            for rt in RESOURCE_TYPES.values()
        ]

    @mcp.tool
    async def resource_list(
        resource: str, limit: Optional[int] = None, page: Optional[int] = None
    ) -> Dict[str, Any]:
        """List one page of resources.

        Parameters
        ----------
        resource: str
            Resource type key, e.g. "instance" or "vcn".
        limit: int | None
            Records per page (default from settings, 20).
        page: int | None
            1-based page number; pages past the end are empty.
        """
        service = _service(get_state())
        result = await service.list(resource, limit=limit, page=page)
        return JsonRenderer.payload(result.items, result)

    @mcp.tool
    async def resource_search(resource: str, pattern: str) -> Dict[str, Any]:
        """Fuzzy-search resources, best match first.

        Identifier-like patterns (OCIDs, IPs, CIDRs, FQDNs) prefer exact and
        substring hits; short free text tolerates typos and partial words.
        """
        service = _service(get_state())
        matches = await service.search(resource, pattern)
        return JsonRenderer.payload(matches)

    @mcp.tool
    async def resource_find(resource: str, name: str) -> Dict[str, Any]:
        """Find resources by exact case-insensitive name, falling back to partial names."""
        service = _service(get_state())
        matches = await service.find(resource, name)
        return JsonRenderer.payload(matches)
