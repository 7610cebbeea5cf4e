"""ocloud MCP server entrypoint using FastMCP.

Exposes list/search/find tools over exported OCI resources.
Run with:
  - ocloud-mcp
  - or: python -m ocloud.mcp.server (ensure PYTHONPATH includes ./src)
"""
from __future__ import annotations

from typing import Optional

from fastmcp import FastMCP

from ocloud.config import Settings, load_settings
from ocloud.connectors.base_connector import BaseConnector
from ocloud.connectors.export import make_connector
from ocloud.log import configure_logging
from ocloud.mcp.tools import register_resource_tools
from ocloud.services import ResourceService


class AppState:
    """Application state shared by MCP tools."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.connector: Optional[BaseConnector] = None
        self.service: Optional[ResourceService] = None

    def init_connectors(self) -> None:
        """Initialize the export connector and service from configuration."""
        self.connector = make_connector(self.settings)
        self.service = ResourceService(self.connector, self.settings)


# Global state and server instance
_state: Optional[AppState] = None
mcp = FastMCP("ocloud MCP Server")


# ----- Tools -----

@mcp.tool
def health() -> str:
    """Simple health check tool."""
    return "ok"


# ----- Entrypoint -----

def main() -> None:
    """Initialize state and run the MCP server."""
    global _state
    settings = load_settings()
    configure_logging(settings.app.log_level)
    _state = AppState(settings)
    _state.init_connectors()
    register_resource_tools(mcp, get_state=lambda: _state)
    # Choose transport based on configuration: stdio (default), http, or sse
    transport = settings.app.transport
    if transport in ("http", "sse"):
        mcp.run(transport=transport, host=settings.app.host, port=settings.app.port)
    else:
        mcp.run()


if __name__ == "__main__":  # pragma: no cover
    main()
