"""Tool registration modules for the ocloud MCP server."""

from .resources import register_resource_tools

__all__ = [
    "register_resource_tools",
]
