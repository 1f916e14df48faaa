"""MCP tools for pgrest-openapi."""

from pgrest_openapi.tools.openapi import register_openapi_tool

__all__ = [
    "register_openapi_tool",
]
