"""MCP OpenAPI tool implementation."""

import logging

from mcp.server.fastmcp import FastMCP

from pgrest_openapi.services.openapi_service import OpenAPIService
from pgrest_openapi.utils.exceptions import PgRestOpenAPIError

logger = logging.getLogger("openapi-tool")


def register_openapi_tool(
    mcp: FastMCP,
    openapi_service: OpenAPIService
) -> None:
    """Register the OpenAPI tool with the MCP server.

    Args:
        mcp: The FastMCP server instance.
        openapi_service: The OpenAPI service instance.
    """

    @mcp.tool()
    async def get_openapi(refresh: bool = False) -> dict:
        """
        Get the OpenAPI 2.0 description of the REST API.

        Args:
            refresh: Rebuild the document instead of using the cached one.

        Returns:
            The OpenAPI document.
        """
        try:
            cached = openapi_service.is_cached() and not refresh
            document = openapi_service.get_document(force_refresh=refresh)
            return {
                "status": "success",
                "cached": cached,
                "data": document.to_dict()
            }
        except PgRestOpenAPIError as e:
            logger.error("OpenAPI document build failed: %s", e.message)
            return e.to_dict()
