"""Main entry point for pgrest-openapi."""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from mcp.server.fastmcp import FastMCP

from pgrest_openapi.config import Settings
from pgrest_openapi.services.introspection import load_db_structure
from pgrest_openapi.services.openapi_service import OpenAPIService
from pgrest_openapi.tools.openapi import register_openapi_tool
from pgrest_openapi.utils.exceptions import PgRestOpenAPIError


logger = logging.getLogger("pgrest_openapi")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="OpenAPI description generator for PostgREST schemas"
    )
    parser.add_argument(
        "--snapshot",
        type=str,
        help="Path of the database structure snapshot (JSON)"
    )
    parser.add_argument(
        "--proxy-uri",
        type=str,
        help="URI of a reverse proxy in front of the API"
    )
    parser.add_argument(
        "--description",
        type=str,
        help="Custom API description"
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the OpenAPI document and exit instead of serving it over MCP"
    )
    return parser


def apply_args(settings: Settings, args: argparse.Namespace) -> Settings:
    """Override settings with command line arguments.

    Args:
        settings: Settings loaded from the environment.
        args: Parsed command line arguments.

    Returns:
        The updated settings.
    """
    overrides = {}
    if args.snapshot:
        overrides["snapshot_path"] = args.snapshot
    if args.proxy_uri:
        overrides["openapi_server_proxy_uri"] = args.proxy_uri
    if args.description:
        overrides["api_description"] = args.description
    return settings.model_copy(update=overrides)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = apply_args(Settings(), args)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    try:
        structure = load_db_structure(settings.snapshot_path)
        service = OpenAPIService(settings, structure)
        if args.dump:
            sys.stdout.write(service.encode().decode("utf-8") + "\n")
            return 0
    except PgRestOpenAPIError as e:
        logger.error("%s (%s)", e.message, e.details)
        return 1

    logger.info("Starting pgrest-openapi MCP server")
    asyncio.run(run_server(settings, service))
    return 0


async def run_server(settings: Settings, service: OpenAPIService) -> None:
    """Run the MCP server.

    Args:
        settings: Application settings.
        service: The OpenAPI service to expose.
    """
    mcp = FastMCP("pgrest-openapi", host=settings.mcp_host, port=settings.mcp_port)
    register_openapi_tool(mcp, service)

    logger.info("pgrest-openapi server ready; starting event loop")
    await mcp.run_sse_async()


if __name__ == "__main__":
    sys.exit(main())
