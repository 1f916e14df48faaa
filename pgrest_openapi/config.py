"""Configuration management for pgrest-openapi."""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional

from pgrest_openapi.models.schema import Proxy
from pgrest_openapi.services.document import ServerLocation
from pgrest_openapi.services.proxy import pick_proxy


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API server location
    server_scheme: str = "http"
    server_host: str = "!4"
    server_port: int = 3000
    base_path: str = "/"

    # Reverse proxy in front of the API server
    openapi_server_proxy_uri: Optional[str] = Field(
        default=None,
        description="URI advertised in the document instead of the server's own"
    )

    # Document content
    api_description: Optional[str] = None
    snapshot_path: str = "db_structure.json"
    openapi_cache_ttl: int = 3600

    # Observability configuration
    log_level: str = "INFO"

    # MCP configuration
    mcp_host: str = "0.0.0.0"
    mcp_port: int = 8989

    class Config:
        env_prefix = "PGREST_OPENAPI_"

    def get_proxy(self) -> Optional[Proxy]:
        """Decode the configured proxy URI.

        Returns:
            The proxy location, or None if no usable proxy is configured.
        """
        return pick_proxy(self.openapi_server_proxy_uri)

    def get_server_location(self) -> ServerLocation:
        """Get the location the document advertises.

        Returns:
            The proxy's location when one is configured, else the server's.
        """
        proxy = self.get_proxy()
        if proxy is not None:
            return ServerLocation(proxy.scheme, proxy.host, proxy.port, proxy.path)
        return ServerLocation(
            self.server_scheme, self.server_host, self.server_port, self.base_path
        )
