# tests/test_config.py
"""Tests for configuration management."""

import pytest

from pgrest_openapi.config import Settings
from pgrest_openapi.models.schema import Proxy


class TestSettings:
    """Settings test suite."""

    def test_default_values(self):
        """Test default configuration values."""
        settings = Settings()
        assert settings.server_scheme == "http"
        assert settings.server_host == "!4"
        assert settings.server_port == 3000
        assert settings.base_path == "/"
        assert settings.openapi_server_proxy_uri is None
        assert settings.api_description is None
        assert settings.openapi_cache_ttl == 3600

    def test_env_prefix(self, monkeypatch):
        """Test settings are read from prefixed environment variables."""
        monkeypatch.setenv("PGREST_OPENAPI_SERVER_PORT", "8080")
        monkeypatch.setenv("PGREST_OPENAPI_API_DESCRIPTION", "From env")
        settings = Settings()
        assert settings.server_port == 8080
        assert settings.api_description == "From env"

    def test_server_location_without_proxy(self):
        """Test the server's own location is used without a proxy."""
        settings = Settings(
            server_scheme="https",
            server_host="db.local",
            server_port=4000,
            base_path="/api"
        )
        assert settings.get_proxy() is None
        assert settings.get_server_location() == ("https", "db.local", 4000, "/api")

    def test_server_location_with_proxy(self):
        """Test the proxy location replaces the server's."""
        settings = Settings(openapi_server_proxy_uri="http://localhost/db")
        assert settings.get_proxy() == Proxy(
            scheme="http", host="localhost", port=80, path="/db"
        )
        location = settings.get_server_location()
        assert location.scheme == "http"
        assert location.host == "localhost"
        assert location.port == 80
        assert location.base_path == "/db"

    @pytest.mark.parametrize("uri", ["localhost:3000", "https://user@example.com"])
    def test_malformed_proxy_ignored(self, uri):
        """Test malformed proxy URIs fall back to the server location."""
        settings = Settings(openapi_server_proxy_uri=uri, server_host="*")
        assert settings.get_proxy() is None
        assert settings.get_server_location().host == "*"

    def test_mcp_settings(self):
        """Test MCP server settings."""
        settings = Settings(
            mcp_host="127.0.0.1",
            mcp_port=9000
        )
        assert settings.mcp_host == "127.0.0.1"
        assert settings.mcp_port == 9000
