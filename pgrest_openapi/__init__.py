"""OpenAPI 2.0 description generator for PostgREST database schemas."""

__version__ = "0.1.0"
