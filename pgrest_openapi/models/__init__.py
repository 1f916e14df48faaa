"""Data models for pgrest-openapi."""

from pgrest_openapi.models.schema import (
    Table,
    ForeignKey,
    Column,
    PrimaryKey,
    PgArg,
    ProcDescription,
    Proxy,
    TableEntry,
)
from pgrest_openapi.models.openapi import (
    SwaggerType,
    ParamLocation,
    Scheme,
    Reference,
    SchemaObject,
    Parameter,
    Response,
    Operation,
    PathItem,
    Info,
    ExternalDocs,
    Host,
    OpenAPIDocument,
)

__all__ = [
    "Table",
    "ForeignKey",
    "Column",
    "PrimaryKey",
    "PgArg",
    "ProcDescription",
    "Proxy",
    "TableEntry",
    "SwaggerType",
    "ParamLocation",
    "Scheme",
    "Reference",
    "SchemaObject",
    "Parameter",
    "Response",
    "Operation",
    "PathItem",
    "Info",
    "ExternalDocs",
    "Host",
    "OpenAPIDocument",
]
