"""OpenAPI 2.0 document models.

Every node is a frozen pydantic model built in one expression. Optional
fields default to ``None`` and are dropped on serialization, so the JSON
only carries what was set. Mappings are plain dicts and keep insertion
order, which is the order tables and procedures were supplied in.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class SwaggerType(str, Enum):
    """JSON schema primitive types."""

    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    OBJECT = "object"
    ARRAY = "array"


class ParamLocation(str, Enum):
    """Where a parameter is carried in the request."""

    QUERY = "query"
    HEADER = "header"
    BODY = "body"


class Scheme(str, Enum):
    """Transfer protocol of the API."""

    HTTP = "http"
    HTTPS = "https"


class OpenAPIModel(BaseModel):
    """Base for document nodes."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_dict(self) -> dict:
        """Dump the node as JSON-compatible data using OpenAPI key names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Reference(OpenAPIModel):
    """JSON reference to a named definition or parameter."""

    ref: str = Field(alias="$ref")

    @classmethod
    def definition(cls, name: str) -> "Reference":
        return cls(ref=f"#/definitions/{name}")

    @classmethod
    def parameter(cls, name: str) -> "Reference":
        return cls(ref=f"#/parameters/{name}")


class SchemaObject(OpenAPIModel):
    """Schema of a JSON value."""

    description: Optional[str] = None
    type: Optional[SwaggerType] = None
    format: Optional[str] = None
    max_length: Optional[int] = Field(default=None, alias="maxLength")
    default: Optional[Any] = None
    enum: Optional[list[Any]] = None
    required: Optional[list[str]] = None
    properties: Optional[dict[str, "SchemaObject"]] = None
    items: Optional[Reference] = None


class Parameter(OpenAPIModel):
    """Operation parameter.

    Body parameters carry ``schema``; query and header parameters describe
    their value inline with ``type``, ``format``, ``enum`` and ``default``.
    """

    name: str
    in_: ParamLocation = Field(alias="in")
    description: Optional[str] = None
    required: Optional[bool] = None
    schema_: Optional[Union[Reference, SchemaObject]] = Field(
        default=None, alias="schema"
    )
    type: Optional[SwaggerType] = None
    format: Optional[str] = None
    enum: Optional[list[Any]] = None
    default: Optional[Any] = None


class Response(OpenAPIModel):
    """Operation response."""

    description: str
    schema_: Optional[SchemaObject] = Field(default=None, alias="schema")


class Operation(OpenAPIModel):
    """Single HTTP verb endpoint."""

    tags: list[str] = Field(default_factory=list)
    summary: Optional[str] = None
    description: Optional[str] = None
    parameters: Optional[list[Union[Reference, Parameter]]] = None
    produces: Optional[list[str]] = None
    responses: dict[str, Response] = Field(default_factory=dict)


class PathItem(OpenAPIModel):
    """Operations exposed on one path template."""

    get: Optional[Operation] = None
    post: Optional[Operation] = None
    patch: Optional[Operation] = None
    delete: Optional[Operation] = None


class Info(OpenAPIModel):
    """API metadata."""

    version: str
    title: str
    description: Optional[str] = None


class ExternalDocs(OpenAPIModel):
    """Link to external documentation."""

    description: Optional[str] = None
    url: str


class Host(OpenAPIModel):
    """Host name and port, serialized as ``name:port``."""

    name: str
    port: Optional[int] = None

    @model_serializer
    def serialize_host(self) -> str:
        if self.port is None:
            return self.name
        return f"{self.name}:{self.port}"


class OpenAPIDocument(OpenAPIModel):
    """Top-level OpenAPI 2.0 document."""

    swagger: str = "2.0"
    info: Info
    external_docs: Optional[ExternalDocs] = Field(default=None, alias="externalDocs")
    host: Optional[Host] = None
    base_path: Optional[str] = Field(default=None, alias="basePath")
    schemes: list[Scheme] = Field(default_factory=list)
    definitions: dict[str, SchemaObject] = Field(default_factory=dict)
    parameters: dict[str, Parameter] = Field(default_factory=dict)
    paths: dict[str, PathItem] = Field(default_factory=dict)
    produces: list[str] = Field(default_factory=list)
    consumes: list[str] = Field(default_factory=list)

    def to_json(self) -> bytes:
        """Encode the document as JSON bytes."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode()
