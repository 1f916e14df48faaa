"""OpenAPI document assembly."""

import logging
from typing import Iterable, NamedTuple, Optional

from pgrest_openapi.models.openapi import (
    ExternalDocs,
    Host,
    Info,
    OpenAPIDocument,
    Scheme,
)
from pgrest_openapi.models.schema import PrimaryKey, ProcDescription, TableEntry
from pgrest_openapi.services.definitions import make_definitions
from pgrest_openapi.services.parameters import make_param_defs
from pgrest_openapi.services.paths import make_path_items
from pgrest_openapi.utils.constants import (
    API_TITLE,
    DEFAULT_API_DESCRIPTION,
    DOCS_BASE_URL,
    DOCS_VERSION,
    PRODUCT_VERSION,
    WILDCARD_HOSTS,
    ContentType,
)

logger = logging.getLogger("openapi-document")

MEDIA_TYPES = [
    ContentType.APPLICATION_JSON.value,
    ContentType.SINGULAR_JSON.value,
    ContentType.TEXT_CSV.value,
]


class ServerLocation(NamedTuple):
    """Where the API is reachable: (scheme, host, port, base path)."""

    scheme: str
    host: str
    port: int
    base_path: str


def escape_host_name(host: str) -> str:
    """Replace wildcard listen hosts with ``0.0.0.0``."""
    return "0.0.0.0" if host in WILDCARD_HOSTS else host


def to_scheme(scheme: str) -> Scheme:
    """Only the exact string ``http`` is plain HTTP; anything else is HTTPS."""
    return Scheme.HTTP if scheme == "http" else Scheme.HTTPS


def postgrest_spec(
    procs: Iterable[ProcDescription],
    entries: Iterable[TableEntry],
    location: tuple[str, str, int, str],
    description: Optional[str],
    pks: Iterable[PrimaryKey]
) -> OpenAPIDocument:
    """Assemble the OpenAPI document of the API.

    Args:
        procs: Stored procedures exposed under ``/rpc``.
        entries: The (table, columns, annotations) triples of exposed tables.
        location: The (scheme, host, port, base path) the API is served at.
        description: Custom API description; a default sentence is used
            when None.
        pks: Primary keys of all tables.

    Returns:
        The OpenAPI document.
    """
    scheme, host, port, base_path = location
    entries = list(entries)
    pks = list(pks)
    procs = list(procs)

    logger.info(
        "Building OpenAPI document for %d tables and %d procedures",
        len(entries), len(procs)
    )

    return OpenAPIDocument(
        base_path=base_path,
        schemes=[to_scheme(scheme)],
        info=Info(
            version=PRODUCT_VERSION,
            title=API_TITLE,
            description=description if description is not None else DEFAULT_API_DESCRIPTION,
        ),
        external_docs=ExternalDocs(
            description="PostgREST Documentation",
            url=f"{DOCS_BASE_URL}{DOCS_VERSION}/api.html",
        ),
        host=Host(name=escape_host_name(host), port=port),
        definitions=make_definitions(pks, entries),
        parameters=make_param_defs(entries),
        paths=make_path_items(procs, entries),
        produces=list(MEDIA_TYPES),
        consumes=list(MEDIA_TYPES),
    )


def encode_openapi(
    procs: Iterable[ProcDescription],
    entries: Iterable[TableEntry],
    location: tuple[str, str, int, str],
    description: Optional[str],
    pks: Iterable[PrimaryKey]
) -> bytes:
    """Assemble the OpenAPI document and encode it as JSON."""
    return postgrest_spec(procs, entries, location, description, pks).to_json()
