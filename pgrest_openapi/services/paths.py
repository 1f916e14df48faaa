"""Path items for tables, stored procedures and the document root."""

import logging
from typing import Iterable, Optional

from pgrest_openapi.models.openapi import (
    Operation,
    ParamLocation,
    Parameter,
    PathItem,
    Reference,
    Response,
    SchemaObject,
    SwaggerType,
)
from pgrest_openapi.models.schema import PgArg, ProcDescription, TableEntry
from pgrest_openapi.services.parameters import (
    PREFER_COUNT,
    PREFER_PARAMS,
    PREFER_RETURN,
    body_param_key,
    row_filter_key,
)
from pgrest_openapi.services.type_mapper import to_swagger_type
from pgrest_openapi.utils.constants import ContentType

logger = logging.getLogger("openapi-paths")

READ_PARAMS = ["select", "order", "Range", "Range-Unit", "offset", "limit", PREFER_COUNT]


def split_description(text: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    """Split a description into summary and body.

    The first line becomes the summary. The remainder, with leading newlines
    stripped so a blank line may separate the two, becomes the description;
    an empty remainder yields no description.

    Args:
        text: The table or procedure description.

    Returns:
        A (summary, description) pair.
    """
    if text is None:
        return None, None
    summary, _, rest = text.partition("\n")
    return summary, rest.lstrip("\n") or None


def _refs(keys: Iterable[str]) -> list[Reference]:
    return [Reference.parameter(key) for key in keys]


def make_path_item(entry: TableEntry) -> tuple[str, PathItem]:
    """Build the CRUD path item of a table.

    Args:
        entry: The (table, columns, annotations) triple.

    Returns:
        The ``/<table>`` path and its item; write operations are only
        present for insertable tables.
    """
    table, columns, _ = entry
    tn = table.name
    summary, description = split_description(table.description)
    row_filters = [row_filter_key(tn, c.name) for c in columns]

    def operation(params: list[str], responses: dict[str, Response]) -> Operation:
        return Operation(
            tags=[tn],
            summary=summary,
            description=description,
            parameters=_refs(params),
            responses=responses,
        )

    get_op = operation(
        row_filters + READ_PARAMS,
        {
            "200": Response(
                description="OK",
                schema_=SchemaObject(
                    type=SwaggerType.ARRAY,
                    items=Reference.definition(tn),
                ),
            ),
            "206": Response(description="Partial Content"),
        },
    )
    if not table.insertable:
        return f"/{tn}", PathItem(get=get_op)

    return f"/{tn}", PathItem(
        get=get_op,
        post=operation(
            [body_param_key(tn), "select", PREFER_RETURN],
            {"201": Response(description="Created")},
        ),
        patch=operation(
            row_filters + [body_param_key(tn), PREFER_RETURN],
            {"204": Response(description="No Content")},
        ),
        delete=operation(
            row_filters + [PREFER_RETURN],
            {"204": Response(description="No Content")},
        ),
    )


def make_proc_property(arg: PgArg) -> tuple[str, SchemaObject]:
    return arg.name, SchemaObject(type=to_swagger_type(arg.type), format=arg.type)


def make_proc_schema(proc: ProcDescription) -> SchemaObject:
    """Build the object schema of a procedure's arguments."""
    properties = dict(make_proc_property(a) for a in proc.args)
    required = [a.name for a in proc.args if a.required]
    return SchemaObject(
        description=proc.description,
        type=SwaggerType.OBJECT,
        properties=properties or None,
        required=required or None,
    )


def make_proc_params(proc: ProcDescription) -> list[Parameter | Reference]:
    return [
        Parameter(
            name="args",
            in_=ParamLocation.BODY,
            required=True,
            schema_=make_proc_schema(proc),
        ),
        Reference.parameter(PREFER_PARAMS),
    ]


def make_proc_path_item(proc: ProcDescription) -> tuple[str, PathItem]:
    """Build the ``/rpc/<name>`` path item of a stored procedure."""
    summary, description = split_description(proc.description)
    return f"/rpc/{proc.name}", PathItem(
        post=Operation(
            tags=[f"(rpc) {proc.name}"],
            summary=summary,
            description=description,
            parameters=make_proc_params(proc),
            produces=[ContentType.APPLICATION_JSON.value, ContentType.SINGULAR_JSON.value],
            responses={"200": Response(description="OK")},
        )
    )


def make_root_path_item() -> tuple[str, PathItem]:
    """Build the path item describing this document itself."""
    return "/", PathItem(
        get=Operation(
            tags=["Introspection"],
            summary="OpenAPI description (this document)",
            produces=[ContentType.OPENAPI.value, ContentType.APPLICATION_JSON.value],
            responses={"200": Response(description="OK")},
        )
    )


def make_path_items(
    procs: Iterable[ProcDescription],
    entries: Iterable[TableEntry]
) -> dict[str, PathItem]:
    """Build the root path, then table paths, then procedure paths."""
    paths = dict(
        [make_root_path_item()]
        + [make_path_item(entry) for entry in entries]
        + [make_proc_path_item(proc) for proc in procs]
    )
    logger.debug("Built %d path items", len(paths))
    return paths
