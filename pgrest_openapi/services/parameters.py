"""Reusable parameter definitions for the OpenAPI document."""

import logging
from typing import Iterable

from pgrest_openapi.models.openapi import (
    ParamLocation,
    Parameter,
    Reference,
    SwaggerType,
)
from pgrest_openapi.models.schema import Column, TableEntry

logger = logging.getLogger("openapi-parameters")

PREFER_PARAMS = "preferParams"
PREFER_RETURN = "preferReturn"
PREFER_COUNT = "preferCount"


def body_param_key(table_name: str) -> str:
    return f"body.{table_name}"


def row_filter_key(table_name: str, column_name: str) -> str:
    return ".".join(["rowFilter", table_name, column_name])


def make_prefer_param(values: list[str]) -> Parameter:
    """Build an optional ``Prefer`` header restricted to the given values."""
    return Parameter(
        name="Prefer",
        in_=ParamLocation.HEADER,
        description="Preference",
        required=False,
        type=SwaggerType.STRING,
        enum=list(values),
    )


def _optional_string(name: str, location: ParamLocation, description: str, **extra) -> Parameter:
    return Parameter(
        name=name,
        in_=location,
        description=description,
        required=False,
        type=SwaggerType.STRING,
        **extra,
    )


def make_generic_params() -> dict[str, Parameter]:
    """Parameters shared by every table and procedure."""
    return {
        PREFER_PARAMS: make_prefer_param(["params=single-object"]),
        PREFER_RETURN: make_prefer_param(
            ["return=representation", "return=minimal", "return=none"]
        ),
        PREFER_COUNT: make_prefer_param(["count=none"]),
        "select": _optional_string("select", ParamLocation.QUERY, "Filtering Columns"),
        "on_conflict": _optional_string("on_conflict", ParamLocation.QUERY, "On Conflict"),
        "order": _optional_string("order", ParamLocation.QUERY, "Ordering"),
        "Range": _optional_string("Range", ParamLocation.HEADER, "Limiting and Pagination"),
        "Range-Unit": _optional_string(
            "Range-Unit", ParamLocation.HEADER, "Limiting and Pagination", default="items"
        ),
        "offset": _optional_string("offset", ParamLocation.QUERY, "Limiting and Pagination"),
        "limit": _optional_string("limit", ParamLocation.QUERY, "Limiting and Pagination"),
    }


def make_object_body(table_name: str) -> tuple[str, Parameter]:
    """Build the request body parameter of a table."""
    return body_param_key(table_name), Parameter(
        name=table_name,
        in_=ParamLocation.BODY,
        description=table_name,
        required=False,
        schema_=Reference.definition(table_name),
    )


def make_row_filter(table_name: str, column: Column) -> tuple[str, Parameter]:
    """Build the query parameter filtering a table on one column."""
    return row_filter_key(table_name, column.name), Parameter(
        name=column.name,
        in_=ParamLocation.QUERY,
        description=column.description,
        required=False,
        type=SwaggerType.STRING,
        format=column.type,
    )


def make_param_defs(entries: Iterable[TableEntry]) -> dict[str, Parameter]:
    """Build the parameter catalog.

    Args:
        entries: The (table, columns, annotations) triples.

    Returns:
        The generic parameters followed, per table, by its body parameter
        and one row filter per column.
    """
    params = make_generic_params()
    for table, columns, _ in entries:
        key, body = make_object_body(table.name)
        params[key] = body
        params.update(make_row_filter(table.name, c) for c in columns)
    logger.debug("Built %d parameter definitions", len(params))
    return params
