"""Table definitions (object schemas) for the OpenAPI document."""

import json
import logging
from typing import Any, Iterable, Optional

from pgrest_openapi.models.openapi import SchemaObject, SwaggerType
from pgrest_openapi.models.schema import Column, ForeignKey, PrimaryKey, TableEntry
from pgrest_openapi.services.type_mapper import to_swagger_type

logger = logging.getLogger("openapi-definitions")

_NOTE_HEADING = "Note:"
_PK_NOTE = "This is a Primary Key.<pk/>"


def _fk_note(fk: ForeignKey) -> str:
    table, column = fk.table.name, fk.column
    return (
        f"This is a Foreign Key to `{table}.{column}`."
        f"<fk table='{table}' column='{column}'/>"
    )


def _decode_default(default: Optional[str]) -> Optional[Any]:
    """Decode a column default stored as JSON literal text.

    Defaults that are not JSON literals (expressions like ``now()``) are dropped.
    """
    if default is None:
        return None
    try:
        return json.loads(default)
    except json.JSONDecodeError:
        return None


def _is_primary_key(pks: list[PrimaryKey], column: Column) -> bool:
    # Tables are identified by schema and name only
    key = (column.table.schema_name, column.table.name, column.name)
    return any((pk.table.schema_name, pk.table.name, pk.name) == key for pk in pks)


def column_description(pks: list[PrimaryKey], column: Column) -> Optional[str]:
    """Build a column description annotated with key notes.

    Args:
        pks: Primary keys of all tables.
        column: The column to describe.

    Returns:
        The column's own description followed by a blank line and the notes,
        or the bare description when the column is neither a primary nor a
        foreign key.
    """
    notes = [_NOTE_HEADING]
    if _is_primary_key(pks, column):
        notes.append(_PK_NOTE)
    if column.fk is not None:
        notes.append(_fk_note(column.fk))

    if len(notes) < 2:
        return column.description

    prefix = f"{column.description}\n\n" if column.description is not None else ""
    return prefix + "\n".join(notes)


def make_property(pks: list[PrimaryKey], column: Column) -> tuple[str, SchemaObject]:
    """Build the inline schema of a single column."""
    return column.name, SchemaObject(
        default=_decode_default(column.default),
        description=column_description(pks, column),
        enum=list(column.enum) if column.enum else None,
        format=column.type,
        max_length=column.max_len,
        type=to_swagger_type(column.type),
    )


def make_table_def(pks: list[PrimaryKey], entry: TableEntry) -> tuple[str, SchemaObject]:
    """Build the object schema of a table.

    Args:
        pks: Primary keys of all tables.
        entry: The (table, columns, annotations) triple.

    Returns:
        The table name and its schema.
    """
    table, columns, _ = entry
    required = [c.name for c in columns if not c.nullable]
    properties = dict(make_property(pks, c) for c in columns)
    return table.name, SchemaObject(
        description=table.description,
        type=SwaggerType.OBJECT,
        properties=properties or None,
        required=required or None,
    )


def make_definitions(
    pks: list[PrimaryKey],
    entries: Iterable[TableEntry]
) -> dict[str, SchemaObject]:
    """Build all table definitions, keyed by table name in input order."""
    definitions = dict(make_table_def(pks, entry) for entry in entries)
    logger.debug("Built %d table definitions", len(definitions))
    return definitions
