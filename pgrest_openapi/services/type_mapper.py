"""SQL type to JSON schema type mapping."""

from pgrest_openapi.models.openapi import SwaggerType


SQL_TYPE_MAP: dict[str, SwaggerType] = {
    "character varying": SwaggerType.STRING,
    "character": SwaggerType.STRING,
    "text": SwaggerType.STRING,
    "boolean": SwaggerType.BOOLEAN,
    "smallint": SwaggerType.INTEGER,
    "integer": SwaggerType.INTEGER,
    "bigint": SwaggerType.INTEGER,
    "numeric": SwaggerType.NUMBER,
    "real": SwaggerType.NUMBER,
    "double precision": SwaggerType.NUMBER,
}


def to_swagger_type(sql_type: str) -> SwaggerType:
    """Map a PostgreSQL type name to a JSON schema type.

    Unknown types (dates, json, arrays, user types...) are exposed as strings.
    """
    return SQL_TYPE_MAP.get(sql_type, SwaggerType.STRING)
