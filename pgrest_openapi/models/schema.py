"""Introspected database structure models."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Table(BaseModel):
    """Table information model."""

    schema_name: str = Field(default="public", alias="schema")
    name: str
    description: Optional[str] = None
    insertable: bool = False

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ForeignKey(BaseModel):
    """Column referenced by a foreign key."""

    table: Table
    column: str

    model_config = ConfigDict(frozen=True)


class Column(BaseModel):
    """Column information model.

    ``default`` holds the column default as encoded JSON literal text and
    ``enum`` the labels of the column's enum type, if any.
    """

    table: Table
    name: str
    type: str
    nullable: bool = True
    max_len: Optional[int] = None
    default: Optional[str] = None
    enum: list[str] = Field(default_factory=list)
    description: Optional[str] = None
    fk: Optional[ForeignKey] = None

    model_config = ConfigDict(frozen=True)


class PrimaryKey(BaseModel):
    """Primary key column model."""

    table: Table
    name: str

    model_config = ConfigDict(frozen=True)


class PgArg(BaseModel):
    """Stored procedure argument."""

    name: str
    type: str
    required: bool = True

    model_config = ConfigDict(frozen=True)


class ProcDescription(BaseModel):
    """Stored procedure signature model."""

    name: str
    description: Optional[str] = None
    args: list[PgArg] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class Proxy(BaseModel):
    """Location of a reverse proxy in front of the API."""

    scheme: str
    host: str
    port: int
    path: str

    model_config = ConfigDict(frozen=True)


# (table, ordered columns, extra annotations); the annotations are unused
TableEntry = tuple[Table, list[Column], list[str]]
