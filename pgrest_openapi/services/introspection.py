"""Database structure loaded from an introspection snapshot.

The snapshot is a JSON document produced by the schema cache of the API
server. Tables, columns, keys and procedures are listed flat and columns
refer to their table by name:

    {
      "tables": [{"schema": "public", "name": "orders", "insertable": true}],
      "columns": [{"table": "orders", "name": "id", "type": "integer",
                   "nullable": false}],
      "primary_keys": [{"table": "orders", "name": "id"}],
      "procs": [{"name": "add", "args": [{"name": "a", "type": "integer"}]}]
    }
"""

import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pgrest_openapi.models.schema import (
    Column,
    ForeignKey,
    PrimaryKey,
    ProcDescription,
    Table,
    TableEntry,
)
from pgrest_openapi.utils.exceptions import SnapshotLoadError

logger = logging.getLogger("introspection")


class SnapshotForeignKey(BaseModel):
    """Snapshot foreign key target."""

    table: str
    column: str


class SnapshotColumn(BaseModel):
    """Snapshot column row."""

    table: str
    name: str
    type: str
    nullable: bool = True
    max_len: Optional[int] = None
    default: Optional[str] = None
    enum: list[str] = Field(default_factory=list)
    description: Optional[str] = None
    fk: Optional[SnapshotForeignKey] = None


class SnapshotPrimaryKey(BaseModel):
    """Snapshot primary key row."""

    table: str
    name: str


class DbSnapshot(BaseModel):
    """Raw introspection snapshot."""

    tables: list[Table] = Field(default_factory=list)
    columns: list[SnapshotColumn] = Field(default_factory=list)
    primary_keys: list[SnapshotPrimaryKey] = Field(default_factory=list)
    procs: list[ProcDescription] = Field(default_factory=list)


class DbStructure(BaseModel):
    """Resolved database structure."""

    tables: list[Table] = Field(default_factory=list)
    columns: list[Column] = Field(default_factory=list)
    primary_keys: list[PrimaryKey] = Field(default_factory=list)
    procs: list[ProcDescription] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_snapshot(cls, snapshot: DbSnapshot) -> "DbStructure":
        """Resolve table names in a snapshot to table models.

        Args:
            snapshot: The raw snapshot.

        Returns:
            The resolved structure.

        Raises:
            SnapshotLoadError: If a column or primary key names an unknown table.
        """
        by_name = {t.name: t for t in snapshot.tables}

        def lookup(name: str) -> Table:
            try:
                return by_name[name]
            except KeyError:
                raise SnapshotLoadError(f"Unknown table '{name}' in snapshot")

        def foreign_key(fk: Optional[SnapshotForeignKey]) -> Optional[ForeignKey]:
            if fk is None:
                return None
            # Referenced tables may live in a schema that is not exposed
            target = by_name.get(fk.table) or Table(name=fk.table)
            return ForeignKey(table=target, column=fk.column)

        columns = [
            Column(
                table=lookup(c.table),
                name=c.name,
                type=c.type,
                nullable=c.nullable,
                max_len=c.max_len,
                default=c.default,
                enum=c.enum,
                description=c.description,
                fk=foreign_key(c.fk),
            )
            for c in snapshot.columns
        ]
        primary_keys = [
            PrimaryKey(table=lookup(pk.table), name=pk.name)
            for pk in snapshot.primary_keys
        ]
        return cls(
            tables=snapshot.tables,
            columns=columns,
            primary_keys=primary_keys,
            procs=snapshot.procs,
        )

    def table_entries(self) -> list[TableEntry]:
        """Group columns under their tables, keeping table and column order."""
        grouped: dict[str, list[Column]] = {t.name: [] for t in self.tables}
        for column in self.columns:
            grouped[column.table.name].append(column)
        return [(t, grouped[t.name], []) for t in self.tables]


def parse_db_structure(data: dict[str, Any]) -> DbStructure:
    """Build a database structure from decoded snapshot data.

    Raises:
        SnapshotLoadError: If the data is not a valid snapshot.
    """
    try:
        snapshot = DbSnapshot.model_validate(data)
    except ValidationError as e:
        raise SnapshotLoadError(f"Invalid snapshot: {e}")
    return DbStructure.from_snapshot(snapshot)


def load_db_structure(path: str | Path) -> DbStructure:
    """Load a database structure from a JSON snapshot file.

    Args:
        path: Location of the snapshot.

    Returns:
        The resolved structure.

    Raises:
        SnapshotLoadError: If the file is unreadable or not a valid snapshot.
    """
    path = Path(path)
    try:
        snapshot = DbSnapshot.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SnapshotLoadError(f"Cannot read snapshot: {e}", path=str(path))
    except ValidationError as e:
        raise SnapshotLoadError(f"Invalid snapshot: {e}", path=str(path))

    structure = DbStructure.from_snapshot(snapshot)
    logger.info(
        "Loaded snapshot %s: %d tables, %d columns, %d procedures",
        path, len(structure.tables), len(structure.columns), len(structure.procs)
    )
    return structure
