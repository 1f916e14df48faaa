"""Pytest configuration and fixtures for pgrest-openapi tests."""

import pytest

from pgrest_openapi.models.schema import (
    Column,
    ForeignKey,
    PgArg,
    PrimaryKey,
    ProcDescription,
    Table,
)


# Markers for test categorization
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow running tests"
    )


@pytest.fixture(scope="session")
def anyio_backend():
    """Set the async backend for anyio."""
    return "asyncio"


@pytest.fixture
def users_table():
    """Insertable table with a multi-line description."""
    return Table(
        name="users",
        description="Registered users\n\nOne row per account",
        insertable=True,
    )


@pytest.fixture
def orders_table():
    """Read-only table without description."""
    return Table(name="orders", insertable=False)


@pytest.fixture
def users_columns(users_table):
    """Columns of the users table."""
    return [
        Column(table=users_table, name="id", type="integer", nullable=False),
        Column(
            table=users_table,
            name="email",
            type="character varying",
            nullable=False,
            max_len=255,
            description="Login email",
        ),
        Column(
            table=users_table,
            name="status",
            type="user_status",
            default='"active"',
            enum=["active", "banned"],
        ),
    ]


@pytest.fixture
def orders_columns(orders_table, users_table):
    """Columns of the orders table."""
    return [
        Column(table=orders_table, name="id", type="bigint", nullable=False),
        Column(
            table=orders_table,
            name="user_id",
            type="integer",
            description="Buyer",
            fk=ForeignKey(table=users_table, column="id"),
        ),
        Column(
            table=orders_table,
            name="created_at",
            type="timestamp with time zone",
            default="now()",
        ),
    ]


@pytest.fixture
def table_entries(users_table, users_columns, orders_table, orders_columns):
    """(table, columns, annotations) triples in input order."""
    return [
        (users_table, users_columns, []),
        (orders_table, orders_columns, []),
    ]


@pytest.fixture
def primary_keys(users_table, orders_table):
    """Primary keys of the sample tables."""
    return [
        PrimaryKey(table=users_table, name="id"),
        PrimaryKey(table=orders_table, name="id"),
    ]


@pytest.fixture
def procs():
    """Sample stored procedures."""
    return [
        ProcDescription(
            name="add_them",
            description="Add two numbers\nReturns their sum",
            args=[
                PgArg(name="a", type="integer", required=True),
                PgArg(name="b", type="numeric", required=False),
            ],
        ),
        ProcDescription(name="ping"),
    ]


@pytest.fixture
def snapshot_data():
    """Raw snapshot equivalent to the sample tables."""
    return {
        "tables": [
            {
                "schema": "public",
                "name": "users",
                "description": "Registered users\n\nOne row per account",
                "insertable": True,
            },
            {"schema": "public", "name": "orders", "insertable": False},
        ],
        "columns": [
            {"table": "users", "name": "id", "type": "integer", "nullable": False},
            {"table": "orders", "name": "id", "type": "bigint", "nullable": False},
            {
                "table": "orders",
                "name": "user_id",
                "type": "integer",
                "description": "Buyer",
                "fk": {"table": "users", "column": "id"},
            },
            {
                "table": "users",
                "name": "email",
                "type": "character varying",
                "nullable": False,
                "max_len": 255,
            },
        ],
        "primary_keys": [
            {"table": "users", "name": "id"},
            {"table": "orders", "name": "id"},
        ],
        "procs": [
            {"name": "ping"},
        ],
    }
