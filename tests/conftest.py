"""Shared pytest fixtures for the wheresql test suite."""
from __future__ import annotations

import pytest

from wheresql import DbType, WhereSQL


@pytest.fixture()
def mysql_where() -> WhereSQL:
    """An empty root WHERE clause for MySQL."""
    return WhereSQL.create(DbType.MYSQL)


@pytest.fixture()
def pg_where() -> WhereSQL:
    """An empty root WHERE clause for PostgreSQL."""
    return WhereSQL.create(DbType.PGSQL)


@pytest.fixture()
def sqlite_where() -> WhereSQL:
    """An empty root WHERE clause for SQLite."""
    return WhereSQL.create(DbType.SQLITE)
