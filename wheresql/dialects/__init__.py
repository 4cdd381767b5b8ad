"""Database dialects: one class per engine (MySQL, PostgreSQL, SQLite)."""

from __future__ import annotations

from wheresql.dialects.base import SQLDialect
from wheresql.dialects.mysql import MySQLDialect
from wheresql.dialects.postgres import PostgresDialect
from wheresql.dialects.registry import DialectFactory
from wheresql.dialects.sqlite import SQLiteDialect
from wheresql.errors import UnknownDialectError
from wheresql.expressions import KNOWN_TYPES, DbType

DialectFactory.register_class(DbType.MYSQL, MySQLDialect)
DialectFactory.register_class(DbType.PGSQL, PostgresDialect)
DialectFactory.register_class(DbType.SQLITE, SQLiteDialect)

#: Driver names and URL schemes accepted for each database type.
_ALIASES: dict[str, DbType] = {
    "mysql": DbType.MYSQL,
    "mariadb": DbType.MYSQL,
    "pgsql": DbType.PGSQL,
    "postgres": DbType.PGSQL,
    "postgresql": DbType.PGSQL,
    "sqlite": DbType.SQLITE,
    "sqlite3": DbType.SQLITE,
}


def resolve_db_type(name: str | DbType) -> DbType:
    """Return the DbType for a name, driver or URL scheme.

    Accepts ``DbType`` members, their values, and common aliases, with an
    optional ``+driver`` suffix (``'postgresql+psycopg'``) or DSN tail
    (``'pgsql:host=localhost'``, ``'sqlite:///app.db'``).

    Raises:
        UnknownDialectError: If the name matches no known database type.
    """
    if isinstance(name, DbType):
        return name
    normalized = str(name or "").split(":")[0].split("+")[0].strip().lower()
    try:
        return _ALIASES[normalized]
    except KeyError:
        raise UnknownDialectError(name, [t.value for t in KNOWN_TYPES]) from None


def get_dialect(name: str | DbType) -> SQLDialect:
    """Return a dialect instance for any name accepted by :func:`resolve_db_type`."""
    return DialectFactory.create(resolve_db_type(name))


__all__ = [
    "SQLDialect",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "DialectFactory",
    "resolve_db_type",
    "get_dialect",
]
