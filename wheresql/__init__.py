"""wheresql – Build SQL WHERE clauses by code.

Public API
----------
``WhereSQL``
    A root WHERE clause or a parenthesized group.  ``cond()`` appends a
    condition, ``group()`` a nested group, ``op()`` an AND / OR connective.

``WhereCondition``
    A single ``column operator value`` clause, configured fluently and closed
    with ``end()``.

``DialectConfig``
    Picks the dialect out of a driver settings mapping.

Example::

    from wheresql import DbType, ValueKind, WhereSQL

    where = (
        WhereSQL.create(DbType.PGSQL)
        .cond().col("u_mail").eq().val(":mail").end()
        .op_or()
        .cond().col("u_name").eq().val("admin", ValueKind.STRING).end()
    )
    str(where)  # ' WHERE "u_mail" = :mail OR "u_name" = 'admin''

Extensibility
-------------
Quoting rules can be replaced via::

    from wheresql.dialects.registry import DialectFactory

    @DialectFactory.register(DbType.MYSQL)
    class AnsiQuotesMySQLDialect(MySQLDialect):
        ...
"""

from __future__ import annotations

from wheresql.config import DialectConfig
from wheresql.dialects import (
    DialectFactory,
    MySQLDialect,
    PostgresDialect,
    SQLDialect,
    SQLiteDialect,
    get_dialect,
    resolve_db_type,
)
from wheresql.errors import (
    ConfigError,
    IncompleteConditionError,
    InvalidConnectiveError,
    MisplacedConnectiveError,
    UnknownDialectError,
    WhereSQLError,
)
from wheresql.expressions import (
    KNOWN_TYPES,
    OPERATOR_SQL,
    ColumnKind,
    Connective,
    DbType,
    Operator,
    ValueKind,
)
from wheresql.where import ColumnRef, ValueRef, WhereCondition, WhereSQL

__all__ = [
    # Builders
    "WhereSQL",
    "WhereCondition",
    "ColumnRef",
    "ValueRef",
    # Enums
    "DbType",
    "KNOWN_TYPES",
    "ColumnKind",
    "ValueKind",
    "Operator",
    "OPERATOR_SQL",
    "Connective",
    # Dialects
    "SQLDialect",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "DialectFactory",
    "get_dialect",
    "resolve_db_type",
    # Configuration
    "DialectConfig",
    # Errors
    "WhereSQLError",
    "InvalidConnectiveError",
    "MisplacedConnectiveError",
    "IncompleteConditionError",
    "UnknownDialectError",
    "ConfigError",
]
