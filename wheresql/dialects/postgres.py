"""PostgreSQL dialect."""

from __future__ import annotations

from wheresql.dialects.base import SQLDialect
from wheresql.expressions import DbType


class PostgresDialect(SQLDialect):
    """Quoting rules for PostgreSQL: ``"identifier"`` and ``'string'``."""

    @property
    def dialect_name(self) -> str:
        return "pgsql"

    @property
    def db_type(self) -> DbType:
        return DbType.PGSQL

    @property
    def identifier_quotes(self) -> tuple[str, str]:
        return ('"', '"')

    @property
    def string_quote(self) -> str:
        return "'"
