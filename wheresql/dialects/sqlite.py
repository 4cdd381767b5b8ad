"""SQLite dialect."""
from __future__ import annotations

from wheresql.dialects.base import SQLDialect
from wheresql.expressions import DbType


class SQLiteDialect(SQLDialect):
    """Quoting rules for SQLite.

    SQLite accepts backticks and brackets for identifiers too, but the
    standard double-quote form is emitted.
    """

    @property
    def dialect_name(self) -> str:
        return "sqlite"

    @property
    def db_type(self) -> DbType:
        return DbType.SQLITE

    @property
    def identifier_quotes(self) -> tuple[str, str]:
        return ('"', '"')

    @property
    def string_quote(self) -> str:
        return "'"
