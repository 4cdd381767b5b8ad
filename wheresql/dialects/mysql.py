"""MySQL dialect."""

from __future__ import annotations

from wheresql.dialects.base import SQLDialect
from wheresql.expressions import DbType


class MySQLDialect(SQLDialect):
    """Quoting rules for MySQL / MariaDB.

    Identifiers are quoted with backticks (`` ` ``) rather than double-quotes;
    string values are enclosed in double-quotes.
    """

    @property
    def dialect_name(self) -> str:
        return "mysql"

    @property
    def db_type(self) -> DbType:
        return DbType.MYSQL

    @property
    def identifier_quotes(self) -> tuple[str, str]:
        return ("`", "`")

    @property
    def string_quote(self) -> str:
        return '"'
