"""Enums and lookup tables shared by the builders and the dialects.

The builders store these values on their records; the dialects and the
render paths translate them to SQL keywords and quoting.
"""

from __future__ import annotations

from enum import Enum

from wheresql.errors import InvalidConnectiveError

# ---------------------------------------------------------------------------
# Database types
# ---------------------------------------------------------------------------


class DbType(str, Enum):
    """The supported database (DBMS) types."""

    MYSQL = "mysql"
    PGSQL = "pgsql"
    SQLITE = "sqlite"


KNOWN_TYPES: tuple[DbType, ...] = (DbType.MYSQL, DbType.PGSQL, DbType.SQLITE)


# ---------------------------------------------------------------------------
# Column / value reference kinds
# ---------------------------------------------------------------------------


class ColumnKind(str, Enum):
    """How the column part of a condition is emitted."""

    NAME = "name"
    """A plain column name, enclosed in the dialect's identifier quotes."""
    SQL = "sql"
    """Raw SQL, emitted verbatim."""


class ValueKind(str, Enum):
    """How the value part of a condition is emitted."""

    SQL = "sql"
    """Raw SQL (e.g. a ``:placeholder`` or ``NULL``), emitted verbatim."""
    STRING = "string"
    """A string, enclosed in the dialect's string quote."""


# ---------------------------------------------------------------------------
# Operators and connectives
# ---------------------------------------------------------------------------


class Operator(str, Enum):
    """Comparison operators a condition can use."""

    EQ = "eq"
    NEQ = "neq"
    LT = "lt"
    GT = "gt"
    LTE = "lteq"
    GTE = "gteq"
    IS = "is"
    IS_NOT = "isn"
    IN = "in"
    NOT_IN = "notin"
    UNSET = ""


OPERATOR_SQL: dict[Operator, str] = {
    Operator.EQ: "=",
    Operator.NEQ: "!=",
    Operator.LT: "<",
    Operator.GT: ">",
    Operator.LTE: "<=",
    Operator.GTE: ">=",
    Operator.IS: "IS",
    Operator.IS_NOT: "IS NOT",
    Operator.IN: "IN",
    Operator.NOT_IN: "NOT IN",
    Operator.UNSET: "",
}


class Connective(str, Enum):
    """Boolean keywords joining sibling parts of a group."""

    AND = "AND"
    OR = "OR"

    @classmethod
    def parse(cls, name: str | Connective) -> Connective:
        """Normalize ``name`` (case-insensitive) to a Connective.

        Raises:
            InvalidConnectiveError: If ``name`` is neither AND nor OR.
        """
        if isinstance(name, Connective):
            return name
        try:
            return cls(str(name).upper())
        except ValueError:
            raise InvalidConnectiveError(str(name)) from None
