"""Dialect abstraction: the SQLDialect ABC.

The Strategy pattern is used:
- ``SQLDialect`` defines how identifiers and strings are enclosed.
- ``MySQLDialect``, ``PostgresDialect`` and ``SQLiteDialect`` supply the
  quote characters for their engine.

Text is wrapped verbatim.  Escaping the caller's text is not a concern of
this layer; values are expected to arrive already escaped or as placeholders.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from wheresql.expressions import DbType


class SQLDialect(ABC):
    """Abstract base for dialect-specific quoting rules."""

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (e.g. ``'mysql'``)."""

    @property
    @abstractmethod
    def db_type(self) -> DbType:
        """Return the :class:`DbType` this dialect renders for."""

    @property
    @abstractmethod
    def identifier_quotes(self) -> tuple[str, str]:
        """Return the opening and closing identifier quote characters."""

    @property
    @abstractmethod
    def string_quote(self) -> str:
        """Return the character enclosing string values."""

    def quote_identifier(self, name: str) -> str:
        """Return ``name`` enclosed in the identifier quote pair.

        Args:
            name: Unquoted identifier (column name).

        Returns:
            Quoted identifier.
        """
        opening, closing = self.identifier_quotes
        return f"{opening}{name}{closing}"

    def quote_string(self, value: str) -> str:
        """Return ``value`` enclosed in the string quote."""
        quote = self.string_quote
        return f"{quote}{value}{quote}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
