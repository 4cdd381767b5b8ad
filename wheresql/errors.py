"""Custom exception hierarchy for wheresql.

All public errors inherit from WhereSQLError so callers can catch the base
class for any builder failure.  Every error is raised at the offending call;
nothing is deferred to render time.
"""
from __future__ import annotations

from typing import Any


class WhereSQLError(Exception):
    """Base exception for all wheresql errors.

    Args:
        message: Human-readable description.
        code: Machine-readable error code (e.g. MISPLACED_CONNECTIVE).
        details: Extra context about the offending call.
    """

    def __init__(
        self,
        message: str,
        code: str = "WHERESQL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details: dict[str, Any] = details or {}


class InvalidConnectiveError(WhereSQLError):
    """Raised when a connective other than AND / OR is requested."""

    def __init__(self, connective: str) -> None:
        super().__init__(
            f'A connective can only be "AND" or "OR", got {connective!r}.',
            code="INVALID_CONNECTIVE",
            details={"connective": connective, "allowed": ["AND", "OR"]},
        )
        self.connective = connective


class MisplacedConnectiveError(WhereSQLError):
    """Raised when a connective is added first or directly after another one."""

    def __init__(self, connective: str, position: int, reason: str) -> None:
        super().__init__(
            f"The connective {connective} can not be placed at position {position}: {reason}.",
            code="MISPLACED_CONNECTIVE",
            details={"connective": connective, "position": position, "reason": reason},
        )
        self.connective = connective
        self.position = position


class IncompleteConditionError(WhereSQLError):
    """Raised when a condition is closed before column and value are defined.

    Args:
        missing: Names of the undefined parts (``'column'``, ``'value'``).
    """

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            "Can not end this where condition because not all required parts "
            f"are defined (missing: {', '.join(missing)}).",
            code="INCOMPLETE_CONDITION",
            details={"missing": missing},
        )
        self.missing = missing


class UnknownDialectError(WhereSQLError):
    """Raised when a dialect name or DbType has no registered dialect."""

    def __init__(self, name: Any, known: list[str]) -> None:
        super().__init__(
            f"Unsupported dialect: {name!r}. Known dialects: {known}.",
            code="UNKNOWN_DIALECT",
            details={"name": str(name), "known": known},
        )
        self.name = name
        self.known = known


class ConfigError(WhereSQLError):
    """Raised when a settings mapping does not describe a dialect.

    Args:
        message: Human-readable description.
        keys: The keys that were looked up.
    """

    def __init__(self, message: str, keys: list[str] | None = None) -> None:
        super().__init__(message, code="CONFIG_ERROR", details={"keys": keys or []})
        self.keys = keys or []
