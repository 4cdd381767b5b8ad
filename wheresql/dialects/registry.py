"""Dialect registry.

``DialectFactory`` maps each :class:`~wheresql.expressions.DbType` to the
:class:`~wheresql.dialects.base.SQLDialect` class that renders for it.  The
built-in dialects are registered by :mod:`wheresql.dialects`; a replacement
can be registered without touching the builders.

Usage::

    from wheresql.dialects.registry import DialectFactory

    @DialectFactory.register(DbType.MYSQL)
    class StrictMySQLDialect(MySQLDialect):
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import ClassVar

from wheresql.dialects.base import SQLDialect
from wheresql.errors import UnknownDialectError
from wheresql.expressions import DbType

logger = logging.getLogger(__name__)


class DialectFactory:
    """Registry mapping :class:`DbType` values to :class:`SQLDialect` classes.

    Example::

        DialectFactory.register_class(DbType.PGSQL, PostgresDialect)
        dialect = DialectFactory.create(DbType.PGSQL)
    """

    _dialects: ClassVar[dict[DbType, type[SQLDialect]]] = {}

    @classmethod
    def register(cls, db_type: DbType) -> Callable[[type[SQLDialect]], type[SQLDialect]]:
        """Decorator that registers a dialect class under ``db_type``.

        Args:
            db_type: The database type the dialect renders for.

        Returns:
            A decorator that registers and returns the dialect class.
        """

        def decorator(dialect_cls: type[SQLDialect]) -> type[SQLDialect]:
            cls.register_class(db_type, dialect_cls)
            return dialect_cls

        return decorator

    @classmethod
    def register_class(cls, db_type: DbType, dialect_cls: type[SQLDialect]) -> None:
        """Register a dialect class without using the decorator form."""
        logger.debug("Registering %s for %s", dialect_cls.__name__, db_type.value)
        cls._dialects[db_type] = dialect_cls

    @classmethod
    def create(cls, db_type: DbType) -> SQLDialect:
        """Instantiate the dialect registered for ``db_type``.

        Raises:
            UnknownDialectError: If nothing is registered for ``db_type``.
        """
        dialect_cls = cls._dialects.get(db_type)
        if dialect_cls is None:
            raise UnknownDialectError(db_type, cls.registered_targets())
        return dialect_cls()

    @classmethod
    def registered_targets(cls) -> list[str]:
        """Return the sorted list of registered dialect names."""
        return sorted(t.value for t in cls._dialects)
