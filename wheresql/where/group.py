"""The group builder: an ordered, parenthesizable list of WHERE parts.

Example::

    where = (
        WhereSQL.create(DbType.MYSQL)
        .group()
            .cond().col("u_password").eq().val(":pwd").end()
            .op("AND")
            .cond().col("u_mail").eq().val(":mail").end()
        .end()
        .op("OR")
        .cond().col("u_guid").eq().val("NULL").end()
        .op("OR")
        .cond().col("u_guid").eq().val("XYZ", ValueKind.STRING).end()
    )

    str(where)
    # ' WHERE ( `u_password` = :pwd AND `u_mail` = :mail ) OR `u_guid` = NULL OR `u_guid` = "XYZ"'
"""

from __future__ import annotations

import logging

from wheresql.dialects import resolve_db_type
from wheresql.errors import MisplacedConnectiveError
from wheresql.expressions import Connective, DbType
from wheresql.where.arena import Arena, GroupRecord
from wheresql.where.condition import WhereCondition
from wheresql.where.parts import ConditionPart, ConnectivePart, GroupPart, Part

logger = logging.getLogger(__name__)


class WhereSQL:
    """A WHERE clause (the root) or a parenthesized group inside one.

    Args:
        dialect: Target database type, as a :class:`DbType` or any name
            accepted by :func:`~wheresql.dialects.resolve_db_type`.
            Defaults to MySQL.

    Raises:
        UnknownDialectError: If ``dialect`` is not a known database type.
    """

    def __init__(self, dialect: DbType | str = DbType.MYSQL) -> None:
        arena = Arena()
        index = arena.add_group(resolve_db_type(dialect))
        self._attach(arena, index)

    @classmethod
    def create(cls, dialect: DbType | str) -> WhereSQL:
        """Create a new root WHERE clause for ``dialect``."""
        return cls(dialect)

    @classmethod
    def _bind(cls, arena: Arena, index: int) -> WhereSQL:
        """Return a new handle for an existing group record."""
        handle = cls.__new__(cls)
        handle._attach(arena, index)
        return handle

    def _attach(self, arena: Arena, index: int) -> None:
        self._arena = arena
        self._index = index
        arena.remember(self, ("group", index))

    @property
    def _record(self) -> GroupRecord:
        return self._arena.groups[self._index]

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def cond(self) -> WhereCondition:
        """Append a new, empty condition and return it."""
        index = self._arena.add_condition(owner=self._index)
        self._record.parts.append(ConditionPart(index=index))
        logger.debug("Group #%d: appended condition #%d", self._index, index)
        return WhereCondition(self._arena, index)

    def group(self, dialect: DbType | str | None = None) -> WhereSQL:
        """Append a new child group and return it.

        Args:
            dialect: Overrides the dialect inherited from this group.
        """
        db_type = self.dialect if dialect is None else resolve_db_type(dialect)
        index = self._arena.add_group(db_type, parent=self._index)
        self._record.parts.append(GroupPart(index=index))
        logger.debug("Group #%d: appended group #%d (%s)", self._index, index, db_type.value)
        return WhereSQL._bind(self._arena, index)

    def op(self, name: str | Connective = "AND") -> WhereSQL:
        """Append the ``AND`` or ``OR`` connective.

        Args:
            name: ``'AND'`` or ``'OR'``, case-insensitive.

        Raises:
            InvalidConnectiveError: If ``name`` is neither AND nor OR.
            MisplacedConnectiveError: If the group is empty or its last part
                is already a connective.
        """
        connective = Connective.parse(name)
        parts = self._record.parts

        if not parts:
            raise MisplacedConnectiveError(
                connective.value, 0, "a group can not start with a connective"
            )
        if isinstance(parts[-1], ConnectivePart):
            raise MisplacedConnectiveError(
                connective.value,
                len(parts),
                "it can not directly follow another connective",
            )

        parts.append(ConnectivePart(connective=connective))
        return self

    def op_and(self) -> WhereSQL:
        """Append the AND connective."""
        return self.op(Connective.AND)

    def op_or(self) -> WhereSQL:
        """Append the OR connective."""
        return self.op(Connective.OR)

    def end(self) -> WhereSQL:
        """Finish this group and return the parent, or ``self`` for the root."""
        parent = self._record.parent
        if parent is None:
            return self
        return self._arena.group_handle(parent)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def dialect(self) -> DbType:
        return self._record.dialect

    @property
    def parent(self) -> WhereSQL | None:
        """The owning group, or ``None`` for the root."""
        parent = self._record.parent
        return None if parent is None else self._arena.group_handle(parent)

    def has_parent(self) -> bool:
        """Return whether this is a nested group."""
        return self._record.parent is not None

    @property
    def is_root(self) -> bool:
        return not self.has_parent()

    @property
    def parts(self) -> tuple[WhereCondition | WhereSQL | Connective, ...]:
        """The top-level parts, resolved to conditions, groups and connectives."""
        return tuple(self._resolve(part) for part in self._record.parts)

    def count_parts(self) -> int:
        """Return how many top-level parts are registered (not recursive)."""
        return len(self._record.parts)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _resolve(self, part: Part) -> WhereCondition | WhereSQL | Connective:
        if isinstance(part, ConditionPart):
            return self._arena.condition_handle(part.index)
        if isinstance(part, GroupPart):
            return self._arena.group_handle(part.index)
        return part.connective

    def _render_part(self, part: Part) -> str:
        if isinstance(part, ConnectivePart):
            return part.connective.value
        return self._resolve(part).render()

    def render(self) -> str:
        """Render as ``" WHERE ..."`` (root), ``" ( ... )"`` (nested) or ``""``."""
        parts = self._record.parts
        if not parts:
            return ""

        nested = self.has_parent()
        sql = " (" if nested else " WHERE"
        for part in parts:
            sql += " " + self._render_part(part).strip()
        if nested:
            sql += " )"
        return sql

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"WhereSQL(dialect={self.dialect.value!r}, parts={self.count_parts()}, "
            f"root={self.is_root})"
        )
