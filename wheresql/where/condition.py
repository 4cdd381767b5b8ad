"""The condition builder: one ``column operator value`` clause."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wheresql.dialects.registry import DialectFactory
from wheresql.errors import IncompleteConditionError
from wheresql.expressions import OPERATOR_SQL, ColumnKind, DbType, Operator, ValueKind
from wheresql.where.parts import ColumnRef, ValueRef

if TYPE_CHECKING:
    from wheresql.where.arena import Arena, ConditionRecord
    from wheresql.where.group import WhereSQL

logger = logging.getLogger(__name__)


class WhereCondition:
    """Accumulates a column, an operator and a value, then renders them.

    Conditions are only created through :meth:`WhereSQL.cond`, which appends
    the new condition to the group and returns it for fluent configuration::

        where.cond().col("u_mail").eq().val(":mail").end()

    Every setter returns the condition itself; :meth:`end` returns the
    owning group.
    """

    def __init__(self, arena: Arena, index: int) -> None:
        self._arena = arena
        self._index = index
        arena.remember(self, ("condition", index))

    @property
    def _record(self) -> ConditionRecord:
        return self._arena.conditions[self._index]

    # ------------------------------------------------------------------
    # Column and value
    # ------------------------------------------------------------------

    def col(self, name: str, kind: ColumnKind = ColumnKind.NAME) -> WhereCondition:
        """Set the column part.

        Args:
            name: A column name, or raw SQL when ``kind`` is ``ColumnKind.SQL``.
            kind: ``ColumnKind.NAME`` quotes ``name`` as an identifier.
        """
        self._record.column = ColumnRef(text=name, kind=kind)
        return self

    def val(self, value: str, kind: ValueKind = ValueKind.SQL) -> WhereCondition:
        """Set the value part.

        Args:
            value: Raw SQL (a placeholder such as ``:pwd``, ``NULL``, ...) or,
                when ``kind`` is ``ValueKind.STRING``, text to enclose in the
                dialect's string quote.  Nothing is escaped.
            kind: How ``value`` is emitted.
        """
        self._record.value = ValueRef(text=value, kind=kind)
        return self

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def _use(self, operator: Operator) -> WhereCondition:
        self._record.operator = operator
        return self

    def eq(self) -> WhereCondition:
        """Use the equal (=) operator."""
        return self._use(Operator.EQ)

    def neq(self) -> WhereCondition:
        """Use the not equal (!=) operator."""
        return self._use(Operator.NEQ)

    def lt(self) -> WhereCondition:
        """Use the "lower than" (<) operator."""
        return self._use(Operator.LT)

    def gt(self) -> WhereCondition:
        """Use the "greater than" (>) operator."""
        return self._use(Operator.GT)

    def lteq(self) -> WhereCondition:
        """Use the "lower than or equal" (<=) operator."""
        return self._use(Operator.LTE)

    def gteq(self) -> WhereCondition:
        """Use the "greater than or equal" (>=) operator."""
        return self._use(Operator.GTE)

    def is_value(self) -> WhereCondition:
        """Use the IS operator."""
        return self._use(Operator.IS)

    def is_not(self) -> WhereCondition:
        """Use the IS NOT operator."""
        return self._use(Operator.IS_NOT)

    def in_value(self) -> WhereCondition:
        """Use the IN operator.  The value should be a raw ``( ... )`` list."""
        return self._use(Operator.IN)

    def not_in_value(self) -> WhereCondition:
        """Use the NOT IN operator."""
        return self._use(Operator.NOT_IN)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def column(self) -> ColumnRef | None:
        return self._record.column

    @property
    def operator(self) -> Operator:
        return self._record.operator

    @property
    def value(self) -> ValueRef | None:
        return self._record.value

    @property
    def owner(self) -> WhereSQL:
        """The group this condition belongs to."""
        return self._arena.group_handle(self._record.owner)

    @property
    def dialect(self) -> DbType:
        return self._arena.groups[self._record.owner].dialect

    def missing_parts(self) -> list[str]:
        """Return the names of the parts that are still undefined."""
        record = self._record
        missing = []
        if record.column is None:
            missing.append("column")
        if record.value is None:
            missing.append("value")
        return missing

    def is_valid(self) -> bool:
        """Return whether column and value are defined.

        The operator is not required; an operator-less condition renders
        with an empty operator slot.
        """
        return not self.missing_parts()

    def end(self) -> WhereSQL:
        """Finish the condition and return the owning group.

        Raises:
            IncompleteConditionError: If column or value is undefined.
        """
        missing = self.missing_parts()
        if missing:
            raise IncompleteConditionError(missing)
        return self.owner

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Render as ``" <column> <operator> <value>"``, or ``""`` if incomplete."""
        record = self._record
        if record.column is None or record.value is None:
            logger.debug(
                "Rendering incomplete condition #%d as empty text (missing: %s)",
                self._index,
                ", ".join(self.missing_parts()),
            )
            return ""

        dialect = DialectFactory.create(self.dialect)

        column = record.column.text
        if record.column.kind is ColumnKind.NAME:
            column = dialect.quote_identifier(column)

        value = record.value.text
        if record.value.kind is ValueKind.STRING:
            value = dialect.quote_string(value)

        return f" {column} {OPERATOR_SQL[record.operator]} {value}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        record = self._record
        return (
            f"WhereCondition(column={record.column!r}, "
            f"operator={record.operator.name}, value={record.value!r})"
        )
