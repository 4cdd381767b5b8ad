"""Node storage for one expression tree.

Every group and condition of a tree is a record in a single :class:`Arena`;
links between them (a group's parent, a condition's owner, a group's parts)
are indices into the arena's lists.  The builder objects the caller works
with, :class:`~wheresql.where.group.WhereSQL` and
:class:`~wheresql.where.condition.WhereCondition`, are thin handles holding
``(arena, index)``.

Handles keep their arena alive; the arena only remembers handles weakly.
The tree therefore has no reference cycles, and a caller holding any handle
keeps the whole tree reachable (so ``end()`` can always walk back up, even
when the root was never bound to a variable).
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from wheresql.expressions import DbType, Operator
from wheresql.where.parts import ColumnRef, Part, ValueRef

if TYPE_CHECKING:
    from wheresql.where.condition import WhereCondition
    from wheresql.where.group import WhereSQL


@dataclass
class GroupRecord:
    """State of one group.

    Attributes:
        dialect: Target database type, fixed at construction.
        parent: Index of the owning group, or ``None`` for the root.
        parts: Ordered parts, in rendering order.
    """

    dialect: DbType
    parent: int | None = None
    parts: list[Part] = field(default_factory=list)


@dataclass
class ConditionRecord:
    """State of one condition.

    Attributes:
        owner: Index of the group that created the condition.
        column: Column reference, or ``None`` until ``col()`` is called.
        operator: Comparison operator; ``UNSET`` until an operator is chosen.
        value: Value reference, or ``None`` until ``val()`` is called.
    """

    owner: int
    column: ColumnRef | None = None
    operator: Operator = Operator.UNSET
    value: ValueRef | None = None


class Arena:
    """Owns the records of one tree and hands out builder handles."""

    def __init__(self) -> None:
        self.groups: list[GroupRecord] = []
        self.conditions: list[ConditionRecord] = []
        self._handles: weakref.WeakValueDictionary[tuple[str, int], Any] = (
            weakref.WeakValueDictionary()
        )

    # ------------------------------------------------------------------
    # Allocation
    # ------------------------------------------------------------------

    def add_group(self, dialect: DbType, parent: int | None = None) -> int:
        """Allocate a group record and return its index."""
        self.groups.append(GroupRecord(dialect=dialect, parent=parent))
        return len(self.groups) - 1

    def add_condition(self, owner: int) -> int:
        """Allocate a condition record owned by group ``owner``."""
        self.conditions.append(ConditionRecord(owner=owner))
        return len(self.conditions) - 1

    # ------------------------------------------------------------------
    # Handles
    # ------------------------------------------------------------------

    def remember(self, handle: WhereSQL | WhereCondition, key: tuple[str, int]) -> None:
        """Cache ``handle`` so later lookups of ``key`` return the same object."""
        self._handles[key] = handle

    def group_handle(self, index: int) -> WhereSQL:
        """Return the live handle for group ``index``, creating one if needed."""
        from wheresql.where.group import WhereSQL  # avoid circular import

        handle = self._handles.get(("group", index))
        if handle is None:
            handle = WhereSQL._bind(self, index)
        return handle

    def condition_handle(self, index: int) -> WhereCondition:
        """Return the live handle for condition ``index``, creating one if needed."""
        from wheresql.where.condition import WhereCondition  # avoid circular import

        handle = self._handles.get(("condition", index))
        if handle is None:
            handle = WhereCondition(self, index)
        return handle
