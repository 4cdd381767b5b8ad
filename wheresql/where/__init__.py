"""WHERE clause builders: WhereSQL groups and WhereCondition leaves."""
from wheresql.where.condition import WhereCondition
from wheresql.where.group import WhereSQL
from wheresql.where.parts import (
    ColumnRef,
    ConditionPart,
    ConnectivePart,
    GroupPart,
    Part,
    ValueRef,
)

__all__ = [
    "WhereSQL",
    "WhereCondition",
    "ColumnRef",
    "ValueRef",
    "Part",
    "ConditionPart",
    "GroupPart",
    "ConnectivePart",
]
