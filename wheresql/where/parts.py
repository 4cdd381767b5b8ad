"""Typed part models for the ordered contents of a group.

A group holds conditions, nested groups and connectives in rendering order.
Instead of mixing node objects and bare keyword strings in one list, every
entry is one member of a Pydantic discriminated union tagged by ``kind``.
Conditions and groups are referenced by their index in the owning
:class:`~wheresql.where.arena.Arena`.

Usage::

    part = PART_ADAPTER.validate_python({"kind": "connective", "connective": "OR"})
    assert isinstance(part, ConnectivePart)
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from wheresql.expressions import ColumnKind, Connective, ValueKind

_FROZEN = ConfigDict(extra="forbid", frozen=True)


# ---------------------------------------------------------------------------
# Column / value references held by a condition
# ---------------------------------------------------------------------------


class ColumnRef(BaseModel):
    """The column side of a condition: text plus how it is emitted."""

    model_config = _FROZEN

    text: str
    kind: ColumnKind = ColumnKind.NAME


class ValueRef(BaseModel):
    """The value side of a condition: text plus how it is emitted."""

    model_config = _FROZEN

    text: str
    kind: ValueKind = ValueKind.SQL


# ---------------------------------------------------------------------------
# Group parts
# ---------------------------------------------------------------------------


class ConditionPart(BaseModel):
    """A condition, by arena index."""

    model_config = _FROZEN

    kind: Literal["condition"] = "condition"
    index: int


class GroupPart(BaseModel):
    """A nested group, by arena index."""

    model_config = _FROZEN

    kind: Literal["group"] = "group"
    index: int


class ConnectivePart(BaseModel):
    """An ``AND`` / ``OR`` keyword between two siblings."""

    model_config = _FROZEN

    kind: Literal["connective"] = "connective"
    connective: Connective


Part = Annotated[
    Union[ConditionPart, GroupPart, ConnectivePart],
    Field(discriminator="kind"),
]

#: Parse a raw dict into a typed Part.
PART_ADAPTER: TypeAdapter[Part] = TypeAdapter(Part)
