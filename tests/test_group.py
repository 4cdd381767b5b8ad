"""Unit tests for WhereSQL (groups and the root clause)."""
from __future__ import annotations

import weakref

import pytest

from wheresql import (
    Connective,
    DbType,
    InvalidConnectiveError,
    MisplacedConnectiveError,
    UnknownDialectError,
    ValueKind,
    WhereCondition,
    WhereSQL,
)
from wheresql.where.parts import PART_ADAPTER, ConnectivePart, GroupPart


def test_empty_root_renders_empty_string(mysql_where):
    assert mysql_where.count_parts() == 0
    assert mysql_where.render() == ""
    assert str(mysql_where) == ""


def test_default_dialect_is_mysql():
    assert WhereSQL().dialect is DbType.MYSQL


def test_create_accepts_names_and_enum():
    assert WhereSQL.create("pgsql").dialect is DbType.PGSQL
    assert WhereSQL.create("postgresql").dialect is DbType.PGSQL
    assert WhereSQL.create(DbType.SQLITE).dialect is DbType.SQLITE


def test_create_unknown_dialect_raises():
    with pytest.raises(UnknownDialectError):
        WhereSQL.create("oracle")


def test_quoted_round_trip_postgres():
    where = (
        WhereSQL("pgsql")
        .cond().col("a").eq().val("1", ValueKind.STRING).end()
        .op_and()
        .cond().col("b").is_value().val("NULL", ValueKind.STRING).end()
    )
    assert where.render() == " WHERE \"a\" = '1' AND \"b\" IS 'NULL'"


def test_raw_round_trip_postgres():
    where = (
        WhereSQL("pgsql")
        .cond().col("a").eq().val("1").end()
        .op_and()
        .cond().col("b").is_value().val("NULL").end()
    )
    assert where.is_root
    assert where.render() == ' WHERE "a" = 1 AND "b" IS NULL'


def test_nested_group_is_balanced(mysql_where):
    root = (
        mysql_where.group()
            .cond().col("a").eq().val("1").end()
            .op_and()
            .cond().col("b").eq().val("2").end()
        .end()
        .op_or()
        .cond().col("c").eq().val("3").end()
    )
    assert root is mysql_where
    sql = root.render()
    assert sql == " WHERE ( `a` = 1 AND `b` = 2 ) OR `c` = 3"
    assert sql.count("(") == sql.count(")") == 1


def test_login_query_example():
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
        .end()
    )
    assert str(where) == (
        ' WHERE ( `u_password` = :pwd AND `u_mail` = :mail )'
        ' OR `u_guid` = NULL OR `u_guid` = "XYZ"'
    )


def test_deeply_nested_groups(pg_where):
    inner = pg_where.group().group()
    inner.cond().col("x").lt().val("5")
    assert pg_where.render() == ' WHERE ( ( "x" < 5 ) )'


def test_nested_group_render_on_its_own(pg_where):
    child = pg_where.group().cond().col("a").gt().val("0").end()
    assert child.has_parent()
    assert child.render() == ' ( "a" > 0 )'


def test_empty_nested_group_is_not_guarded(mysql_where):
    mysql_where.cond().col("a").eq().val("1").end().op_and().group()
    assert mysql_where.count_parts() == 3
    assert mysql_where.render() == " WHERE `a` = 1 AND "


def test_op_on_empty_group_raises(mysql_where):
    with pytest.raises(MisplacedConnectiveError) as exc_info:
        mysql_where.op()
    assert exc_info.value.position == 0
    assert exc_info.value.code == "MISPLACED_CONNECTIVE"


def test_op_on_empty_nested_group_raises(mysql_where):
    with pytest.raises(MisplacedConnectiveError):
        mysql_where.group().op_or()


def test_two_connectives_in_a_row_raise(pg_where):
    pg_where.cond().col("a").eq().val("1").end().op_and()
    with pytest.raises(MisplacedConnectiveError) as exc_info:
        pg_where.op_or()
    assert exc_info.value.connective == "OR"
    assert exc_info.value.position == 2
    assert pg_where.count_parts() == 2


def test_op_is_case_insensitive(mysql_where):
    for name in ("and", "AND", "And"):
        mysql_where.cond().col("a").eq().val("1").end()
        assert mysql_where.op(name) is mysql_where
    assert [p for p in mysql_where.parts if isinstance(p, Connective)] == [Connective.AND] * 3


def test_op_defaults_to_and(pg_where):
    pg_where.cond().col("a").eq().val("1").end().op()
    assert pg_where.parts[-1] is Connective.AND


def test_invalid_connective_raises(mysql_where):
    mysql_where.cond().col("a").eq().val("1").end()
    with pytest.raises(InvalidConnectiveError) as exc_info:
        mysql_where.op("XOR")
    assert exc_info.value.connective == "XOR"
    assert mysql_where.count_parts() == 1


def test_invalid_connective_checked_before_position(mysql_where):
    with pytest.raises(InvalidConnectiveError):
        mysql_where.op("NOT")


def test_end_on_root_returns_same_instance(pg_where):
    assert pg_where.end() is pg_where
    assert pg_where.end().end() is pg_where
    assert pg_where.parent is None


def test_end_on_child_returns_parent(pg_where):
    child = pg_where.group()
    assert child.parent is pg_where
    assert child.end() is pg_where


def test_child_inherits_dialect(pg_where):
    assert pg_where.group().dialect is DbType.PGSQL
    assert pg_where.group().group().dialect is DbType.PGSQL


def test_child_dialect_override(pg_where):
    child = pg_where.group("mysql")
    child.cond().col("a").eq().val("1")
    assert child.dialect is DbType.MYSQL
    assert pg_where.render() == " WHERE ( `a` = 1 )"


def test_count_parts_is_not_recursive(mysql_where):
    child = mysql_where.group()
    child.cond().col("a").eq().val("1").end().op_or().cond().col("b").eq().val("2")
    assert child.count_parts() == 3
    assert mysql_where.count_parts() == 1


def test_parts_are_resolved_in_order(mysql_where):
    cond = mysql_where.cond().col("a").eq().val("1")
    mysql_where.op_or()
    child = mysql_where.group()
    parts = mysql_where.parts
    assert parts == (cond, Connective.OR, child)
    assert isinstance(parts[0], WhereCondition)
    assert parts[2] is child


def test_incomplete_condition_renders_as_blank_slot(mysql_where):
    mysql_where.cond().col("a")
    assert mysql_where.render() == " WHERE "


def test_chain_from_temporary_root_returns_to_root():
    child = WhereSQL("sqlite").group()
    root = child.cond().col("a").eq().val("1").end().end()
    assert root.is_root
    assert root.render() == ' WHERE ( "a" = 1 )'


def test_handles_do_not_form_cycles():
    root = WhereSQL("pgsql")
    root.group().cond().col("a").eq().val("1").end().end()
    ref = weakref.ref(root)
    del root
    assert ref() is None


def test_part_union_is_discriminated():
    assert isinstance(
        PART_ADAPTER.validate_python({"kind": "connective", "connective": "OR"}),
        ConnectivePart,
    )
    assert isinstance(PART_ADAPTER.validate_python({"kind": "group", "index": 1}), GroupPart)


def test_repr_mentions_dialect(pg_where):
    assert "pgsql" in repr(pg_where)
