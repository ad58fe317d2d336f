"""Unit tests for OR-joined paired conditions."""

from unittest.mock import Mock

import pytest
import sqlglot
from sqlglot import exp

from sqlexpand import ArityMismatchError, SQLBuilderError, build_paired_query, select_in_paired
from sqlexpand.paired import select_in_paired_with_args

PAIR = "(id = ? AND name = ?)"


def test_build_paired_query_appends_where_and_or_chain() -> None:
    query, args = build_paired_query("SELECT * FROM t", PAIR, [], [(2, "name2"), (4, "name4")])

    assert query == "SELECT * FROM t WHERE (id = ? AND name = ?) OR (id = ? AND name = ?)"
    assert args == [2, "name2", 4, "name4"]


@pytest.mark.parametrize("tuples,arity", [(1, 1), (3, 2), (5, 3), (12, 4)])
def test_build_paired_query_scales_with_tuples(tuples: int, arity: int) -> None:
    template = "(" + " AND ".join(f"c{i} = ?" for i in range(arity)) + ")"
    paired_args = [[row * 100 + col for col in range(arity)] for row in range(tuples)]

    query, args = build_paired_query("SELECT * FROM t", template, ["x"], paired_args)

    assert query.count(template) == tuples
    assert query.count(" OR ") == tuples - 1
    assert len(args) == 1 + tuples * arity
    assert args == ["x"] + [value for row in paired_args for value in row]


def test_build_paired_query_orders_custom_args_first() -> None:
    query, args = build_paired_query(
        "SELECT * FROM t WHERE tenant = ? AND (", PAIR, ["acme"], [(1, "a"), (2, "b")]
    )

    assert query == "SELECT * FROM t WHERE tenant = ? AND ((id = ? AND name = ?) OR (id = ? AND name = ?)"
    assert args == ["acme", 1, "a", 2, "b"]


def test_build_paired_query_keeps_existing_where() -> None:
    query, _ = build_paired_query("SELECT * FROM t WHERE ", PAIR, [], [(1, "a")])

    assert query == "SELECT * FROM t WHERE (id = ? AND name = ?)"
    assert query.count("WHERE") == 1


def test_build_paired_query_where_check_is_a_substring_match() -> None:
    # lower-case keywords are not detected
    query, _ = build_paired_query("SELECT * FROM t where", PAIR, [], [(1, "a")])
    assert query == "SELECT * FROM t where WHERE (id = ? AND name = ?)"

    # nor are literals that merely contain the word
    query, _ = build_paired_query("SELECT 'WHERE' AS w FROM t", PAIR, [], [(1, "a")])
    assert query == "SELECT 'WHERE' AS w FROM t(id = ? AND name = ?)"


def test_build_paired_query_output_parses_as_or_chain() -> None:
    query, _ = build_paired_query("SELECT * FROM t", PAIR, [], [(1, "a"), (2, "b"), (3, "c")])

    where = sqlglot.parse_one(query, read="sqlite").find(exp.Where)
    assert where is not None
    assert isinstance(where.this, exp.Or)
    assert len(list(where.find_all(exp.Placeholder))) == 6


@pytest.mark.parametrize("paired_args", [[(1, "a"), (2,)], [(1,), (2, "b")], [(1, "a"), (2, "b"), (3, "c", "d")]])
def test_build_paired_query_arity_mismatch(paired_args: list) -> None:
    with pytest.raises(ArityMismatchError, match="invalid value"):
        build_paired_query("SELECT * FROM t", PAIR, [], paired_args)


def test_build_paired_query_requires_tuples() -> None:
    with pytest.raises(SQLBuilderError):
        build_paired_query("SELECT * FROM t", PAIR, [], [])


def test_select_in_paired_with_no_tuples_skips_driver(mock_driver: Mock) -> None:
    assert select_in_paired(mock_driver, "SELECT * FROM t", PAIR, []) == []
    assert select_in_paired_with_args(mock_driver, "SELECT * FROM t", PAIR, ["acme"], []) == []

    assert mock_driver.rebind.call_count == 0
    assert mock_driver.select.call_count == 0
    assert mock_driver.execute.call_count == 0


def test_select_in_paired_rebinds_once_then_selects(mock_driver: Mock) -> None:
    mock_driver.select.return_value = [{"id": 2, "name": "name2"}]

    rows = select_in_paired(mock_driver, "SELECT * FROM t", PAIR, [(2, "name2")])

    assert rows == [{"id": 2, "name": "name2"}]
    mock_driver.rebind.assert_called_once_with("SELECT * FROM t WHERE (id = ? AND name = ?)")
    mock_driver.select.assert_called_once_with(
        "SELECT * FROM t WHERE (id = ? AND name = ?)", [2, "name2"], schema_type=None
    )


def test_select_in_paired_with_args_binds_custom_args(mock_driver: Mock) -> None:
    select_in_paired_with_args(
        mock_driver, "SELECT * FROM t WHERE tenant = ? AND ", PAIR, ["acme"], [(1, "a")], schema_type=dict
    )

    mock_driver.select.assert_called_once_with(
        "SELECT * FROM t WHERE tenant = ? AND (id = ? AND name = ?)", ["acme", 1, "a"], schema_type=dict
    )


def test_select_in_paired_arity_mismatch_skips_driver(mock_driver: Mock) -> None:
    with pytest.raises(ArityMismatchError):
        select_in_paired(mock_driver, "SELECT * FROM t", PAIR, [(1, "a"), (2,)])

    mock_driver.rebind.assert_not_called()
    mock_driver.select.assert_not_called()


def test_select_in_paired_propagates_driver_errors(mock_driver: Mock) -> None:
    failure = RuntimeError("connection reset")
    mock_driver.select.side_effect = failure

    with pytest.raises(RuntimeError) as exc_info:
        select_in_paired(mock_driver, "SELECT * FROM t", PAIR, [(1, "a"), (2, "b")])

    assert exc_info.value is failure
    assert mock_driver.select.call_count == 1
