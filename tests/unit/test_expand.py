"""Unit tests for IN-list expansion."""

from unittest.mock import Mock

import pytest
import sqlglot
from sqlglot import exp

from sqlexpand import ExpansionError, expand_in, select_in


@pytest.mark.parametrize("count", [1, 2, 3, 9, 10, 25])
def test_expand_in_produces_one_marker_per_value(count: int) -> None:
    values = list(range(count))

    query, args = expand_in("SELECT * FROM t WHERE id IN (?)", values)

    assert query.count("?") == count
    assert args == values
    parsed = sqlglot.parse_one(query, read="sqlite")
    assert len(list(parsed.find_all(exp.Placeholder))) == count


def test_expand_in_preserves_order() -> None:
    query, args = expand_in("SELECT * FROM t WHERE id IN (?)", [6, 2, 4])

    assert query == "SELECT * FROM t WHERE id IN (?, ?, ?)"
    assert args == [6, 2, 4]


def test_expand_in_mixes_scalars_and_collections() -> None:
    query, args = expand_in(
        "SELECT * FROM t WHERE tenant = ? AND id IN (?) AND kind IN (?)", "acme", (1, 2), ["a", "b", "c"]
    )

    assert query == "SELECT * FROM t WHERE tenant = ? AND id IN (?, ?) AND kind IN (?, ?, ?)"
    assert args == ["acme", 1, 2, "a", "b", "c"]


def test_expand_in_without_collections_leaves_query_unchanged() -> None:
    query, args = expand_in("SELECT * FROM t WHERE id = ? AND name = ?", 1, "x")

    assert query == "SELECT * FROM t WHERE id = ? AND name = ?"
    assert args == [1, "x"]


@pytest.mark.parametrize("scalar", ["abc", b"abc", bytearray(b"abc")])
def test_expand_in_binds_strings_and_bytes_as_scalars(scalar: object) -> None:
    query, args = expand_in("SELECT * FROM t WHERE v = ?", scalar)

    assert query == "SELECT * FROM t WHERE v = ?"
    assert args == [scalar]


def test_expand_in_composite_keys() -> None:
    query, args = expand_in("SELECT * FROM t WHERE (id, name) IN (?)", [(1, "a"), (2, "b")])

    assert query == "SELECT * FROM t WHERE (id, name) IN ((?, ?), (?, ?))"
    assert args == [1, "a", 2, "b"]


def test_expand_in_ignores_markers_inside_literals_and_comments() -> None:
    query, args = expand_in("SELECT '?' AS q FROM t /* ? */ WHERE id IN (?) -- ?", [1, 2])

    assert query == "SELECT '?' AS q FROM t /* ? */ WHERE id IN (?, ?) -- ?"
    assert args == [1, 2]


def test_expand_in_treats_backslash_as_literal_character() -> None:
    query, args = expand_in("SELECT * FROM t WHERE path = 'C:\\' AND id IN (?) AND kind = 'x'", [1, 2])

    assert query == "SELECT * FROM t WHERE path = 'C:\\' AND id IN (?, ?) AND kind = 'x'"
    assert args == [1, 2]


def test_expand_in_skips_doubled_quotes_inside_literals() -> None:
    query, args = expand_in("SELECT 'it''s ?' AS q, \"a \"\"?\"\" b\" FROM t WHERE id IN (?)", [1, 2])

    assert query == "SELECT 'it''s ?' AS q, \"a \"\"?\"\" b\" FROM t WHERE id IN (?, ?)"
    assert args == [1, 2]


def test_expand_in_empty_collection_fails() -> None:
    with pytest.raises(ExpansionError, match="Empty collection"):
        expand_in("SELECT * FROM t WHERE id IN (?)", [])


@pytest.mark.parametrize(
    "query,args",
    [
        ("SELECT * FROM t WHERE id IN (?)", ()),
        ("SELECT * FROM t WHERE id IN (?)", ([1], [2])),
        ("SELECT * FROM t WHERE id IN (?) AND name = ?", ([1],)),
        ("SELECT * FROM t", ([1],)),
    ],
)
def test_expand_in_marker_count_mismatch_fails(query: str, args: tuple) -> None:
    with pytest.raises(ExpansionError, match="placeholders but"):
        expand_in(query, *args)


@pytest.mark.parametrize("values", [[(1, "a"), (2,)], [(1, "a"), 2], [1, (2, "b")], [()]])
def test_expand_in_inconsistent_composite_values_fail(values: list) -> None:
    with pytest.raises(ExpansionError):
        expand_in("SELECT * FROM t WHERE (id, name) IN (?)", values)


def test_select_in_rebinds_once_then_selects(mock_driver: Mock) -> None:
    mock_driver.select.return_value = [{"id": 2}, {"id": 4}]

    rows = select_in(mock_driver, "SELECT * FROM t WHERE id IN (?)", [2, 4])

    assert rows == [{"id": 2}, {"id": 4}]
    mock_driver.rebind.assert_called_once_with("SELECT * FROM t WHERE id IN (?, ?)")
    mock_driver.select.assert_called_once_with("SELECT * FROM t WHERE id IN (?, ?)", [2, 4], schema_type=None)
    mock_driver.execute.assert_not_called()


def test_select_in_passes_rebound_query_and_schema_type(mock_driver: Mock) -> None:
    mock_driver.rebind.side_effect = lambda sql: sql.replace("?", "%s")

    select_in(mock_driver, "SELECT * FROM t WHERE id IN (?)", [1, 2], schema_type=dict)

    mock_driver.select.assert_called_once_with("SELECT * FROM t WHERE id IN (%s, %s)", [1, 2], schema_type=dict)


def test_select_in_expansion_error_skips_driver(mock_driver: Mock) -> None:
    with pytest.raises(ExpansionError):
        select_in(mock_driver, "SELECT * FROM t WHERE id IN (?)", [])

    mock_driver.rebind.assert_not_called()
    mock_driver.select.assert_not_called()


def test_select_in_propagates_driver_errors(mock_driver: Mock) -> None:
    failure = RuntimeError("connection reset")
    mock_driver.select.side_effect = failure

    with pytest.raises(RuntimeError) as exc_info:
        select_in(mock_driver, "SELECT * FROM t WHERE id IN (?)", [1])

    assert exc_info.value is failure
    assert mock_driver.select.call_count == 1
