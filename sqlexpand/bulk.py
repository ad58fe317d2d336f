"""Single-statement multi-row INSERT building."""

from typing import TYPE_CHECKING, Any, Optional

from sqlexpand.exceptions import ArityMismatchError, SQLBuilderError
from sqlexpand.patterns import placeholder_pattern
from sqlexpand.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlexpand.driver import ExecutionResult
    from sqlexpand.protocols import QueryExecutor
    from sqlexpand.typing import RowMatrix

__all__ = ("build_bulk_insert", "bulk_insert")

logger = get_logger("bulk")


def build_bulk_insert(query: str, values: "RowMatrix") -> "tuple[str, list[Any]]":
    """Append one VALUES tuple per row to an INSERT prefix.

    ``" VALUES "`` is appended to ``query`` unless it already contains the
    substring ``"VALUES"``.

    Args:
        query: INSERT prefix naming the table and columns, e.g. ``"INSERT INTO t (id, name)"``.
        values: Rows, all of the first row's length.

    Raises:
        SQLBuilderError: If ``values`` is empty.
        ArityMismatchError: If the first row is empty or a row's length differs from it.

    Returns:
        The statement and the row values flattened in row-major order.
    """
    if not values:
        msg = "No rows to insert"
        raise SQLBuilderError(msg)

    arity = len(values[0])
    if arity == 0:
        msg = "invalid value"
        raise ArityMismatchError(msg)

    if "VALUES" not in query:
        query += " VALUES "

    pattern = placeholder_pattern(arity)
    parameters: list[Any] = []
    for row in values:
        if len(row) != arity:
            msg = "invalid value"
            raise ArityMismatchError(msg)
        parameters.extend(row)

    return query + ", ".join([pattern] * len(values)), parameters


def bulk_insert(driver: "QueryExecutor", query: str, values: "RowMatrix") -> "Optional[ExecutionResult]":
    """Insert all rows with a single statement.

    An empty ``values`` returns ``None`` without touching ``driver``.

    Args:
        driver: Database handle providing ``rebind`` and ``execute``.
        query: INSERT prefix naming the table and columns.
        values: Rows, all of the same length.

    Returns:
        The driver's execution result, or ``None`` when there was nothing to insert.
    """
    if not values:
        return None

    statement, parameters = build_bulk_insert(query, values)
    logger.debug("Built bulk insert of %d rows with %d parameters", len(values), len(parameters))
    return driver.execute(driver.rebind(statement), parameters)
