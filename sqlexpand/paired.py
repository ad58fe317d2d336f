"""Multi-column ``IN`` emulation through OR-joined condition templates.

``(id, name) IN ((1, 'a'), (2, 'b'))`` is not portable, so the condition is
written once as a template such as ``"(id = ? AND name = ?)"`` and repeated
for every argument tuple::

    SELECT * FROM t WHERE (id = ? AND name = ?) OR (id = ? AND name = ?)
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Optional

from sqlexpand.exceptions import ArityMismatchError, SQLBuilderError
from sqlexpand.utils.logging import get_logger

if TYPE_CHECKING:
    from sqlexpand.protocols import QueryExecutor
    from sqlexpand.typing import RowMatrix

__all__ = ("build_paired_query", "select_in_paired", "select_in_paired_with_args")

logger = get_logger("paired")


def build_paired_query(
    base_query: str, pair_query: str, custom_args: "Sequence[Any]", paired_args: "RowMatrix"
) -> "tuple[str, list[Any]]":
    """Append one copy of ``pair_query`` per tuple, joined by ``OR``.

    ``" WHERE "`` is appended to ``base_query`` unless it already contains the
    substring ``"WHERE"``. The check is a plain case-sensitive substring test,
    so ``WHERE`` inside a literal or identifier also counts.

    Args:
        base_query: Statement the conditions are appended to.
        pair_query: Condition template with one ``?`` per tuple element.
        custom_args: Arguments for markers in ``base_query``, bound first.
        paired_args: Argument tuples, all of the first tuple's length.

    Raises:
        SQLBuilderError: If ``paired_args`` is empty.
        ArityMismatchError: If a tuple's length differs from the first tuple's.

    Returns:
        The query and ``[*custom_args, *tuple1, *tuple2, ...]``.
    """
    if not paired_args:
        msg = "No argument tuples to build paired conditions from"
        raise SQLBuilderError(msg)

    if "WHERE" not in base_query:
        base_query += " WHERE "

    arity = len(paired_args[0])
    parameters: list[Any] = list(custom_args)
    for values in paired_args:
        if len(values) != arity:
            msg = "invalid value"
            raise ArityMismatchError(msg)
        parameters.extend(values)

    return base_query + " OR ".join([pair_query] * len(paired_args)), parameters


def select_in_paired_with_args(
    driver: "QueryExecutor",
    base_query: str,
    pair_query: str,
    custom_args: "Sequence[Any]",
    paired_args: "RowMatrix",
    *,
    schema_type: "Optional[type[Any]]" = None,
) -> "list[Any]":
    """Select rows matching any of the paired conditions.

    An empty ``paired_args`` returns ``[]`` without touching ``driver``.

    Args:
        driver: Database handle providing ``rebind`` and ``select``.
        base_query: Statement the conditions are appended to.
        pair_query: Condition template with one ``?`` per tuple element.
        custom_args: Arguments for markers in ``base_query``.
        paired_args: Argument tuples, all of the same length.
        schema_type: Optional record type to decode rows into.

    Returns:
        The rows in the order the database returns them.
    """
    if not paired_args:
        return []

    query, parameters = build_paired_query(base_query, pair_query, custom_args, paired_args)
    logger.debug("Built %d paired conditions with %d parameters", len(paired_args), len(parameters))
    return driver.select(driver.rebind(query), parameters, schema_type=schema_type)


def select_in_paired(
    driver: "QueryExecutor",
    base_query: str,
    pair_query: str,
    paired_args: "RowMatrix",
    *,
    schema_type: "Optional[type[Any]]" = None,
) -> "list[Any]":
    """Select rows matching any of the paired conditions, with no leading arguments."""
    return select_in_paired_with_args(driver, base_query, pair_query, [], paired_args, schema_type=schema_type)
