"""Collection placeholder expansion for ``IN (?)`` queries."""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Optional

from sqlexpand.exceptions import ExpansionError
from sqlexpand.parameters import PLACEHOLDER_MARKER, ParameterStyle, ParameterValidator
from sqlexpand.patterns import placeholder_pattern
from sqlexpand.utils.logging import get_logger
from sqlexpand.utils.type_guards import is_expandable

if TYPE_CHECKING:
    from sqlexpand.protocols import QueryExecutor

__all__ = ("expand_in", "select_in")

logger = get_logger("expand")

_validator = ParameterValidator()


def expand_in(query: str, *args: Any) -> "tuple[str, list[Any]]":
    """Expand collection arguments into one ``?`` per element.

    Each ``?`` marker in ``query`` is paired with the argument at the same
    position. Scalar arguments keep their single marker. A list, tuple, set
    or frozenset argument replaces its marker with one marker per element, so
    ``"id IN (?)"`` with ``[1, 2, 3]`` becomes ``"id IN (?, ?, ?)"``. A
    collection of collections expands to parenthesised groups for composite
    keys: ``"(a, b) IN (?)"`` with ``[(1, 2), (3, 4)]`` becomes
    ``"(a, b) IN ((?, ?), (?, ?))"``.

    Args:
        query: Statement using ``?`` markers.
        *args: One argument per marker.

    Raises:
        ExpansionError: If the marker and argument counts differ, a collection
            is empty, or composite elements differ in arity.

    Returns:
        The expanded query and the flattened arguments in marker order.
    """
    markers = _validator.extract_parameters(query, ParameterStyle.QMARK)
    if len(markers) != len(args):
        msg = f"Query has {len(markers)} placeholders but {len(args)} arguments were provided"
        raise ExpansionError(msg)

    parts: list[str] = []
    flattened: list[Any] = []
    current_pos = 0
    for marker, arg in zip(markers, args):
        parts.append(query[current_pos : marker.position])
        if is_expandable(arg):
            placeholders, values = _expand_collection(arg)
            parts.append(placeholders)
            flattened.extend(values)
        else:
            parts.append(marker.placeholder_text)
            flattened.append(arg)
        current_pos = marker.position + len(marker.placeholder_text)
    parts.append(query[current_pos:])

    return "".join(parts), flattened


def _expand_collection(collection: "Sequence[Any]") -> "tuple[str, list[Any]]":
    items = list(collection)
    if not items:
        msg = "Empty collection passed to 'IN' query"
        raise ExpansionError(msg)

    if not is_expandable(items[0]):
        if any(is_expandable(item) for item in items):
            msg = "Collection mixes scalar and composite values"
            raise ExpansionError(msg)
        return ", ".join([PLACEHOLDER_MARKER] * len(items)), items

    arity = len(items[0])
    if arity == 0:
        msg = "Empty composite value passed to 'IN' query"
        raise ExpansionError(msg)
    flattened: list[Any] = []
    for item in items:
        if not is_expandable(item) or len(item) != arity:
            msg = f"Composite values must all have {arity} elements"
            raise ExpansionError(msg)
        flattened.extend(item)
    return ", ".join([placeholder_pattern(arity)] * len(items)), flattened


def select_in(
    driver: "QueryExecutor", query: str, *args: Any, schema_type: "Optional[type[Any]]" = None
) -> "list[Any]":
    """Expand collection arguments, rebind and run the query.

    Args:
        driver: Database handle providing ``rebind`` and ``select``.
        query: Statement using ``?`` markers.
        *args: One argument per marker, see :func:`expand_in`.
        schema_type: Optional record type to decode rows into.

    Returns:
        The rows in the order the database returns them.
    """
    expanded, parameters = expand_in(query, *args)
    logger.debug("Expanded IN query to %d parameters", len(parameters))
    return driver.select(driver.rebind(expanded), parameters, schema_type=schema_type)
