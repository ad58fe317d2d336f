"""Runtime-checkable protocols for the database collaborator.

The builders only need three operations from a database handle: rewriting
``?`` markers, running a query that returns rows, and running a statement
that does not.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sqlexpand.driver import ExecutionResult

__all__ = ("QueryExecutor", "Rebindable")


@runtime_checkable
class Rebindable(Protocol):
    """Protocol for objects that rewrite ``?`` markers into native placeholders."""

    def rebind(self, sql: str) -> str:
        """Rewrite the placeholder markers of ``sql``."""
        ...


@runtime_checkable
class QueryExecutor(Rebindable, Protocol):
    """Protocol for database handles the builders execute through."""

    def select(
        self, sql: str, parameters: "Optional[Sequence[Any]]" = None, *, schema_type: "Optional[type[Any]]" = None
    ) -> "list[Any]":
        """Run a query and return its decoded rows."""
        ...

    def execute(self, sql: str, parameters: "Optional[Sequence[Any]]" = None) -> "ExecutionResult":
        """Run a statement and return its execution result."""
        ...
