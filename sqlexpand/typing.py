from collections.abc import Sequence
from typing import Any

from typing_extensions import TypeAlias, TypeVar

__all__ = ("DictRow", "RowMatrix", "SchemaT")

SchemaT = TypeVar("SchemaT", default=dict[str, Any])
"""Type variable for the record shape rows are decoded into."""

DictRow: TypeAlias = "dict[str, Any]"
"""Type alias for a row returned as a dictionary keyed by column name."""

RowMatrix: TypeAlias = "Sequence[Sequence[Any]]"
"""Type alias for rows of insert values or paired-condition tuples."""
