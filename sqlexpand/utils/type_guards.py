"""Type guard functions for runtime type checking in sqlexpand."""

from collections.abc import Sequence
from typing import Any, Final

from typing_extensions import TypeGuard

__all__ = ("is_expandable",)

_SCALAR_SEQUENCE_TYPES: Final = (str, bytes, bytearray, memoryview)
_EXPANDABLE_TYPES: Final = (list, tuple, set, frozenset)


def is_expandable(value: Any) -> "TypeGuard[Sequence[Any]]":
    """Check if a value expands into one placeholder per element.

    Strings and binary values are bound as a single scalar.

    Args:
        value: The argument to check

    Returns:
        True if the value is a list, tuple, set or frozenset
    """
    return isinstance(value, _EXPANDABLE_TYPES) and not isinstance(value, _SCALAR_SEQUENCE_TYPES)
