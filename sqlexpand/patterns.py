"""Placeholder patterns for VALUES tuples."""

from typing import Final

from sqlexpand.exceptions import SQLBuilderError
from sqlexpand.parameters.types import PLACEHOLDER_MARKER

__all__ = ("BIND_PARAMETER_PATTERNS", "generate_placeholder_pattern", "placeholder_pattern")


def generate_placeholder_pattern(arity: int) -> str:
    """Build a parenthesised group of ``arity`` markers, e.g. ``(?, ?, ?)``.

    Args:
        arity: Number of markers in the group, at least 1.

    Raises:
        SQLBuilderError: If ``arity`` is less than 1.

    Returns:
        The placeholder group.
    """
    if arity < 1:
        msg = f"Placeholder pattern arity must be positive, got {arity}"
        raise SQLBuilderError(msg)
    return "(" + ", ".join([PLACEHOLDER_MARKER] * arity) + ")"


# index = arity - 1
BIND_PARAMETER_PATTERNS: "Final[tuple[str, ...]]" = (
    "(?)",
    "(?, ?)",
    "(?, ?, ?)",
    "(?, ?, ?, ?)",
    "(?, ?, ?, ?, ?)",
    "(?, ?, ?, ?, ?, ?)",
    "(?, ?, ?, ?, ?, ?, ?)",
    "(?, ?, ?, ?, ?, ?, ?, ?)",
    "(?, ?, ?, ?, ?, ?, ?, ?, ?)",
)


def placeholder_pattern(arity: int) -> str:
    """Return the placeholder group for a row of ``arity`` values.

    Widths 1-9 come from :data:`BIND_PARAMETER_PATTERNS`; wider rows are generated.
    """
    if 0 < arity <= len(BIND_PARAMETER_PATTERNS):
        return BIND_PARAMETER_PATTERNS[arity - 1]
    return generate_placeholder_pattern(arity)
