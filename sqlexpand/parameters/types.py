"""Core parameter types used throughout sqlexpand."""

from enum import Enum
from typing import Final, Optional

__all__ = ("NAMED_PARAMETER_STYLES", "PLACEHOLDER_MARKER", "ParameterInfo", "ParameterStyle")

PLACEHOLDER_MARKER: Final = "?"


class ParameterStyle(str, Enum):
    """Parameter style enumeration with string values."""

    QMARK = "qmark"
    NUMERIC = "numeric"
    POSITIONAL_COLON = "positional_colon"
    NAMED_COLON = "named_colon"
    NAMED_AT = "named_at"
    POSITIONAL_PYFORMAT = "pyformat_positional"
    NAMED_PYFORMAT = "pyformat_named"

    def __str__(self) -> str:
        """String representation for better error messages.

        Returns:
            The enum value as a string.
        """
        return self.value


NAMED_PARAMETER_STYLES: Final = frozenset({
    ParameterStyle.NAMED_COLON,
    ParameterStyle.NAMED_AT,
    ParameterStyle.NAMED_PYFORMAT,
})


class ParameterInfo:
    """Immutable parameter information."""

    __slots__ = ("name", "placeholder_text", "position", "style")

    def __init__(self, name: Optional[str], style: ParameterStyle, position: int, placeholder_text: str) -> None:
        self.name = name
        self.style = style
        self.position = position
        self.placeholder_text = placeholder_text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return self.name == other.name and self.style == other.style and self.position == other.position

    def __hash__(self) -> int:
        return hash((self.name, self.style, self.position))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"placeholder_text={self.placeholder_text!r}, position={self.position!r}, style={self.style!r})"
        )
