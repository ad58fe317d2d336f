"""Rewrite ``?`` markers into a driver's native placeholder syntax."""

from collections.abc import Sequence
from typing import Any, Callable, Final, Union

from sqlexpand.exceptions import RebindError
from sqlexpand.parameters.types import NAMED_PARAMETER_STYLES, ParameterStyle
from sqlexpand.parameters.validator import ParameterValidator

__all__ = ("Rebinder",)

_PLACEHOLDER_FACTORIES: "Final[dict[ParameterStyle, Callable[[int], str]]]" = {
    ParameterStyle.QMARK: lambda _: "?",
    ParameterStyle.NUMERIC: lambda i: f"${i}",
    ParameterStyle.POSITIONAL_COLON: lambda i: f":{i}",
    ParameterStyle.NAMED_COLON: lambda i: f":arg{i}",
    ParameterStyle.NAMED_AT: lambda i: f"@p{i}",
    ParameterStyle.POSITIONAL_PYFORMAT: lambda _: "%s",
    ParameterStyle.NAMED_PYFORMAT: lambda i: f"%(arg{i})s",
}

_NAME_FACTORIES: "Final[dict[ParameterStyle, Callable[[int], str]]]" = {
    ParameterStyle.NAMED_COLON: lambda i: f"arg{i}",
    ParameterStyle.NAMED_AT: lambda i: f"p{i}",
    ParameterStyle.NAMED_PYFORMAT: lambda i: f"arg{i}",
}


class Rebinder:
    """Translate ``?`` markers to a target parameter style.

    Only ``?`` markers are rewritten. Markers are numbered from 1 in
    left-to-right order; everything else in the statement is left untouched.
    """

    __slots__ = ("style", "validator")

    def __init__(self, style: ParameterStyle = ParameterStyle.QMARK) -> None:
        if style not in _PLACEHOLDER_FACTORIES:
            msg = f"Cannot rebind placeholders to parameter style {style!s}"
            raise RebindError(msg)
        self.style = style
        self.validator = ParameterValidator()

    @property
    def is_named(self) -> bool:
        """Whether the target style binds arguments by name."""
        return self.style in NAMED_PARAMETER_STYLES

    def rebind(self, sql: str) -> str:
        """Rewrite the ``?`` markers of ``sql`` into the target style.

        Args:
            sql: Statement using ``?`` markers.

        Returns:
            The statement using the target style's placeholders.
        """
        if self.style is ParameterStyle.QMARK:
            return sql

        markers = self.validator.extract_parameters(sql, ParameterStyle.QMARK)
        if not markers:
            return sql

        make_placeholder = _PLACEHOLDER_FACTORIES[self.style]
        result_parts = []
        current_pos = 0
        for i, marker in enumerate(markers, start=1):
            result_parts.append(sql[current_pos : marker.position])
            result_parts.append(make_placeholder(i))
            current_pos = marker.position + len(marker.placeholder_text)
        result_parts.append(sql[current_pos:])

        return "".join(result_parts)

    def bind_parameters(self, parameters: "Sequence[Any]") -> "Union[list[Any], dict[str, Any]]":
        """Shape positional arguments for the target style.

        Args:
            parameters: Arguments in marker order.

        Returns:
            A list for positional styles, or a dict keyed by the names ``rebind`` generated.
        """
        if not self.is_named:
            return list(parameters)
        make_name = _NAME_FACTORIES[self.style]
        return {make_name(i): value for i, value in enumerate(parameters, start=1)}
