"""Parameter extraction logic.

Placeholders are located with a single regex pass that also matches string
literals, comments and PostgreSQL operators so that anything that only looks
like a placeholder inside them is skipped.
"""

import re
from typing import Final, Optional

from sqlexpand.parameters.types import ParameterInfo, ParameterStyle

__all__ = ("ParameterValidator",)


_PARAMETER_REGEX: Final = re.compile(
    r"""
    # Literals and comments are matched first and skipped; quotes escape by doubling
    (?P<dquote>"(?:[^"]|"")*") |
    (?P<squote>'(?:[^']|'')*') |
    (?P<dollar_quoted_string>\$(?P<dollar_quote_tag_inner>\w*)?\$[\s\S]*?\$(?P=dollar_quote_tag_inner)\$) |
    (?P<line_comment>--[^\r\n]*) |
    (?P<block_comment>/\*(?:[^*]|\*(?!/))*\*/) |
    # Tokens that contain parameter-like characters
    (?P<pg_q_operator>\?\?|\?\||\?&) |
    (?P<pg_cast>::(?P<cast_type>\w+)) |
    # Placeholders
    (?P<pyformat_named>%\((?P<pyformat_name>\w+)\)s) |
    (?P<pyformat_pos>%s) |
    (?P<positional_colon>:(?P<colon_num>\d+)) |
    (?P<named_colon>:(?P<colon_name>\w+)) |
    (?P<named_at>@(?P<at_name>\w+)) |
    (?P<dollar_param>\$(?P<dollar_param_name>\w+)) |
    (?P<qmark>\?)
    """,
    re.VERBOSE | re.IGNORECASE | re.MULTILINE | re.DOTALL,
)

_SKIPPED_GROUPS: Final = (
    "dquote",
    "squote",
    "dollar_quoted_string",
    "line_comment",
    "block_comment",
    "pg_q_operator",
    "pg_cast",
)

# placeholder group -> (style, group holding the name)
_PLACEHOLDER_GROUPS: "Final[dict[str, tuple[ParameterStyle, Optional[str]]]]" = {
    "qmark": (ParameterStyle.QMARK, None),
    "pyformat_pos": (ParameterStyle.POSITIONAL_PYFORMAT, None),
    "pyformat_named": (ParameterStyle.NAMED_PYFORMAT, "pyformat_name"),
    "positional_colon": (ParameterStyle.POSITIONAL_COLON, "colon_num"),
    "named_colon": (ParameterStyle.NAMED_COLON, "colon_name"),
    "named_at": (ParameterStyle.NAMED_AT, "at_name"),
    "dollar_param": (ParameterStyle.NUMERIC, "dollar_param_name"),
}


class ParameterValidator:
    """Extracts SQL parameters with detailed information."""

    __slots__ = ()

    def extract_parameters(self, sql: str, style: Optional[ParameterStyle] = None) -> "list[ParameterInfo]":
        """Extract parameter information from SQL string.

        Args:
            sql: SQL string to analyze
            style: Only return placeholders of this style

        Returns:
            List of ParameterInfo objects, sorted by position
        """
        parameters: list[ParameterInfo] = []

        for match in _PARAMETER_REGEX.finditer(sql):
            group = match.lastgroup
            if group is None or group in _SKIPPED_GROUPS:
                continue
            if group not in _PLACEHOLDER_GROUPS:
                continue
            found_style, name_group = _PLACEHOLDER_GROUPS[group]
            name = match.group(name_group) if name_group else None
            # $name is not a positional placeholder
            if found_style is ParameterStyle.NUMERIC and not (name or "").isdigit():
                continue
            if style is not None and found_style is not style:
                continue
            parameters.append(
                ParameterInfo(
                    name=name, style=found_style, position=match.start(group), placeholder_text=match.group(group)
                )
            )

        return parameters
