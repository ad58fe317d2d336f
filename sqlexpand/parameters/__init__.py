"""Placeholder detection and rebinding for sqlexpand.

Statements are built with ``?`` markers and rewritten into a driver's native
placeholder syntax once, just before execution.
"""

from sqlexpand.parameters.config import DIALECT_PARAMETER_STYLES, PARAMSTYLE_PARAMETER_STYLES, ParameterStyleConfig
from sqlexpand.parameters.rebind import Rebinder
from sqlexpand.parameters.types import NAMED_PARAMETER_STYLES, PLACEHOLDER_MARKER, ParameterInfo, ParameterStyle
from sqlexpand.parameters.validator import ParameterValidator

__all__ = (
    "DIALECT_PARAMETER_STYLES",
    "NAMED_PARAMETER_STYLES",
    "PARAMSTYLE_PARAMETER_STYLES",
    "PLACEHOLDER_MARKER",
    "ParameterInfo",
    "ParameterStyle",
    "ParameterStyleConfig",
    "ParameterValidator",
    "Rebinder",
)
