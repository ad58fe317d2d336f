"""sqlexpand: IN-list expansion, paired conditions and bulk inserts over DB-API drivers."""

from sqlexpand import adapters, driver, exceptions, parameters, typing, utils
from sqlexpand.__metadata__ import __version__
from sqlexpand.bulk import build_bulk_insert, bulk_insert
from sqlexpand.driver import ExecutionResult, SyncDriverAdapterBase
from sqlexpand.exceptions import (
    ArityMismatchError,
    ExecutionError,
    ExpansionError,
    ImproperConfigurationError,
    RebindError,
    SQLBuilderError,
    SQLExpandError,
)
from sqlexpand.expand import expand_in, select_in
from sqlexpand.paired import build_paired_query, select_in_paired, select_in_paired_with_args
from sqlexpand.parameters import ParameterStyle, ParameterStyleConfig, Rebinder
from sqlexpand.patterns import BIND_PARAMETER_PATTERNS, generate_placeholder_pattern, placeholder_pattern
from sqlexpand.protocols import QueryExecutor

__all__ = (
    "BIND_PARAMETER_PATTERNS",
    "ArityMismatchError",
    "ExecutionError",
    "ExecutionResult",
    "ExpansionError",
    "ImproperConfigurationError",
    "ParameterStyle",
    "ParameterStyleConfig",
    "QueryExecutor",
    "RebindError",
    "Rebinder",
    "SQLBuilderError",
    "SQLExpandError",
    "SyncDriverAdapterBase",
    "__version__",
    "adapters",
    "build_bulk_insert",
    "build_paired_query",
    "bulk_insert",
    "driver",
    "exceptions",
    "expand_in",
    "generate_placeholder_pattern",
    "parameters",
    "placeholder_pattern",
    "select_in",
    "select_in_paired",
    "select_in_paired_with_args",
    "typing",
    "utils",
)
