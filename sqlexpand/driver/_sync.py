"""Synchronous driver implementation for PEP 249 connections."""

import contextlib
from collections.abc import Generator, Sequence
from contextlib import contextmanager
from typing import Any, ClassVar, Optional, Union

from sqlexpand.driver._common import ExecutionResult
from sqlexpand.exceptions import ExecutionError, ImproperConfigurationError
from sqlexpand.parameters import ParameterStyle, ParameterStyleConfig, Rebinder
from sqlexpand.typing import DictRow
from sqlexpand.utils.logging import get_logger
from sqlexpand.utils.schema import to_schema

__all__ = ("SyncDriverAdapterBase",)

logger = get_logger("driver")


class SyncDriverAdapterBase:
    """Executes statements on a DB-API connection.

    Statements arrive with ``?`` markers; :meth:`rebind` rewrites them to the
    style in ``parameter_config`` and :meth:`select` / :meth:`execute` shape
    the positional arguments to match that style. Exceptions of the types in
    ``database_error_types`` are re-raised as :class:`ExecutionError`.

    Subclasses list the styles their connection understands in
    ``default_parameter_config.supported_parameter_styles``; any other
    configured style is rejected with :class:`ImproperConfigurationError`.
    """

    __slots__ = ("connection", "database_error_types", "parameter_config", "rebinder")

    dialect: "ClassVar[Optional[str]]" = None
    default_parameter_config: "ClassVar[ParameterStyleConfig]" = ParameterStyleConfig(
        supported_parameter_styles=set(ParameterStyle)
    )
    default_database_error_types: "ClassVar[tuple[type[Exception], ...]]" = ()

    def __init__(
        self,
        connection: Any,
        parameter_config: "Optional[ParameterStyleConfig]" = None,
        database_error_types: "Optional[tuple[type[Exception], ...]]" = None,
    ) -> None:
        self.connection = connection
        self.parameter_config = parameter_config or self.default_parameter_config
        style = self.parameter_config.default_parameter_style
        supported = self.default_parameter_config.supported_parameter_styles
        if style not in supported:
            msg = (
                f"{type(self).__name__} does not support parameter style {style!s}, "
                f"expected one of: {', '.join(sorted(str(s) for s in supported))}"
            )
            raise ImproperConfigurationError(msg)
        self.rebinder: Rebinder = self.parameter_config.create_rebinder()
        self.database_error_types = (
            database_error_types if database_error_types is not None else self.default_database_error_types
        )

    def rebind(self, sql: str) -> str:
        return self.rebinder.rebind(sql)

    @contextmanager
    def with_cursor(self) -> "Generator[Any, None, None]":
        """Provide a cursor that is closed on exit."""
        cursor = self.connection.cursor()
        try:
            yield cursor
        finally:
            with contextlib.suppress(Exception):
                cursor.close()

    @contextmanager
    def handle_database_exceptions(self, sql: Optional[str] = None) -> "Generator[None, None, None]":
        """Wrap the driver's database errors in :class:`ExecutionError`."""
        try:
            yield
        except self.database_error_types as e:
            msg = f"{type(self).__name__} database error: {e}"
            raise ExecutionError(msg, sql=sql) from e

    def prepare_parameters(self, parameters: "Optional[Sequence[Any]]") -> "Union[list[Any], dict[str, Any]]":
        """Shape positional arguments for the configured parameter style."""
        return self.rebinder.bind_parameters(parameters or ())

    def select(
        self, sql: str, parameters: "Optional[Sequence[Any]]" = None, *, schema_type: "Optional[type[Any]]" = None
    ) -> "list[Any]":
        """Run a query and return its rows.

        Args:
            sql: Statement already rebound to the driver's parameter style
            parameters: Arguments in marker order
            schema_type: Optional record type to decode each row into

        Returns:
            Rows as dictionaries keyed by column name, or as ``schema_type`` instances.
        """
        prepared = self.prepare_parameters(parameters)
        logger.debug("Selecting with %d parameters: %s", len(prepared), sql)
        with self.handle_database_exceptions(sql), self.with_cursor() as cursor:
            cursor.execute(sql, prepared)
            column_names = [column[0] for column in cursor.description or ()]
            data: list[DictRow] = [dict(zip(column_names, row)) for row in cursor.fetchall()]
        return to_schema(data, schema_type=schema_type)

    def execute(self, sql: str, parameters: "Optional[Sequence[Any]]" = None) -> ExecutionResult:
        """Run a statement that returns no rows.

        Args:
            sql: Statement already rebound to the driver's parameter style
            parameters: Arguments in marker order

        Returns:
            The cursor's row count and last inserted id.
        """
        prepared = self.prepare_parameters(parameters)
        logger.debug("Executing with %d parameters: %s", len(prepared), sql)
        with self.handle_database_exceptions(sql), self.with_cursor() as cursor:
            cursor.execute(sql, prepared)
            return ExecutionResult(
                rows_affected=cursor.rowcount if cursor.rowcount is not None else -1,
                last_inserted_id=getattr(cursor, "lastrowid", None),
            )
