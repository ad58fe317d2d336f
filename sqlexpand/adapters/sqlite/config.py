"""SQLite database configuration."""

import sqlite3
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, ClassVar, Optional, TypedDict

from typing_extensions import NotRequired

from sqlexpand.adapters.sqlite.driver import SqliteDriver, sqlite_parameter_config
from sqlexpand.parameters import ParameterStyleConfig
from sqlexpand.utils.logging import get_logger

__all__ = ("SqliteConfig", "SqliteConnectionParams")

logger = get_logger("adapters.sqlite")


class SqliteConnectionParams(TypedDict, total=False):
    """SQLite connection parameters."""

    timeout: NotRequired[float]
    detect_types: NotRequired[int]
    isolation_level: "NotRequired[Optional[str]]"
    check_same_thread: NotRequired[bool]
    cached_statements: NotRequired[int]
    uri: NotRequired[bool]


class SqliteConfig:
    """SQLite configuration providing one connection per session."""

    __slots__ = ("connection_config", "database", "parameter_config")

    driver_type: "ClassVar[type[SqliteDriver]]" = SqliteDriver

    def __init__(
        self,
        database: str = ":memory:",
        parameter_config: "Optional[ParameterStyleConfig]" = None,
        **connection_config: Any,
    ) -> None:
        """Initialize SQLite configuration.

        Args:
            database: Path to the database file, ``":memory:"`` or a ``file:`` URI
            parameter_config: Placeholder style the driver rebinds to, qmark by default
            **connection_config: Further ``sqlite3.connect`` keyword arguments, see :class:`SqliteConnectionParams`
        """
        if database.startswith("file:") and not connection_config.get("uri"):
            logger.debug("Database URI detected (%s) but uri=True not set. Auto-enabling URI mode.", database)
            connection_config["uri"] = True
        self.database = database
        self.parameter_config = parameter_config or sqlite_parameter_config
        self.connection_config: SqliteConnectionParams = connection_config  # type: ignore[assignment]

    def create_connection(self) -> sqlite3.Connection:
        """Open a new SQLite connection."""
        return sqlite3.connect(self.database, **self.connection_config)

    @contextmanager
    def provide_connection(self) -> "Generator[sqlite3.Connection, None, None]":
        """Provide a SQLite connection that is closed on exit."""
        connection = self.create_connection()
        try:
            yield connection
        finally:
            connection.close()

    @contextmanager
    def provide_session(
        self, parameter_config: "Optional[ParameterStyleConfig]" = None
    ) -> "Generator[SqliteDriver, None, None]":
        """Provide a SQLite driver session.

        Yields:
            SqliteDriver: A driver bound to a fresh connection
        """
        with self.provide_connection() as connection:
            yield self.driver_type(connection, parameter_config or self.parameter_config)
