"""SQLite adapter for sqlexpand."""

from sqlexpand.adapters.sqlite.config import SqliteConfig, SqliteConnectionParams
from sqlexpand.adapters.sqlite.driver import SqliteDriver, sqlite_parameter_config

__all__ = ("SqliteConfig", "SqliteConnectionParams", "SqliteDriver", "sqlite_parameter_config")
