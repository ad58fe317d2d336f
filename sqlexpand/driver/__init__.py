"""Driver base classes for database adapters."""

from sqlexpand.driver._common import ExecutionResult
from sqlexpand.driver._sync import SyncDriverAdapterBase

__all__ = ("ExecutionResult", "SyncDriverAdapterBase")
