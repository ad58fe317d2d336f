import datetime
import sqlite3
from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Callable, ClassVar, Final, Optional, Union

from sqlexpand.driver import SyncDriverAdapterBase
from sqlexpand.parameters import ParameterStyle, ParameterStyleConfig
from sqlexpand.utils.serializers import to_json

__all__ = ("SqliteDriver", "sqlite_parameter_config", "sqlite_type_coercion_map")

sqlite_parameter_config = ParameterStyleConfig(
    default_parameter_style=ParameterStyle.QMARK,
    supported_parameter_styles={ParameterStyle.QMARK, ParameterStyle.NAMED_COLON},
    dialect="sqlite",
)

sqlite_type_coercion_map: "Final[dict[type, Callable[[Any], Any]]]" = {
    datetime.datetime: lambda v: v.isoformat(),
    datetime.date: lambda v: v.isoformat(),
    Decimal: str,
    dict: to_json,
    list: to_json,
}


class SqliteDriver(SyncDriverAdapterBase):
    """SQLite driver built on the standard library ``sqlite3`` module."""

    __slots__ = ()

    dialect: "ClassVar[Optional[str]]" = "sqlite"
    default_parameter_config: "ClassVar[ParameterStyleConfig]" = sqlite_parameter_config
    default_database_error_types: "ClassVar[tuple[type[Exception], ...]]" = (sqlite3.Error,)

    def prepare_parameters(self, parameters: "Optional[Sequence[Any]]") -> "Union[list[Any], dict[str, Any]]":
        coerced = [_coerce(value) for value in parameters or ()]
        return super().prepare_parameters(coerced)

    def execute_script(self, sql: str) -> None:
        """Run a multi-statement script without parameters."""
        with self.handle_database_exceptions(sql):
            self.connection.executescript(sql)


def _coerce(value: Any) -> Any:
    converter = sqlite_type_coercion_map.get(type(value))
    return converter(value) if converter is not None else value
