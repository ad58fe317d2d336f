import pytest

from sqlexpand.exceptions import (
    ArityMismatchError,
    ExecutionError,
    ExpansionError,
    ImproperConfigurationError,
    RebindError,
    SQLBuilderError,
    SQLExpandError,
)


def test_exception_hierarchy() -> None:
    """Builder errors share a base so callers can catch them together."""
    assert issubclass(ExpansionError, SQLBuilderError)
    assert issubclass(ArityMismatchError, SQLBuilderError)
    assert issubclass(SQLBuilderError, SQLExpandError)
    assert issubclass(RebindError, SQLExpandError)
    assert issubclass(ExecutionError, SQLExpandError)
    assert issubclass(ImproperConfigurationError, SQLExpandError)


@pytest.mark.parametrize(
    "exc_type,message",
    [
        (ArityMismatchError, "invalid value"),
        (ExpansionError, "Could not expand collection placeholders."),
        (SQLBuilderError, "Issues building SQL statement."),
        (RebindError, "Could not rebind placeholders."),
        (ExecutionError, "Statement execution failed."),
    ],
)
def test_default_messages(exc_type: "type[SQLExpandError]", message: str) -> None:
    exc = exc_type()

    assert str(exc) == message
    assert exc.detail == message
    assert repr(exc) == f"{exc_type.__name__} - {message}"


def test_base_exception_detail() -> None:
    exc = SQLExpandError("first", "second")

    assert exc.detail == "first"
    assert str(exc) == "second first"
    assert repr(SQLExpandError()) == "SQLExpandError"


def test_execution_error_keeps_sql_and_cause() -> None:
    try:
        try:
            raise ValueError("no such table: t")
        except ValueError as e:
            raise ExecutionError("SqliteDriver database error", sql="SELECT * FROM t") from e
    except ExecutionError as exc:
        assert exc.sql == "SELECT * FROM t"
        assert isinstance(exc.__cause__, ValueError)
