from typing import Any, Optional

__all__ = (
    "ArityMismatchError",
    "ExecutionError",
    "ExpansionError",
    "ImproperConfigurationError",
    "RebindError",
    "SQLBuilderError",
    "SQLExpandError",
)


class SQLExpandError(Exception):
    """Base exception class from which all sqlexpand exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLExpandError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(SQLExpandError):
    """Improper Configuration error.

    This exception is raised when a dialect or paramstyle cannot be mapped to a parameter style.
    """


class SQLBuilderError(SQLExpandError):
    """Issues building SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class ExpansionError(SQLBuilderError):
    """Collection placeholders could not be matched to the supplied arguments."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Could not expand collection placeholders."
        super().__init__(message)


class ArityMismatchError(SQLBuilderError):
    """A row or condition tuple differs in length from the first one."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "invalid value"
        super().__init__(message)


class RebindError(SQLExpandError):
    """Placeholder markers could not be rewritten to the target parameter style."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Could not rebind placeholders."
        super().__init__(message)


class ExecutionError(SQLExpandError):
    """The database driver failed to execute a statement."""

    sql: Optional[str]

    def __init__(self, message: Optional[str] = None, sql: Optional[str] = None) -> None:
        if message is None:
            message = "Statement execution failed."
        super().__init__(message)
        self.sql = sql
