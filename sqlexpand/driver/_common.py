"""Common driver types."""

from typing import NamedTuple, Optional, Union

__all__ = ("ExecutionResult",)


class ExecutionResult(NamedTuple):
    """Acknowledgement of a statement that returns no rows.

    Attributes:
        rows_affected: Row count reported by the cursor, ``-1`` when the driver cannot tell
        last_inserted_id: The cursor's ``lastrowid`` where the driver exposes one
    """

    rows_affected: int
    last_inserted_id: Optional[Union[int, str]] = None
