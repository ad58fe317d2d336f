"""Decode driver rows into caller-supplied record types."""

from typing import Any, Optional, overload

import msgspec

from sqlexpand.exceptions import SQLExpandError
from sqlexpand.typing import DictRow, SchemaT

__all__ = ("to_schema",)


@overload
def to_schema(data: "list[DictRow]", *, schema_type: "type[SchemaT]") -> "list[SchemaT]": ...
@overload
def to_schema(data: "list[DictRow]", *, schema_type: None = None) -> "list[DictRow]": ...


def to_schema(data: "list[DictRow]", *, schema_type: "Optional[type[Any]]" = None) -> "list[Any]":
    """Convert rows to the target schema type.

    Anything ``msgspec.convert`` understands is accepted: dataclasses,
    ``msgspec.Struct``, ``TypedDict`` and attrs classes. Values are converted
    leniently so that, for example, SQLite integers decode into ``bool`` fields.

    Args:
        data: Rows keyed by column name.
        schema_type: The record type to decode into. ``None`` or ``dict`` returns the rows unchanged.

    Raises:
        SQLExpandError: If a row does not fit the schema type.

    Returns:
        The decoded rows, in input order.
    """
    if schema_type is None or schema_type is dict:
        return data

    try:
        return msgspec.convert(data, type=list[schema_type], from_attributes=True, strict=False)  # type: ignore[valid-type]
    except msgspec.ValidationError as e:
        msg = f"Could not decode rows into {schema_type.__name__}: {e}"
        raise SQLExpandError(msg) from e
