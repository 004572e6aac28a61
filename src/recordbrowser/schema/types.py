from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict
from sqlalchemy.types import Integer, TypeEngine

# Native type names (Postgres catalog names and common SQL spellings) that hold integers.
INTEGER_TYPE_NAMES = {
    "int", "int2", "int4", "int8",
    "integer", "smallint", "bigint",
    "serial", "smallserial", "bigserial",
    "serial2", "serial4", "serial8",
}


class ColumnType(str, Enum):
    """How a raw cell value is coerced to text."""
    INTEGER = "INTEGER"
    TEXT = "TEXT"

    @classmethod
    def from_native(cls, native: Union[TypeEngine, str, None]) -> "ColumnType":
        """Resolves the coercion tag for a column from result-set metadata.

        Accepts either a SQLAlchemy type (as returned by reflection) or a native
        type name such as ``int4``. Anything not recognized as an integer type
        falls back to TEXT.
        """
        if isinstance(native, TypeEngine):
            return cls.INTEGER if isinstance(native, Integer) else cls.TEXT
        if isinstance(native, str):
            name = native.split("(", 1)[0].strip().lower()
            if name in INTEGER_TYPE_NAMES:
                return cls.INTEGER
        return cls.TEXT


class ColumnSpec(BaseModel):
    """Name and coercion tag of one result column."""

    name: str
    type: ColumnType = ColumnType.TEXT
    native_type: str = "unknown"

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_reflection(cls, name: str, native: Any) -> "ColumnSpec":
        return cls(name=name, type=ColumnType.from_native(native), native_type=str(native))
