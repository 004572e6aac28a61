"""Row to Record mapping driven by per-column type tags."""
from typing import Any, Callable, Dict, List, Sequence

from recordbrowser.records.models import Record
from .types import ColumnSpec, ColumnType

NULL_TEXT = ""


def _coerce_text(value: Any) -> str:
    return str(value)


def _coerce_integer(value: Any) -> str:
    # Loosely typed backends (SQLite affinity) can hold non-integers here.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return _coerce_text(value)


COERCERS: Dict[ColumnType, Callable[[Any], str]] = {
    ColumnType.INTEGER: _coerce_integer,
    ColumnType.TEXT: _coerce_text,
}


def coerce_value(value: Any, column_type: ColumnType) -> str:
    """Coerces one cell to its display string.

    NULL renders as an empty string for every column type. Tags without a
    dedicated coercer use the value's own string representation.
    """
    if value is None:
        return NULL_TEXT
    coercer = COERCERS.get(column_type, _coerce_text)
    return coercer(value)


def map_row(row: Sequence[Any], columns: Sequence[ColumnSpec]) -> Record:
    """Converts one raw row into a Record, keeping column order.

    Raises:
        ValueError: If the row width does not match the column metadata.
    """
    if len(row) != len(columns):
        raise ValueError(
            f"Row has {len(row)} values but {len(columns)} columns were described"
        )
    return Record(
        pairs=tuple(
            (column.name, coerce_value(value, column.type))
            for column, value in zip(columns, row)
        )
    )


def map_rows(rows: Sequence[Sequence[Any]], columns: Sequence[ColumnSpec]) -> List[Record]:
    return [map_row(row, columns) for row in rows]
