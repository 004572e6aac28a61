from .types import ColumnType, ColumnSpec
from .mapper import map_row, map_rows, coerce_value

__all__ = ["ColumnType", "ColumnSpec", "map_row", "map_rows", "coerce_value"]
