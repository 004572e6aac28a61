from typing import Any, List, Optional

from pydantic import BaseModel, Field

from recordbrowser.schema.types import ColumnSpec


class ResultSet(BaseModel):
    """Rows of one table together with their column metadata."""
    columns: List[ColumnSpec] = Field(default_factory=list)
    rows: List[List[Any]] = Field(default_factory=list)
    execution_time_ms: Optional[float] = None

    @property
    def column_names(self) -> List[str]:
        return [col.name for col in self.columns]

    @property
    def row_count(self) -> int:
        return len(self.rows)
