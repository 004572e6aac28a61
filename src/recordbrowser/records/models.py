from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """One normalized row: ordered (field name, field value) string pairs.

    Field order is the source column order and drives display order.
    """

    pairs: Tuple[Tuple[str, str], ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.pairs)

    def items(self) -> List[Tuple[str, str]]:
        return list(self.pairs)

    @property
    def names(self) -> List[str]:
        return [name for name, _ in self.pairs]

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        for field_name, value in self.pairs:
            if field_name == name:
                return value
        return default

    def as_dict(self) -> Dict[str, str]:
        """Returns the fields as a dict (insertion order kept)."""
        return dict(self.pairs)
