from typing import Iterable, Iterator, List, Optional

from recordbrowser.common.logger import get_logger
from .models import Record

logger = get_logger(__name__)


class RecordStore:
    """In-memory collection of the Records loaded by one fetch.

    Insertion order is fetch order. The contents are only ever replaced
    wholesale, never updated in place.
    """

    def __init__(self, records: Optional[Iterable[Record]] = None):
        self._records: List[Record] = list(records or [])

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(list(self._records))

    def __getitem__(self, index: int) -> Record:
        if not self.has_index(index):
            raise IndexError(f"Record index {index} out of range for {len(self)} records")
        return self._records[index]

    @property
    def is_empty(self) -> bool:
        return not self._records

    def has_index(self, index: int) -> bool:
        return 0 <= index < len(self._records)

    def get(self, index: int) -> Optional[Record]:
        """Returns the record at ``index`` or None when out of range."""
        if not self.has_index(index):
            return None
        return self._records[index]

    def replace(self, records: Iterable[Record]) -> None:
        """Swaps in a freshly loaded collection."""
        new_records = list(records)
        self._records = new_records
        logger.debug(f"Record store replaced with {len(new_records)} records")

    def column_names(self) -> List[str]:
        """Field names of the first record, used for header diagnostics."""
        if not self._records:
            return []
        return self._records[0].names
