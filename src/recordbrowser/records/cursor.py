from typing import Optional

from .models import Record
from .store import RecordStore


class Cursor:
    """Sequential position over a RecordStore.

    Steps move one record at a time and are clamped at both ends; there is no
    wraparound or arbitrary seek. If the store is replaced with fewer records
    the position is pulled back to the last one on the next access. Not safe
    for concurrent mutation.
    """

    def __init__(self, store: RecordStore):
        self._store = store
        self._position = 0

    def _clamp(self) -> int:
        last = max(len(self._store) - 1, 0)
        if self._position > last:
            self._position = last
        return self._position

    @property
    def position(self) -> int:
        return self._clamp()

    @property
    def at_start(self) -> bool:
        return self._clamp() == 0

    @property
    def at_end(self) -> bool:
        return len(self._store) == 0 or self._clamp() >= len(self._store) - 1

    def current(self) -> Optional[Record]:
        """Returns the record under the cursor, or None for an empty store."""
        return self._store.get(self._clamp())

    def step_previous(self) -> None:
        if self._clamp() > 0:
            self._position -= 1

    def step_next(self) -> None:
        if not self.at_end:
            self._position += 1

    def reset(self) -> None:
        """Moves back to the first record."""
        self._position = 0
