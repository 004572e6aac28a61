from .models import Record
from .store import RecordStore
from .cursor import Cursor

__all__ = ["Record", "RecordStore", "Cursor"]
