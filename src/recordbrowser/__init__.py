"""Generic database record browser."""
from .configs import ConnectionDescriptor, resolve
from .loader import FetchOrchestrator, LoadState, load_all
from .records import Cursor, Record, RecordStore
from .schema import ColumnSpec, ColumnType, map_row, map_rows
from .session import BrowserSession

__version__ = "0.1.0"

__all__ = [
    "ConnectionDescriptor",
    "resolve",
    "FetchOrchestrator",
    "LoadState",
    "load_all",
    "Cursor",
    "Record",
    "RecordStore",
    "ColumnSpec",
    "ColumnType",
    "map_row",
    "map_rows",
    "BrowserSession",
]
