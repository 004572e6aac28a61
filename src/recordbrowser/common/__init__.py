from .errors import (
    ErrorCode,
    RecordBrowserError,
    ConfigError,
    DatastoreConnectionError,
    FetchError,
)
from .logger import configure_logging, get_logger, session_context

__all__ = [
    "ErrorCode",
    "RecordBrowserError",
    "ConfigError",
    "DatastoreConnectionError",
    "FetchError",
    "configure_logging",
    "get_logger",
    "session_context",
]
