from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Standardized error codes for startup failures."""
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_UNREADABLE = "CONFIG_UNREADABLE"
    CONNECTION_FAILED = "CONNECTION_FAILED"
    FETCH_FAILED = "FETCH_FAILED"
    FETCH_TIMEOUT = "FETCH_TIMEOUT"


SAFE_ERROR_MESSAGES = {
    ErrorCode.CONFIG_NOT_FOUND: "The credential file could not be found.",
    ErrorCode.CONFIG_UNREADABLE: "The credential file could not be read.",
    ErrorCode.CONNECTION_FAILED: "Could not connect to the database.",
    ErrorCode.FETCH_FAILED: "Loading records from the database failed.",
    ErrorCode.FETCH_TIMEOUT: "Loading records from the database timed out.",
}


class RecordBrowserError(Exception):
    """Base class for every error that aborts startup.

    Attributes:
        error_code (ErrorCode): The standardized error code.
        message (str): A human-readable error message.
    """

    def __init__(self, error_code: ErrorCode, message: str):
        super().__init__(message)
        self.error_code = error_code
        self.message = message

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"

    def get_safe_message(self) -> str:
        """Returns a message without connection details or driver output."""
        return SAFE_ERROR_MESSAGES.get(self.error_code, self.message)


class ConfigError(RecordBrowserError):
    """Raised when the credential file is missing or unreadable."""

    def __init__(self, error_code: ErrorCode, message: str, path: Optional[str] = None):
        super().__init__(error_code, message)
        self.path = path


class DatastoreConnectionError(RecordBrowserError):
    """Raised when the transport cannot reach the database."""

    def __init__(self, message: str):
        super().__init__(ErrorCode.CONNECTION_FAILED, message)


class FetchError(RecordBrowserError):
    """Wraps any query failure during the load sequence.

    Attributes:
        stage (Optional[str]): The load state that was running when it failed.
    """

    def __init__(self, message: str, stage: Optional[str] = None, error_code: ErrorCode = ErrorCode.FETCH_FAILED):
        super().__init__(error_code, message)
        self.stage = stage
