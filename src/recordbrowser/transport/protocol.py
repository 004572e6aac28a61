from typing import Protocol, runtime_checkable

from .models import ResultSet


@runtime_checkable
class TransportProtocol(Protocol):
    """
    Query capability the loader drives.
    Any class implementing these methods can feed the record browser.
    """

    def table_exists(self, table_name: str) -> bool:
        """Whether ``table_name`` exists in the connected database."""
        ...

    def count_rows(self, table_name: str) -> int:
        """Number of rows currently in ``table_name``."""
        ...

    def fetch_all(self, table_name: str) -> ResultSet:
        """Every row and column of ``table_name`` with column metadata."""
        ...
