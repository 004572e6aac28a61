"""
Fetch Orchestrator.

Runs the one-shot load sequence for the browsed table::

    CHECK_EXISTENCE -> COUNT_RECORDS -> FETCH_ROWS -> MAP -> DONE
           |
           +-> EMPTY (table absent)

Queries are issued one at a time and never retried. A transport failure
in any query aborts the sequence with a FetchError and leaves the target
store untouched.
"""
import contextvars
import threading
from enum import Enum
from typing import List, Optional

from recordbrowser.common.errors import ErrorCode, FetchError
from recordbrowser.common.logger import get_logger
from recordbrowser.records.models import Record
from recordbrowser.records.store import RecordStore
from recordbrowser.schema.mapper import map_rows
from recordbrowser.transport.protocol import TransportProtocol

logger = get_logger(__name__)


class LoadState(str, Enum):
    CHECK_EXISTENCE = "CHECK_EXISTENCE"
    COUNT_RECORDS = "COUNT_RECORDS"
    FETCH_ROWS = "FETCH_ROWS"
    MAP = "MAP"
    EMPTY = "EMPTY"
    DONE = "DONE"


class FetchOrchestrator:
    """Drives the load sequence for one table through a transport."""

    def __init__(self, transport: TransportProtocol, table_name: str):
        self._transport = transport
        self._table_name = table_name
        self.state: Optional[LoadState] = None

    def _enter(self, state: LoadState) -> None:
        self.state = state
        logger.debug(f"Load of '{self._table_name}' entering {state.value}")

    def _query(self, state: LoadState, call, *args):
        self._enter(state)
        try:
            return call(*args)
        except Exception as e:
            logger.error(f"{state.value} failed for table '{self._table_name}': {e}")
            raise FetchError(
                f"Query failed during {state.value} for table '{self._table_name}': {e}",
                stage=state.value,
            ) from e

    def run(self) -> List[Record]:
        """Executes the sequence and returns the mapped records.

        Returns:
            List[Record]: Records in transport order; empty if the table is absent.

        Raises:
            FetchError: If any query fails.
        """
        exists = self._query(LoadState.CHECK_EXISTENCE, self._transport.table_exists, self._table_name)
        logger.info(f"Table '{self._table_name}' exists: {exists}")
        if not exists:
            self._enter(LoadState.EMPTY)
            logger.warning(f"The '{self._table_name}' table does not exist.")
            return []

        count = self._query(LoadState.COUNT_RECORDS, self._transport.count_rows, self._table_name)
        logger.info(f"Number of records in '{self._table_name}': {count}")

        result = self._query(LoadState.FETCH_ROWS, self._transport.fetch_all, self._table_name)
        logger.info(
            f"Fetched {result.row_count} rows from '{self._table_name}'",
            extra={"columns": result.column_names, "execution_time_ms": result.execution_time_ms},
        )

        self._enter(LoadState.MAP)
        records = map_rows(result.rows, result.columns)

        self._enter(LoadState.DONE)
        return records


def _run_with_timeout(orchestrator: FetchOrchestrator, timeout_sec: float) -> List[Record]:
    # Daemon worker: a hung query is abandoned and does not hold up interpreter exit.
    outcome = {}
    context = contextvars.copy_context()

    def _work():
        try:
            outcome["records"] = context.run(orchestrator.run)
        except Exception as e:
            outcome["error"] = e

    worker = threading.Thread(target=_work, name="record-loader", daemon=True)
    worker.start()
    worker.join(timeout_sec)

    if worker.is_alive():
        stage = orchestrator.state.value if orchestrator.state else None
        logger.error(f"Load sequence timed out after {timeout_sec} seconds during {stage}")
        raise FetchError(
            f"Loading records timed out after {timeout_sec} seconds.",
            stage=stage,
            error_code=ErrorCode.FETCH_TIMEOUT,
        )
    if "error" in outcome:
        raise outcome["error"]
    return outcome["records"]


def load_all(
    transport: TransportProtocol,
    table_name: str,
    store: Optional[RecordStore] = None,
    timeout_sec: Optional[float] = None,
) -> RecordStore:
    """Loads every row of ``table_name`` into a RecordStore.

    Args:
        transport: Query capability for the connected database.
        table_name: Table to load.
        store: Store to populate. A new one is created when omitted. Cursors
            over a reused store clamp to its new length on their next access.
        timeout_sec: Bound on the whole sequence; None or 0 waits indefinitely.

    Returns:
        RecordStore: The populated store (empty if the table does not exist).

    Raises:
        FetchError: If a query fails or the timeout expires. ``store`` keeps its
            previous contents in that case.
    """
    target = store if store is not None else RecordStore()
    orchestrator = FetchOrchestrator(transport, table_name)

    if timeout_sec:
        records = _run_with_timeout(orchestrator, timeout_sec)
    else:
        records = orchestrator.run()

    target.replace(records)
    return target
