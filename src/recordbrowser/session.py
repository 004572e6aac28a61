"""Browser session: the single owned state object the presentation layer reads.

Startup runs strictly in order (credentials, connect, load) and completes
before any navigation happens. Scratch edits typed into the form live only
in the session and are dropped on every navigation; nothing is written back
to the database.
"""
import pathlib
import uuid
from typing import Callable, Dict, Optional, Union

from recordbrowser.common.logger import get_logger, session_context
from recordbrowser.common.settings import Settings, settings as default_settings
from recordbrowser.configs.credentials import ConnectionDescriptor, resolve
from recordbrowser.loader import load_all
from recordbrowser.presentation.view import RecordView, build_view
from recordbrowser.records.cursor import Cursor
from recordbrowser.records.models import Record
from recordbrowser.records.store import RecordStore
from recordbrowser.transport.adapter import SQLAlchemyTransport

logger = get_logger(__name__)

TransportFactory = Callable[[ConnectionDescriptor, str], SQLAlchemyTransport]


class BrowserSession:
    """Owns the RecordStore, its Cursor and any scratch edits.

    Not safe for concurrent use; callers sharing a session across threads
    must serialize access themselves.
    """

    def __init__(self, store: RecordStore, table_name: str = "", session_id: Optional[str] = None):
        self.store = store
        self.cursor = Cursor(store)
        self.table_name = table_name
        self.session_id = session_id or uuid.uuid4().hex[:12]
        self._edits: Dict[str, str] = {}

    @classmethod
    def open(
        cls,
        config: Optional[Settings] = None,
        credentials_path: Optional[Union[str, pathlib.Path]] = None,
        transport_factory: Optional[TransportFactory] = None,
    ) -> "BrowserSession":
        """Resolves credentials, connects and loads the configured table.

        Raises:
            ConfigError: If the credential file is missing or unreadable.
            DatastoreConnectionError: If the database cannot be reached.
            FetchError: If loading the table fails or times out.
        """
        config = config or default_settings
        factory = transport_factory or SQLAlchemyTransport.from_descriptor
        session_id = uuid.uuid4().hex[:12]

        with session_context(session_id):
            descriptor = resolve(credentials_path or config.credentials_path)
            transport = factory(descriptor, config.driver)

            transport.connect()
            try:
                store = load_all(
                    transport,
                    config.table_name,
                    timeout_sec=config.fetch_timeout_sec or None,
                )
            finally:
                transport.close()

            logger.info(
                f"Session ready with {len(store)} records from '{config.table_name}'",
                extra={"columns": store.column_names()},
            )

        return cls(store, table_name=config.table_name, session_id=session_id)

    def close(self) -> None:
        """Drops loaded records and scratch edits."""
        self._edits.clear()
        self.store.replace([])
        self.cursor.reset()

    def current(self) -> Optional[Record]:
        return self.cursor.current()

    def view(self) -> RecordView:
        return build_view(self.current(), self.cursor.position, len(self.store), self._edits)

    def previous(self) -> RecordView:
        """Steps back one record, discarding scratch edits."""
        self._edits.clear()
        self.cursor.step_previous()
        return self.view()

    def next(self) -> RecordView:
        """Steps forward one record, discarding scratch edits."""
        self._edits.clear()
        self.cursor.step_next()
        return self.view()

    def edit(self, field_name: str, text: str) -> RecordView:
        """Records a scratch edit for a field of the current record.

        Raises:
            KeyError: If there is no current record or it has no such field.
        """
        record = self.current()
        if record is None or field_name not in record.names:
            raise KeyError(field_name)
        self._edits[field_name] = text
        return self.view()

    @property
    def has_edits(self) -> bool:
        return bool(self._edits)
