import time
from typing import Optional, Union

from sqlalchemy import create_engine, inspect, text, Engine, select, func, table, column
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError

from recordbrowser.common.errors import DatastoreConnectionError
from recordbrowser.common.logger import get_logger
from recordbrowser.configs.credentials import ConnectionDescriptor
from recordbrowser.schema.types import ColumnSpec
from .models import ResultSet

logger = get_logger(__name__)


class SQLAlchemyTransport:
    """
    Transport over a single SQLAlchemy engine.
    Answers existence, count and full-table queries for the loader.
    """
    def __init__(self, url: Union[str, URL], schema: Optional[str] = None):
        self.url = url
        self.schema = schema
        self.engine: Optional[Engine] = None

    @classmethod
    def from_descriptor(cls, descriptor: ConnectionDescriptor, driver: str) -> "SQLAlchemyTransport":
        return cls(descriptor.to_url(driver))

    def __str__(self):
        if isinstance(self.url, URL):
            return self.url.render_as_string(hide_password=True)
        return str(self.url)

    def connect(self) -> None:
        """Creates the engine and checks the database answers.

        Raises:
            DatastoreConnectionError: If the engine cannot be created or the
                database does not respond.
        """
        try:
            self.engine = create_engine(self.url, pool_pre_ping=True)
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, ImportError, ValueError) as e:
            logger.error(f"Failed to connect to database {self}: {e}")
            self.close()
            raise DatastoreConnectionError(f"Failed to connect to {self}: {e}") from e
        logger.info(f"Connected to {self}")

    def close(self) -> None:
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None

    def _require_engine(self) -> Engine:
        if self.engine is None:
            raise RuntimeError(f"Not connected to {self}")
        return self.engine

    def table_exists(self, table_name: str) -> bool:
        inspector = inspect(self._require_engine())
        return inspector.has_table(table_name, schema=self.schema)

    def count_rows(self, table_name: str) -> int:
        stmt = select(func.count()).select_from(table(table_name, schema=self.schema))
        with self._require_engine().connect() as conn:
            return int(conn.execute(stmt).scalar() or 0)

    def fetch_all(self, table_name: str) -> ResultSet:
        engine = self._require_engine()
        start = time.perf_counter()

        inspector = inspect(engine)
        columns = [
            ColumnSpec.from_reflection(col_info["name"], col_info["type"])
            for col_info in inspector.get_columns(table_name, schema=self.schema)
        ]

        stmt = select(*[column(col.name) for col in columns]).select_from(
            table(table_name, schema=self.schema)
        )
        with engine.connect() as conn:
            rows = [list(row) for row in conn.execute(stmt).fetchall()]

        duration = time.perf_counter() - start
        return ResultSet(
            columns=columns,
            rows=rows,
            execution_time_ms=duration * 1000
        )
