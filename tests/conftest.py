import sqlite3

import pytest
from unittest.mock import MagicMock

from recordbrowser.records.models import Record
from recordbrowser.records.store import RecordStore
from recordbrowser.schema.types import ColumnSpec, ColumnType
from recordbrowser.transport.models import ResultSet


@pytest.fixture
def customer_columns():
    """Columns of the two-column customers table used across tests."""
    return [
        ColumnSpec(name="id", type=ColumnType.INTEGER, native_type="INTEGER"),
        ColumnSpec(name="name", type=ColumnType.TEXT, native_type="TEXT"),
    ]


@pytest.fixture
def customer_records():
    return [
        Record(pairs=(("id", "1"), ("name", "Ann"))),
        Record(pairs=(("id", "2"), ("name", "Bo"))),
    ]


@pytest.fixture
def customer_store(customer_records):
    return RecordStore(customer_records)


@pytest.fixture
def mock_transport(customer_columns):
    """Returns a transport double serving the Ann/Bo customers table."""
    transport = MagicMock()
    transport.table_exists.return_value = True
    transport.count_rows.return_value = 2
    transport.fetch_all.return_value = ResultSet(
        columns=customer_columns,
        rows=[[1, "Ann"], [2, "Bo"]],
    )
    return transport


@pytest.fixture
def sqlite_db_path(tmp_path):
    db_path = tmp_path / "crm.db"
    conn = sqlite3.connect(db_path)
    try:
        conn.execute(
            "CREATE TABLE customers (id INTEGER PRIMARY KEY, name TEXT, balance INTEGER, note VARCHAR(40))"
        )
        conn.executemany(
            "INSERT INTO customers (id, name, balance, note) VALUES (?, ?, ?, ?)",
            [(1, "Ann", -42, "vip"), (2, "Bo", 0, None), (3, "Cy", 1500000, "new")],
        )
        conn.commit()
    finally:
        conn.close()
    return db_path


@pytest.fixture
def credentials_file(tmp_path):
    def _write(content: str):
        path = tmp_path / "credentials.ini"
        path.write_text(content, encoding="utf-8")
        return path
    return _write
