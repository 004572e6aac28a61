import pytest

from recordbrowser.records.models import Record
from recordbrowser.records.store import RecordStore


def test_empty_store():
    store = RecordStore()

    assert len(store) == 0
    assert store.is_empty
    assert store.get(0) is None
    assert store.column_names() == []


def test_store_is_indexable_in_insertion_order(customer_store):
    assert len(customer_store) == 2
    assert customer_store[0].get("name") == "Ann"
    assert customer_store[1].get("name") == "Bo"
    assert [r.get("id") for r in customer_store] == ["1", "2"]


def test_store_bounds(customer_store):
    assert customer_store.has_index(0)
    assert customer_store.has_index(1)
    assert not customer_store.has_index(2)
    assert not customer_store.has_index(-1)
    assert customer_store.get(5) is None
    with pytest.raises(IndexError):
        customer_store[2]


def test_replace_swaps_contents_wholesale(customer_store):
    customer_store.replace([Record(pairs=(("id", "9"),))])

    assert len(customer_store) == 1
    assert customer_store[0].as_dict() == {"id": "9"}
    assert customer_store.column_names() == ["id"]


def test_record_is_immutable():
    record = Record(pairs=(("id", "1"),))

    with pytest.raises(Exception):
        record.pairs = ()


def test_record_lookup_helpers():
    record = Record(pairs=(("id", "1"), ("name", "Ann")))

    assert len(record) == 2
    assert record.names == ["id", "name"]
    assert record.get("missing") is None
    assert record.get("missing", "-") == "-"
