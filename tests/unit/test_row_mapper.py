import datetime
from decimal import Decimal

import pytest
from sqlalchemy.types import BigInteger, Boolean, Integer, Numeric, SmallInteger, String, Text

from recordbrowser.schema.mapper import coerce_value, map_row, map_rows
from recordbrowser.schema.types import ColumnSpec, ColumnType


@pytest.mark.parametrize("native", ["int4", "INT4", "int2", "int8", "integer", "bigint", "serial", "INTEGER(11)"])
def test_integer_native_names_resolve_to_integer(native):
    assert ColumnType.from_native(native) == ColumnType.INTEGER


@pytest.mark.parametrize("native", [Integer(), BigInteger(), SmallInteger()])
def test_sqlalchemy_integer_types_resolve_to_integer(native):
    assert ColumnType.from_native(native) == ColumnType.INTEGER


@pytest.mark.parametrize("native", ["text", "varchar", "numeric", "jsonb", "made_up_type", "", None, String(), Text(), Numeric(), Boolean()])
def test_everything_else_falls_back_to_text(native):
    assert ColumnType.from_native(native) == ColumnType.TEXT


def test_column_spec_from_reflection_keeps_native_name():
    spec = ColumnSpec.from_reflection("balance", Integer())

    assert spec.type == ColumnType.INTEGER
    assert spec.native_type == "INTEGER"


@pytest.mark.parametrize("value,expected", [(-42, "-42"), (0, "0"), (7, "7"), (12345678901234, "12345678901234")])
def test_integer_cells_render_as_plain_decimal(value, expected):
    assert coerce_value(value, ColumnType.INTEGER) == expected


def test_text_cells_use_native_string_representation():
    assert coerce_value("Ann", ColumnType.TEXT) == "Ann"
    assert coerce_value(Decimal("1.50"), ColumnType.TEXT) == "1.50"
    assert coerce_value(datetime.date(2024, 1, 31), ColumnType.TEXT) == "2024-01-31"
    assert coerce_value(True, ColumnType.TEXT) == "True"


@pytest.mark.parametrize("column_type", list(ColumnType))
def test_null_cells_render_as_empty_string(column_type):
    assert coerce_value(None, column_type) == ""


def test_map_row_preserves_column_order(customer_columns):
    # Arrange
    row = [1, "Ann"]

    # Act
    record = map_row(row, customer_columns)

    # Assert
    assert record.items() == [("id", "1"), ("name", "Ann")]


def test_map_row_with_unknown_type_does_not_raise():
    columns = [ColumnSpec(name="payload", type=ColumnType.from_native("jsonb"), native_type="jsonb")]

    record = map_row([{"a": 1}], columns)

    assert record.get("payload") == "{'a': 1}"


def test_map_row_rejects_width_mismatch(customer_columns):
    with pytest.raises(ValueError):
        map_row([1], customer_columns)


def test_map_rows_keeps_row_order(customer_columns):
    records = map_rows([[2, "Bo"], [1, "Ann"], [3, None]], customer_columns)

    assert [r.as_dict() for r in records] == [
        {"id": "2", "name": "Bo"},
        {"id": "1", "name": "Ann"},
        {"id": "3", "name": ""},
    ]


@pytest.mark.parametrize("value,expected", [("n/a", "n/a"), (1.5, "1.5"), (True, "True"), (Decimal("3"), "3")])
def test_non_integer_values_in_integer_column_fall_back_to_text(value, expected):
    assert coerce_value(value, ColumnType.INTEGER) == expected
