"""Tests for flattening JSON records into DataFrames."""

import pandas as pd
import pytest

from voteview.utils.exceptions import EmptyInputError
from voteview.utils.flatten import (
    FieldKind,
    classify,
    coerce,
    flatten_records,
    infer_schema,
    jlist2df,
    order_columns,
)


class TestClassify:
    """Tests for tagging decoded JSON values."""

    @pytest.mark.parametrize(
        "value,kind",
        [
            ("text", FieldKind.STRING),
            ("", FieldKind.STRING),
            (5, FieldKind.INTEGER),
            (5.5, FieldKind.INTEGER),
            (True, FieldKind.INTEGER),
            ({"a": 1}, FieldKind.NESTED),
            ([1, 2], FieldKind.NESTED),
            (None, FieldKind.MISSING),
        ],
    )
    def test_kinds(self, value, kind):
        assert classify(value) is kind


class TestInferSchema:
    """Tests for schema inference from the first record."""

    def test_nested_fields_excluded(self):
        schema = infer_schema({"id": "A", "codes": {"Issue": ["Tax"]}, "votes": [1, 2], "yea": 3})
        assert schema == {"id": FieldKind.STRING, "yea": FieldKind.INTEGER}

    def test_null_gets_integer_column(self):
        assert infer_schema({"bill": None}) == {"bill": FieldKind.INTEGER}

    def test_rejects_non_object(self):
        with pytest.raises(TypeError):
            infer_schema(["not", "a", "record"])


class TestCoerce:
    """Tests for fitting values into typed columns."""

    def test_float_truncated(self):
        assert coerce(50.7, FieldKind.INTEGER) == 50

    def test_negative_float_truncated_toward_zero(self):
        assert coerce(-2.9, FieldKind.INTEGER) == -2

    def test_missing_is_zero_value(self):
        assert coerce(None, FieldKind.INTEGER) == 0
        assert coerce(None, FieldKind.STRING) == ""

    def test_conflicting_kinds_become_zero_value(self):
        assert coerce("abc", FieldKind.INTEGER) == 0
        assert coerce(5, FieldKind.STRING) == ""
        assert coerce({"x": 1}, FieldKind.STRING) == ""

    def test_non_finite_number(self):
        assert coerce(float("inf"), FieldKind.INTEGER) == 0


class TestOrderColumns:
    """Tests for priority column ordering."""

    def test_priority_first(self):
        assert order_columns(["a", "b", "c"], ["c", "a"]) == ["c", "a", "b"]

    def test_missing_priority_skipped(self):
        assert order_columns(["a", "b"], ["x", "b"]) == ["b", "a"]

    def test_duplicates_removed(self):
        assert order_columns(["a", "b", "c"], ["c", "x", "c"]) == ["c", "a", "b"]

    def test_no_priority(self):
        assert order_columns(["b", "a"], []) == ["b", "a"]


class TestFlattenRecords:
    """Tests for building the table."""

    def test_zero_fill(self):
        df = flatten_records([{"id": "A", "yea": 5}, {"id": "B"}], ["id"])
        assert list(df.columns) == ["id", "yea"]
        assert len(df) == 2
        assert df["yea"].tolist() == [5, 0]
        assert not df.isna().any().any()

    def test_integer_column_dtype(self):
        df = flatten_records([{"id": "A", "support": 50.7}, {"id": "B", "support": 96.5}], ["id"])
        assert df["support"].dtype == "int64"
        assert df["support"].tolist() == [50, 96]

    def test_string_column_zero_fill(self):
        df = flatten_records([{"id": "A", "bill": "HR1"}, {"id": "B"}], ["id"])
        assert df["bill"].tolist() == ["HR1", ""]

    def test_fields_absent_from_first_record_dropped(self):
        df = flatten_records([{"id": "A"}, {"id": "B", "yea": 10}], ["id"])
        assert list(df.columns) == ["id"]

    def test_nested_in_first_record_stays_excluded(self):
        df = flatten_records([{"id": "A", "codes": ["x"]}, {"id": "B", "codes": "y"}], ["id"])
        assert "codes" not in df.columns

    def test_row_order_preserved(self):
        records = [{"id": str(i)} for i in range(5)]
        df = flatten_records(records, ["id"])
        assert df["id"].tolist() == ["0", "1", "2", "3", "4"]
        assert df.index.tolist() == [0, 1, 2, 3, 4]

    def test_natural_order_after_priority(self):
        df = flatten_records([{"b": 1, "a": 2, "id": "X"}], ["id"])
        assert list(df.columns) == ["id", "b", "a"]

    def test_accepts_generator(self):
        df = flatten_records(({"id": c} for c in "AB"), ["id"])
        assert df["id"].tolist() == ["A", "B"]

    def test_empty_input(self):
        with pytest.raises(EmptyInputError):
            flatten_records([], ["id"])

    def test_all_nested_first_record(self):
        df = flatten_records([{"codes": {}}, {"codes": {}}], ["id"])
        assert isinstance(df, pd.DataFrame)
        assert len(df) == 2
        assert list(df.columns) == []

    def test_alias(self):
        assert jlist2df is flatten_records
