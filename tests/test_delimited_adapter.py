"""Tests for CSV/TSV/TXT parsing through pandas."""

from __future__ import annotations

import pytest

from services.ingestion.delimited_adapter import (
    DelimitedRowAdapter,
    TsvRowAdapter,
    count_long_rows,
    detect_delimiter,
)

pytestmark = pytest.mark.unit


def test_header_row_becomes_keys_and_values_stay_strings() -> None:
    rows = DelimitedRowAdapter().parse("name,value,code\nA,1,007\nB,2.5,010\n")

    assert rows == [
        {"name": "A", "value": "1", "code": "007"},
        {"name": "B", "value": "2.5", "code": "010"},
    ]


def test_blank_lines_are_skipped() -> None:
    rows = DelimitedRowAdapter().parse("a,b\n\n1,2\n\n3,4\n")

    assert rows == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]


def test_empty_cells_stay_empty_strings() -> None:
    assert DelimitedRowAdapter().parse("a,b\n1,\n") == [{"a": "1", "b": ""}]


def test_delimiter_is_detected() -> None:
    assert detect_delimiter("a;b\n1;2\n3;4\n") == ";"
    assert detect_delimiter("x\ty\n1\t2\n") == "\t"
    assert DelimitedRowAdapter().parse("a;b\n1;2\n") == [{"a": "1", "b": "2"}]


def test_single_column_falls_back_to_comma() -> None:
    assert detect_delimiter("value\n1\n2\n") == ","
    assert DelimitedRowAdapter().parse("value\n1\n2\n") == [{"value": "1"}, {"value": "2"}]


def test_tsv_forces_tab_delimiter() -> None:
    rows = TsvRowAdapter().parse("a,b\tc\n1,2\t3\n")

    assert rows == [{"a,b": "1,2", "c": "3"}]


def test_rows_with_too_many_fields_keep_their_leading_fields() -> None:
    adapter = DelimitedRowAdapter(filename="bad.csv")
    rows = adapter.parse("a,b\n1,2\n3,4,5\n6,7\n")

    assert rows == [
        {"a": "1", "b": "2"},
        {"a": "3", "b": "4"},
        {"a": "6", "b": "7"},
    ]
    assert adapter.warnings == ["1 rows had too many fields; extra fields were dropped"]


def test_trailing_delimiter_does_not_shift_columns() -> None:
    adapter = DelimitedRowAdapter()
    rows = adapter.parse("a,b\n1,2,\n3,4,\n")

    assert rows == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]
    assert adapter.warnings == ["2 rows had too many fields; extra fields were dropped"]


def test_count_long_rows() -> None:
    assert count_long_rows("a,b\n1,2\n3,4,5\n\n6,7,\n", ",", 2) == 2
    assert count_long_rows("a\tb\n1\t2\n", "\t", 2) == 0


def test_short_rows_keep_missing_values_absent() -> None:
    adapter = DelimitedRowAdapter()
    rows = adapter.parse("a,b\n1,2\n3\n")

    assert rows == [{"a": "1", "b": "2"}, {"a": "3", "b": None}]
    assert adapter.warnings == ["1 rows had too few fields"]


def test_empty_content_yields_no_rows() -> None:
    adapter = DelimitedRowAdapter()

    assert adapter.parse("") == []
    assert adapter.warnings
