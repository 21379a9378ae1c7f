from core.errors import RowResolutionWarning
from core.table_rows import resolve_rows


def test_composite_designation_resolves_each_table():
    rows, warnings = resolve_rows("3+4", total_tables=10)
    assert rows == {2, 3}
    assert warnings == []


def test_out_of_range_token_is_skipped_with_warning():
    rows, warnings = resolve_rows("3+99", total_tables=10, reservation_index=5)
    assert rows == {2}
    assert len(warnings) == 1
    assert isinstance(warnings[0], RowResolutionWarning)
    assert warnings[0].token == "99"
    assert warnings[0].reservation_index == 5


def test_tokens_are_stripped():
    rows, warnings = resolve_rows(" 1 + 2 ", total_tables=3)
    assert rows == {0, 1}
    assert warnings == []


def test_unparseable_token_keeps_valid_rows():
    rows, warnings = resolve_rows("A+2", total_tables=3)
    assert rows == {1}
    assert [w.reason for w in warnings] == ["not a table number"]


def test_table_zero_is_out_of_range():
    rows, warnings = resolve_rows("0", total_tables=3)
    assert rows == frozenset()
    assert len(warnings) == 1


def test_missing_designation_yields_no_rows():
    for value in (None, "", "   "):
        rows, warnings = resolve_rows(value, total_tables=3)
        assert rows == frozenset()
        assert len(warnings) == 1


def test_custom_separator():
    rows, _ = resolve_rows("1/3", total_tables=3, separator="/")
    assert rows == {0, 2}


def test_duplicate_tables_collapse():
    rows, warnings = resolve_rows("2+2", total_tables=3)
    assert rows == {1}
    assert warnings == []
