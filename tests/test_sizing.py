from colkit import Configuration
from colkit.sizing import ColumnSpec, column_is_numeric, size_columns
from colkit.table import Table


def _table(rows, header=None):
    return Table.from_rows(rows, header)


def test_widths_cover_header_and_cells():
    table = _table([["Alice", "30"], ["Bob", "5"]], header=["Name", "Age"])
    specs = size_columns(table, Configuration())
    assert [s.width for s in specs] == [5, 3]


def test_widths_ignore_escapes_and_count_wide_glyphs():
    table = _table([["\x1b[31mred\x1b[0m", "日本"], ["ab", "x"]])
    specs = size_columns(table, Configuration())
    assert [s.width for s in specs] == [3, 4]


def test_one_text_value_demotes_column():
    table = _table([["1"], ["2"], ["n/a"]])
    assert size_columns(table, Configuration()) == [ColumnSpec(width=3, numeric=False, right=False)]


def test_empty_cells_do_not_demote():
    table = _table([["1", "x"], ["", "y"], ["30", "z"]])
    specs = size_columns(table, Configuration())
    assert specs[0] == ColumnSpec(width=2, numeric=True, right=True)
    assert specs[1].right is False


def test_header_label_does_not_demote_numeric_column():
    table = _table([["10"], ["200"]], header=["Size"])
    assert size_columns(table, Configuration())[0].right is True


def test_header_marker_forces_right_alignment():
    table = _table([["a"], ["bb"]], header=["-Name"])
    spec = size_columns(table, Configuration())[0]
    assert spec.numeric is False
    assert spec.right is True
    assert spec.width == 4


def test_no_numeric_align():
    table = _table([["10"], ["200"]], header=["-Size"])
    spec = size_columns(table, Configuration(no_numeric_align=True))[0]
    assert spec.numeric is True
    # the explicit header marker still wins
    assert spec.right is True
    table = _table([["10"], ["200"]])
    assert size_columns(table, Configuration(no_numeric_align=True))[0].right is False


def test_column_is_numeric():
    assert column_is_numeric(["1", "-2.5", ""]) is True
    assert column_is_numeric(["", ""]) is False
    assert column_is_numeric(["1", "x"]) is False
