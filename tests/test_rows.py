"""
Row model, parsing and formatting tests.

Covers:
1. Parsing of well-formed rows (default and custom symbols)
2. Every ParseError branch (fields, cell symbols, group tokens)
3. Row construction validation
4. Unfold shape and immutability
5. parse -> format -> parse round-trip
"""

import sys
import os

import numpy as np
import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from spring_solver import (
    Alphabet,
    Cell,
    ParseError,
    Row,
    format_row,
    parse_lines,
    parse_row,
)

C, F, U = Cell.CLEAR, Cell.FILLED, Cell.UNKNOWN


# ==============================================================================
# Parsing
# ==============================================================================

def test_parse_basic_row():
    row = parse_row("???.### 1,1,3")
    assert row.cells == (U, U, U, C, F, F, F), f"Unexpected cells {row.cells}"
    assert row.groups == (1, 1, 3), f"Unexpected groups {row.groups}"


def test_parse_single_cell():
    row = Row.parse("# 1")
    assert row.cells == (F,)
    assert row.groups == (1,)


def test_parse_tolerates_surrounding_whitespace():
    row = parse_row("  .#.\t 1,2 \n")
    assert row.cells == (C, F, C)
    assert row.groups == (1, 2)


def test_parse_spaced_groups_is_a_field_error():
    # "1, 1" splits into a third field
    with pytest.raises(ParseError) as exc:
        parse_row("?.? 1, 1")
    assert exc.value.field == "line"


def test_parse_custom_alphabet():
    alphabet = Alphabet.from_string("o#x")
    row = parse_row("xxxo### 1,1,3", alphabet)
    assert row == parse_row("???.### 1,1,3"), "Custom symbols should map to the same row"


def test_parse_error_missing_groups():
    with pytest.raises(ParseError) as exc:
        parse_row("???.###")
    assert exc.value.field == "line"


def test_parse_error_extra_field():
    with pytest.raises(ParseError) as exc:
        parse_row("???.### 1,1,3 extra")
    assert exc.value.field == "line"


def test_parse_error_empty_line():
    with pytest.raises(ParseError) as exc:
        parse_row("   ")
    assert exc.value.field == "line"


def test_parse_error_bad_symbol():
    with pytest.raises(ParseError) as exc:
        parse_row("??X.### 1,1,3")
    err = exc.value
    assert err.field == "cells"
    assert "column 3" in str(err), f"Error should name the column: {err}"


def test_parse_error_default_symbol_under_custom_alphabet():
    with pytest.raises(ParseError):
        parse_row("???.### 1,1,3", Alphabet.from_string("o#x"))


@pytest.mark.parametrize("groups", ["1,,3", "1,a,3", "0", "1,-2", "1.5", ",", "1,", "+1"])
def test_parse_error_bad_groups(groups):
    with pytest.raises(ParseError) as exc:
        parse_row(f"???.### {groups}")
    assert exc.value.field == "groups", f"{groups!r} should fail in groups"


def test_parse_error_is_value_error():
    assert issubclass(ParseError, ValueError)


def test_parse_lines_reports_line_number():
    lines = ["???.### 1,1,3", "", ".??..??...?##. 1,1,3", "?#?# 1;3"]
    with pytest.raises(ParseError) as exc:
        parse_lines(lines)
    err = exc.value
    assert err.line_no == 4, f"Expected line 4, got {err.line_no}"
    assert str(err).startswith("line 4: groups:"), f"Unexpected message: {err}"


def test_parse_lines_skips_blank_lines():
    rows = parse_lines(["# 1", "", "   ", "?? 1"])
    assert len(rows) == 2
    assert rows[1].groups == (1,)


# ==============================================================================
# Alphabet
# ==============================================================================

@pytest.mark.parametrize("symbols", ["..?", "ab", "abcd", " #?", ".,?"])
def test_alphabet_rejects_bad_symbols(symbols):
    with pytest.raises(ValueError):
        Alphabet.from_string(symbols)


def test_alphabet_encode_decode():
    alphabet = Alphabet()
    for cell in Cell:
        assert alphabet.decode(alphabet.encode(cell)) is cell


# ==============================================================================
# Row construction
# ==============================================================================

def test_row_requires_cells():
    with pytest.raises(ValueError):
        Row((), (1,))


@pytest.mark.parametrize("groups", [(0,), (-1,), (1, 2.0), (True,), ("3",)])
def test_row_rejects_bad_groups(groups):
    with pytest.raises(ValueError):
        Row((U, U, U), groups)


def test_row_rejects_bad_cells():
    with pytest.raises(ValueError):
        Row((U, '#', U), (1,))


def test_row_normalises_lists():
    row = Row([U, F], [1])
    assert row.cells == (U, F) and row.groups == (1,)
    assert hash(row) == hash(Row((U, F), (1,))), "Equal rows should hash equal"


def test_row_without_groups_is_allowed():
    row = Row((C, U), ())
    assert row.groups == ()


def test_row_is_immutable():
    row = parse_row("# 1")
    with pytest.raises(AttributeError):
        row.cells = (C,)


def test_row_codes():
    codes = parse_row(".#? 1").codes()
    assert codes.dtype == np.int8
    assert codes.tolist() == [0, 1, 2]


def test_row_unknown_properties():
    row = parse_row("?#?. 1")
    assert row.n_unknown == 2
    assert not row.is_resolved
    assert parse_row(".#. 1").is_resolved


# ==============================================================================
# Unfold
# ==============================================================================

def test_unfold_shape():
    row = parse_row(".# 1")
    unfolded = row.unfold()
    assert str(unfolded) == ".#?.#?.#?.#?.# 1,1,1,1,1", f"Unexpected unfold {unfolded}"
    assert len(unfolded.cells) == 5 * len(row.cells) + 4
    assert len(unfolded.groups) == 5 * len(row.groups)


def test_unfold_leaves_receiver_untouched():
    row = parse_row("???.### 1,1,3")
    before = (row.cells, row.groups)
    row.unfold()
    assert (row.cells, row.groups) == before


def test_unfold_custom_copies():
    row = parse_row("?# 2")
    assert row.unfold(1) == row
    assert str(row.unfold(2)) == "?#??# 2,2"
    with pytest.raises(ValueError):
        row.unfold(0)


def test_unfold_without_groups():
    row = Row((C,), ())
    unfolded = row.unfold()
    assert unfolded.groups == ()
    assert unfolded.cells == (C, U, C, U, C, U, C, U, C)


# ==============================================================================
# Formatting
# ==============================================================================

@pytest.mark.parametrize("line", [
    "# 1",
    "???.### 1,1,3",
    ".??..??...?##. 1,1,3",
    "?###???????? 3,2,1",
])
def test_format_round_trip(line):
    row = parse_row(line)
    assert format_row(row) == line
    assert parse_row(format_row(row)) == row
    assert Row.parse(row.format()) == row


def test_format_round_trip_custom_alphabet():
    alphabet = Alphabet.from_string("_XQ")
    row = parse_row("?#?. 1,1")
    text = row.format(alphabet)
    assert text == "QXQ_ 1,1"
    assert Row.parse(text, alphabet) == row


def test_format_rejects_row_without_groups():
    with pytest.raises(ValueError):
        format_row(Row((C,), ()))


# ==============================================================================
# Main
# ==============================================================================

def run_all_tests():
    sys.exit(pytest.main([__file__, "-q"]))


if __name__ == "__main__":
    run_all_tests()
