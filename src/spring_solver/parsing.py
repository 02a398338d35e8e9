"""
Row parsing and formatting.

Text format, one row per line:

    <cells><whitespace><int>(,<int>)*

e.g. "???.### 1,1,3". The three cell symbols are configurable through
Alphabet; the conventional mapping is '.' clear, '#' filled, '?' unknown.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .types import Cell, ParseError, Row


@dataclass(frozen=True)
class Alphabet:
    """Symbol mapping for the three cell states."""
    clear: str = '.'
    filled: str = '#'
    unknown: str = '?'

    def __post_init__(self):
        symbols = (self.clear, self.filled, self.unknown)
        for s in symbols:
            if not isinstance(s, str) or len(s) != 1:
                raise ValueError(f"Cell symbols must be single characters, got {s!r}")
            if s.isspace() or s == ',':
                raise ValueError(f"Cell symbol {s!r} collides with the row separators")
        if len(set(symbols)) != 3:
            raise ValueError(f"Cell symbols must be distinct, got {''.join(symbols)!r}")

    @classmethod
    def from_string(cls, symbols: str) -> 'Alphabet':
        """Build from a 3-character string ordered clear, filled, unknown."""
        if len(symbols) != 3:
            raise ValueError(f"Expected 3 symbols (clear, filled, unknown), got {symbols!r}")
        return cls(symbols[0], symbols[1], symbols[2])

    def decode(self, ch: str) -> Cell:
        if ch == self.clear:
            return Cell.CLEAR
        if ch == self.filled:
            return Cell.FILLED
        if ch == self.unknown:
            return Cell.UNKNOWN
        raise ValueError(f"Unrecognized symbol {ch!r}")

    def encode(self, cell: Cell) -> str:
        return (self.clear, self.filled, self.unknown)[int(cell)]


DEFAULT_ALPHABET = Alphabet()


def parse_row(line: str, alphabet: Alphabet = DEFAULT_ALPHABET,
              line_no: Optional[int] = None) -> Row:
    """
    Parse one row.

    Args:
        line: text of the form "<cells> <g1>,<g2>,..."
        alphabet: cell symbol mapping
        line_no: 1-based line number attached to any ParseError

    Returns:
        Row

    Raises:
        ParseError: missing/extra fields, unknown cell symbol,
            or a group token that is not a positive integer
    """
    fields = line.split()
    if len(fields) != 2:
        raise ParseError(f"expected 2 whitespace-separated fields, found {len(fields)}",
                         field="line", text=line.strip(), line_no=line_no)
    cell_text, group_text = fields

    cells = []
    for col, ch in enumerate(cell_text, 1):
        try:
            cells.append(alphabet.decode(ch))
        except ValueError:
            raise ParseError(f"unrecognized symbol {ch!r} at column {col}",
                             field="cells", text=cell_text, line_no=line_no) from None

    groups = []
    for token in group_text.split(','):
        token = token.strip()
        # isdigit() alone accepts non-ASCII digits
        if not (token.isascii() and token.isdigit()) or int(token) == 0:
            raise ParseError(f"group length {token!r} is not a positive integer",
                             field="groups", text=group_text, line_no=line_no)
        groups.append(int(token))

    return Row(tuple(cells), tuple(groups))


def parse_lines(lines: Iterable[str], alphabet: Alphabet = DEFAULT_ALPHABET) -> List[Row]:
    """
    Parse every non-blank line; the first malformed line aborts the whole parse.
    """
    rows = []
    for line_no, line in enumerate(lines, 1):
        if not line.strip():
            continue
        rows.append(parse_row(line, alphabet, line_no=line_no))
    return rows


def format_row(row: Row, alphabet: Alphabet = DEFAULT_ALPHABET) -> str:
    """Render a row as "<cells> <g1>,<g2>,..." (inverse of parse_row)."""
    if not row.groups:
        raise ValueError("A row without groups has no text form.")
    cells = ''.join(alphabet.encode(c) for c in row.cells)
    return f"{cells} {','.join(str(g) for g in row.groups)}"
