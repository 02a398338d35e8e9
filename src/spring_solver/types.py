"""
Type definitions and dataclasses for the spring solver.

Core types used throughout the package:
- Cell: closed three-valued cell state (clear, filled, unknown)
- Row: immutable cell sequence plus required run-length groups
- ParseError: raised for malformed row text
"""

import numpy as np
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

# Number of copies produced by Row.unfold()
UNFOLD_COPIES = 5


class Cell(IntEnum):
    """State of a single cell."""
    CLEAR = 0
    FILLED = 1
    UNKNOWN = 2


class ParseError(ValueError):
    """
    Malformed row text.

    Attributes:
        field: which part failed ("line", "cells" or "groups")
        text: the offending text
        line_no: 1-based input line number, when known
    """

    def __init__(self, message: str, *, field: str, text: str, line_no: Optional[int] = None):
        self.message = message
        self.field = field
        self.text = text
        self.line_no = line_no
        super().__init__(str(self))

    def at_line(self, line_no: int) -> 'ParseError':
        """Return a copy of this error tagged with an input line number."""
        return ParseError(self.message, field=self.field, text=self.text, line_no=line_no)

    def __str__(self) -> str:
        where = f"line {self.line_no}: " if self.line_no is not None else ""
        return f"{where}{self.field}: {self.message} ({self.text!r})"


@dataclass(frozen=True)
class Row:
    """
    One record: a cell sequence and the filled-run lengths it must produce.

    cells: Tuple[Cell, ...] with at least one cell
    groups: Tuple[int, ...] of positive run lengths (may be empty)
    """
    cells: Tuple[Cell, ...]
    groups: Tuple[int, ...]

    def __post_init__(self):
        cells = tuple(self.cells)
        groups = tuple(self.groups)
        if not cells:
            raise ValueError("Row must have at least one cell.")
        for c in cells:
            if not isinstance(c, Cell):
                raise ValueError(f"Invalid cell state: {c!r}")
        for g in groups:
            if isinstance(g, bool) or not isinstance(g, (int, np.integer)) or g <= 0:
                raise ValueError(f"Group lengths must be positive integers, got {g!r}")
        # frozen: bypass __setattr__ to normalise lists into tuples
        object.__setattr__(self, 'cells', cells)
        object.__setattr__(self, 'groups', tuple(int(g) for g in groups))

    @classmethod
    def parse(cls, line: str, alphabet=None) -> 'Row':
        """Parse a row from its `<cells> <g1>,<g2>,...` text form."""
        from .parsing import parse_row, DEFAULT_ALPHABET
        return parse_row(line, alphabet or DEFAULT_ALPHABET)

    def format(self, alphabet=None) -> str:
        """Render the row in its text form."""
        from .parsing import format_row, DEFAULT_ALPHABET
        return format_row(self, alphabet or DEFAULT_ALPHABET)

    def unfold(self, copies: int = UNFOLD_COPIES) -> 'Row':
        """
        Replicate the row `copies` times.

        Cells are joined by a single UNKNOWN between consecutive copies
        (length copies*N + copies - 1); groups are concatenated
        (length copies*M). The receiver is left untouched.
        """
        if copies < 1:
            raise ValueError(f"copies must be >= 1, got {copies}")
        cells = list(self.cells)
        for _ in range(copies - 1):
            cells.append(Cell.UNKNOWN)
            cells.extend(self.cells)
        return Row(tuple(cells), self.groups * copies)

    def codes(self) -> np.ndarray:
        """Cell states as an int8 array (0 clear, 1 filled, 2 unknown)."""
        return np.array([int(c) for c in self.cells], dtype=np.int8)

    @property
    def n_unknown(self) -> int:
        return sum(1 for c in self.cells if c is Cell.UNKNOWN)

    @property
    def is_resolved(self) -> bool:
        """True when no cell is UNKNOWN."""
        return self.n_unknown == 0

    def __str__(self) -> str:
        from .parsing import DEFAULT_ALPHABET
        cells = ''.join(DEFAULT_ALPHABET.encode(c) for c in self.cells)
        return f"{cells} {','.join(str(g) for g in self.groups)}".rstrip()
