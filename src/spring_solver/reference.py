"""
Brute-force reference counter.

Enumerates every resolution of a row's UNKNOWN cells and checks its runs
directly. Exponential in the number of unknowns; used as an oracle for the
table-driven counter on small rows.
"""

import itertools
from typing import Iterator, Sequence, Tuple

from .types import Cell, Row

# Refuse to enumerate more than 2**DEFAULT_MAX_UNKNOWN resolutions
DEFAULT_MAX_UNKNOWN = 20


def runs_of(cells: Sequence[Cell]) -> Tuple[int, ...]:
    """Lengths of the maximal FILLED runs of a fully resolved sequence."""
    runs = []
    current = 0
    for c in cells:
        if c is Cell.UNKNOWN:
            raise ValueError("runs_of() needs a fully resolved sequence")
        if c is Cell.FILLED:
            current += 1
        elif current:
            runs.append(current)
            current = 0
    if current:
        runs.append(current)
    return tuple(runs)


def resolutions(row: Row) -> Iterator[Tuple[Cell, ...]]:
    """Yield every assignment of CLEAR/FILLED to the row's UNKNOWN cells."""
    unknown_at = [i for i, c in enumerate(row.cells) if c is Cell.UNKNOWN]
    for choice in itertools.product((Cell.CLEAR, Cell.FILLED), repeat=len(unknown_at)):
        cells = list(row.cells)
        for i, c in zip(unknown_at, choice):
            cells[i] = c
        yield tuple(cells)


def count_brute_force(row: Row, max_unknown: int = DEFAULT_MAX_UNKNOWN) -> int:
    """
    Count arrangements by exhaustive enumeration.

    Args:
        row: row to count
        max_unknown: largest number of UNKNOWN cells accepted

    Returns:
        Number of resolutions whose runs equal row.groups

    Raises:
        ValueError: if the row has more than max_unknown unknowns
    """
    if row.n_unknown > max_unknown:
        raise ValueError(f"{row.n_unknown} unknown cells exceeds max_unknown={max_unknown}")
    return sum(1 for cells in resolutions(row) if runs_of(cells) == row.groups)
