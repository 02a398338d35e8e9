"""
Spring Solver - Arrangement Counter

Counts the ways to resolve unknown cells in a row so its filled runs match
a required run-length list, raw and five-fold unfolded.
"""

from .types import Cell, Row, ParseError, UNFOLD_COPIES
from .parsing import (
    Alphabet, DEFAULT_ALPHABET,
    parse_row, parse_lines, format_row
)
from .counter import count_arrangements, min_row_length
from .reference import (
    runs_of, resolutions, count_brute_force,
    DEFAULT_MAX_UNKNOWN
)
from .solver import (
    BatchResult,
    count_rows,
    resolve_workers,
    solve_lines,
    solve_text,
    load_lines
)
from .utils import row_sha, batch_sha, log_receipt

__all__ = [
    # Types
    'Cell', 'Row', 'ParseError', 'UNFOLD_COPIES',

    # Parsing
    'Alphabet', 'DEFAULT_ALPHABET',
    'parse_row', 'parse_lines', 'format_row',

    # Counter
    'count_arrangements', 'min_row_length',

    # Reference
    'runs_of', 'resolutions', 'count_brute_force', 'DEFAULT_MAX_UNKNOWN',

    # Batch
    'BatchResult', 'count_rows', 'resolve_workers',
    'solve_lines', 'solve_text', 'load_lines',

    # Utils
    'row_sha', 'batch_sha', 'log_receipt',
]
