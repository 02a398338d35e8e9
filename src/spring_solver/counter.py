#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Spring Solver - Arrangement Counter
===================================

Counts the resolutions of a Row's UNKNOWN cells whose maximal filled runs
equal row.groups exactly.

State after committing cells[0..i): (i, g, r)
- g: number of groups started so far
- r: None between runs, or k >= 0 = FILLED cells the current run still needs
  before it may end

Transitions on cell i:
- r = k > 0: cell must be FILLED         -> (i+1, g,   k-1)
- r = 0:     cell must be CLEAR          -> (i+1, g,   None)
- r = None:  CLEAR                       -> (i+1, g,   None)
             FILLED, only if g < M       -> (i+1, g+1, groups[g]-1)

Accept at i = N when g = M and r is None or 0.

The sweep over i keeps one table per position indexed by (g, r):
column 0 holds r = None, column k+1 holds r = k. Tables use object
dtype so counts are exact Python integers of any size.
"""

import numpy as np
from typing import Sequence

from .types import Cell, Row


def min_row_length(groups: Sequence[int]) -> int:
    """Shortest cell sequence that can hold `groups` (one CLEAR between runs)."""
    if not groups:
        return 0
    return sum(groups) + len(groups) - 1


def count_arrangements(row: Row) -> int:
    """
    Number of arrangements of `row`.

    Returns 0 for unsatisfiable rows; never raises for a valid Row.
    """
    groups = row.groups
    M = len(groups)
    codes = row.codes()

    # Fast rejections: not enough room, or too many fixed FILLED cells
    if min_row_length(groups) > len(codes):
        return 0
    if int(np.count_nonzero(codes == Cell.FILLED)) > sum(groups):
        return 0

    width = max(groups, default=1) + 1
    starts = np.arange(1, M + 1)
    lengths = np.array(groups, dtype=np.int64)  # r = L-1 lives in column L

    ways = np.zeros((M + 1, width), dtype=object)
    ways[0, 0] = 1

    for c in codes:
        nxt = np.zeros_like(ways)
        if c != Cell.CLEAR:
            # Inside a run: k -> k-1
            nxt[:, 1:-1] += ways[:, 2:]
            # Between runs: start group g
            if M:
                nxt[starts, lengths] += ways[:-1, 0]
        if c != Cell.FILLED:
            # Stay between runs, or close a finished run
            nxt[:, 0] += ways[:, 0] + ways[:, 1]
        ways = nxt

    return int(ways[M, 0] + ways[M, 1])
