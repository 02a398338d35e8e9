#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Spring Solver - Batch Driver"""

import os
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from .types import Row
from .parsing import Alphabet, DEFAULT_ALPHABET, parse_lines
from .counter import count_arrangements


@dataclass
class BatchResult:
    """Counts for every row of an input, raw and unfolded."""
    rows: List[Row]
    counts: List[int]
    unfolded_counts: List[int]
    total: int                # part 1: sum over raw rows
    total_unfolded: int       # part 2: sum over unfolded rows
    timing_ms: Dict[str, int] = field(default_factory=dict)


# Top-level so the process pool can pickle them
def _count_raw(row: Row) -> int:
    return count_arrangements(row)


def _count_unfolded(row: Row) -> int:
    return count_arrangements(row.unfold())


def resolve_workers(workers: int) -> int:
    """workers <= 0 means one worker per CPU."""
    if workers <= 0:
        return os.cpu_count() or 1
    return workers


def count_rows(rows: List[Row], unfold: bool = False, workers: int = 1,
               verbose: bool = False, label: str = "") -> List[int]:
    """
    Count arrangements for each row, in input order.

    Args:
        rows: parsed rows
        unfold: count row.unfold() instead of row
        workers: process count (1 = in-process, <= 0 = one per CPU)
        verbose: print progress
        label: prefix for progress messages

    Returns:
        Per-row counts, aligned with `rows`
    """
    fn = _count_unfolded if unfold else _count_raw
    workers = resolve_workers(workers)
    total = len(rows)

    if workers == 1 or total < 2:
        results = map(fn, rows)
        counts = _collect(results, total, verbose, label)
    else:
        chunksize = max(1, total // (workers * 4))
        with ProcessPoolExecutor(max_workers=workers) as ex:
            counts = _collect(ex.map(fn, rows, chunksize=chunksize), total, verbose, label)
    return counts


def _collect(results: Iterable[int], total: int, verbose: bool, label: str) -> List[int]:
    counts = []
    for idx, count in enumerate(results, 1):
        counts.append(count)
        if verbose and (idx % 100 == 0 or idx == total):
            print(f"[{label}{idx}/{total}] ({100 * idx / total:.1f}%) running sum: {sum(counts)}")
    return counts


def solve_lines(lines: Iterable[str], alphabet: Alphabet = DEFAULT_ALPHABET,
                workers: int = 1, verbose: bool = False) -> BatchResult:
    """
    Parse every line, then count raw and unfolded rows and sum them.

    Any ParseError aborts the run before counting starts.
    """
    t_start = time.time()
    rows = parse_lines(lines, alphabet)
    t_parsed = time.time()

    if verbose:
        print(f"Parsed {len(rows)} rows")

    counts = count_rows(rows, unfold=False, workers=workers, verbose=verbose, label="part 1 ")
    t_part1 = time.time()
    unfolded_counts = count_rows(rows, unfold=True, workers=workers, verbose=verbose, label="part 2 ")
    t_part2 = time.time()

    timing_ms = {
        "parse": int((t_parsed - t_start) * 1000),
        "part1": int((t_part1 - t_parsed) * 1000),
        "part2": int((t_part2 - t_part1) * 1000),
        "total": int((t_part2 - t_start) * 1000),
    }
    return BatchResult(rows, counts, unfolded_counts,
                       sum(counts), sum(unfolded_counts), timing_ms)


def solve_text(text: str, alphabet: Alphabet = DEFAULT_ALPHABET,
               workers: int = 1, verbose: bool = False) -> BatchResult:
    """solve_lines over the lines of a string."""
    return solve_lines(text.splitlines(), alphabet, workers=workers, verbose=verbose)


def load_lines(path: str) -> List[str]:
    """Read an input file into lines."""
    with open(path, encoding="utf-8") as f:
        return f.read().splitlines()
