#!/usr/bin/env python3
"""
Count spring arrangements for every row of an input file.

Prints two totals: part 1 (raw rows) and part 2 (five-fold unfolded rows).
Optionally appends per-row and summary receipts to <receipts>/receipts.jsonl.

Usage:
    python scripts/run_batch.py --input=inputs/day_12.txt
    python scripts/run_batch.py --input=inputs/day_12.txt --workers=0 --receipts=runs/day12
"""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from spring_solver import (
    Alphabet, ParseError,
    solve_lines, load_lines,
    row_sha, batch_sha, log_receipt
)


def write_receipts(result, input_path: str, out_dir: str) -> Path:
    """One receipt per row plus a summary record."""
    for idx, (row, count, unfolded) in enumerate(
            zip(result.rows, result.counts, result.unfolded_counts), 1):
        log_receipt({
            "index": idx,
            "row": str(row),
            "row_sha": row_sha(row),
            "count": count,
            "count_unfolded": unfolded,
        }, out_dir=out_dir)
    path = log_receipt({
        "input": input_path,
        "rows": len(result.rows),
        "batch_sha": batch_sha(result.rows),
        "part1": result.total,
        "part2": result.total_unfolded,
        "timing_ms": result.timing_ms,
    }, out_dir=out_dir)
    return path


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Count spring row arrangements (raw and unfolded)")
    parser.add_argument(
        "--input", "-i",
        type=str,
        default="inputs/day_12.txt",
        help="Path to the puzzle input, one row per line"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker processes (0 = one per CPU)"
    )
    parser.add_argument(
        "--symbols",
        type=str,
        default=".#?",
        help="Cell symbols for clear, filled, unknown"
    )
    parser.add_argument(
        "--receipts",
        type=str,
        default=None,
        help="Directory to append receipts.jsonl to (off by default)"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress messages"
    )

    args = parser.parse_args(argv)

    try:
        alphabet = Alphabet.from_string(args.symbols)
    except ValueError as e:
        parser.error(str(e))

    try:
        lines = load_lines(args.input)
        result = solve_lines(lines, alphabet, workers=args.workers, verbose=not args.quiet)
    except ParseError as e:
        print(f"error: {args.input}: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"error: cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    print(f"Part 1: {result.total}")
    print(f"Part 2: {result.total_unfolded}")

    if args.receipts:
        path = write_receipts(result, args.input, args.receipts)
        if not args.quiet:
            print(f"Receipts: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
