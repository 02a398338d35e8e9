"""
Utility functions for the spring solver: row identities and receipt logging.
"""

import json
import hashlib
from typing import Dict, List
from pathlib import Path
from datetime import datetime

from .types import Row


# ==============================================================================
# Hash functions for receipts
# ==============================================================================

def _row_payload(row: Row) -> Dict:
    return {"cells": [int(c) for c in row.cells], "groups": list(row.groups)}


def row_sha(row: Row) -> str:
    """
    Compute SHA-256 hash of a row.

    Independent of the symbol alphabet the row was parsed with.

    Returns:
        Hex string of SHA-256 hash
    """
    return hashlib.sha256(json.dumps(_row_payload(row), sort_keys=True).encode()).hexdigest()


def batch_sha(rows: List[Row]) -> str:
    """
    Compute SHA-256 hash of an ordered batch of rows.

    Returns:
        Hex string of SHA-256 hash
    """
    if not rows:
        return hashlib.sha256(b"[]").hexdigest()
    payload = [_row_payload(row) for row in rows]
    return hashlib.sha256(json.dumps(payload, sort_keys=True).encode()).hexdigest()


# ==============================================================================
# Receipt logging
# ==============================================================================

def log_receipt(record: Dict, out_dir: str = None) -> Path:
    """
    Append a receipt record to <out_dir>/receipts.jsonl.

    Args:
        record: Dictionary with receipt data
        out_dir: Output directory (default: runs/YYYY-MM-DD)

    Returns:
        Path of the receipts file
    """
    if out_dir is None:
        date_str = datetime.now().strftime("%Y-%m-%d")
        out_dir = f"runs/{date_str}"

    Path(out_dir).mkdir(parents=True, exist_ok=True)
    receipt_path = Path(out_dir) / "receipts.jsonl"

    with open(receipt_path, "a") as f:
        f.write(json.dumps(record, sort_keys=True) + "\n")
    return receipt_path
