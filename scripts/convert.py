#!/usr/bin/env python3
"""Convert coordinates from the command line without running the API.

Examples:
  python scripts/convert.py to-gridref 337297 503695
  python scripts/convert.py gridref-to-latlng "NY 37297 03695" --decimals 5
  python scripts/convert.py from-gridref --input refs.txt --format json
"""
from __future__ import annotations

import argparse
import json
import os
import sys
from typing import Callable, Dict, List, Optional, Tuple

# Make transform-backend importable
THIS_DIR = os.path.dirname(__file__)
BACKEND_DIR = os.path.abspath(os.path.join(THIS_DIR, "..", "transform-backend"))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

from gridref.types import Invalid  # type: ignore  # noqa: E402
from ostransform import transform  # type: ignore  # noqa: E402


def _num(v: str) -> float:
    return float(v)


# name -> (argument count, converter(values, decimals))
OPERATIONS: Dict[str, Tuple[int, Callable]] = {
    "to-latlng": (2, lambda v, d: transform.to_latlng(_num(v[0]), _num(v[1]), d)),
    "from-latlng": (2, lambda v, d: transform.from_latlng(_num(v[0]), _num(v[1]), d)),
    "to-gridref": (2, lambda v, d: transform.to_gridref(_num(v[0]), _num(v[1]))),
    "from-gridref": (1, lambda v, d: transform.from_gridref(" ".join(v))),
    "gridref-to-latlng": (1, lambda v, d: transform.gridref_to_latlng(" ".join(v), d)),
}


def _split_line(op: str, line: str) -> List[str]:
    if OPERATIONS[op][0] == 1:
        return [line.strip()]
    return line.replace(",", " ").split()


def convert_one(op: str, values: List[str], decimals: Optional[int]) -> dict:
    """Run one conversion; returns a row dict with 'input' plus 'result' or 'error'."""
    arity, fn = OPERATIONS[op]
    row: dict = {"input": " ".join(values)}
    if arity == 2 and len(values) != 2:
        row["error"] = f"{op} expects 2 values, got {len(values)}"
        return row
    try:
        res = fn(values, decimals)
    except ValueError as e:
        row["error"] = str(e)
        return row
    if isinstance(res, Invalid):
        row["error"] = res.reason
    else:
        row["result"] = res.value.to_dict()
    return row


def _read_inputs(path: str) -> List[str]:
    with open(path) as f:
        return [ln.strip() for ln in f if ln.strip() and not ln.lstrip().startswith("#")]


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Convert between National Grid, grid references and WGS84.")
    ap.add_argument("operation", choices=sorted(OPERATIONS))
    ap.add_argument("values", nargs="*", help="Easting/northing, lat/lng or a grid reference")
    ap.add_argument("--decimals", type=int, default=None, help="Decimal places for projected output")
    ap.add_argument("--input", help="File with one value set per line")
    ap.add_argument("--format", choices=["pretty", "json"], default="pretty")
    args = ap.parse_args(argv)

    if args.input:
        batches = [_split_line(args.operation, ln) for ln in _read_inputs(args.input)]
    elif args.values:
        batches = [args.values]
    else:
        ap.error("provide values or --input")

    rows = [convert_one(args.operation, vals, args.decimals) for vals in batches]

    if args.format == "json":
        print(json.dumps(rows, indent=2))
    else:
        for r in rows:
            if "error" in r:
                print(f"{r['input']}: ERROR {r['error']}")
            else:
                print(f"{r['input']}: " + ", ".join(f"{k}={v}" for k, v in r["result"].items()))
    return 1 if any("error" in r for r in rows) else 0


if __name__ == "__main__":
    sys.exit(main())
