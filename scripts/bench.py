#!/usr/bin/env python3
# ruff: noqa: E402
from __future__ import annotations

import argparse
import json
import os
import sys
import time
from typing import Any, Dict, List

# Allow running this script directly via `python scripts/bench.py`
# by adding `src/` to sys.path.
SRC_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from checkscan.engine.attacks import check_status
from checkscan.engine.fen import decode
from checkscan.engine.samples import SAMPLES


def bench(iterations: int) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for sample in SAMPLES:
        position = decode(sample.fen)
        start = time.perf_counter()
        for _ in range(iterations):
            check_status(position)
        dt = time.perf_counter() - start
        rows.append(
            {
                "id": sample.id,
                "name": sample.name,
                "iterations": iterations,
                "time_ms": int(dt * 1000),
                "qps": int(iterations / max(dt, 1e-9)),
            }
        )
    return rows


def main() -> None:
    parser = argparse.ArgumentParser(description="Time check_status over the sample positions")
    parser.add_argument("--iterations", type=int, default=10000, help="Calls per position (default: 10000)")
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text lines")
    args = parser.parse_args()

    rows = bench(args.iterations)
    if args.json:
        print(json.dumps({"results": rows}, indent=2))
        return
    for r in rows:
        print(f"{r['id']:2d} time_ms={r['time_ms']} qps={r['qps']}  {r['name']}")
    total = sum(r["iterations"] for r in rows)
    total_ms = sum(r["time_ms"] for r in rows)
    print(f"total calls={total} time_ms={total_ms}")


if __name__ == "__main__":
    main()
