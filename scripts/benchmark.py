#!/usr/bin/env python3
"""
Benchmark ear-clipping triangulation on generated polygon families.

Usage:
    python3 scripts/benchmark.py [--sizes N1,N2,...] [--runs R] [--policy P]
"""

from __future__ import annotations
import argparse
import statistics
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import List, Tuple

from earclip import EarPolicy, Triangulator
from earclip.generators import GENERATORS

ROOT = Path(__file__).resolve().parent.parent
RESULTS_DIR = ROOT / "results"


def log(msg: str) -> None:
    """Print timestamped log message."""
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {msg}")


def time_once(points, policy: EarPolicy) -> Tuple[Triangulator, float]:
    tri = Triangulator(points, policy=policy)
    start = time.perf_counter()
    tri.triangulate()
    return tri, (time.perf_counter() - start) * 1000


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark ear-clipping triangulation")
    parser.add_argument("--sizes", default="100,500,1000,2000",
                        help="Comma-separated polygon sizes (default: 100,500,1000,2000)")
    parser.add_argument("--runs", type=int, default=5,
                        help="Number of runs per configuration (default: 5)")
    parser.add_argument("--types", default=",".join(sorted(GENERATORS)),
                        help="Comma-separated polygon families (default: all)")
    parser.add_argument("--policy", choices=[p.value for p in EarPolicy], default=EarPolicy.CONTAINMENT.value)
    parser.add_argument("--out-csv", default=str(RESULTS_DIR / "benchmark_results.csv"),
                        help="Output CSV path for per-run results (default: results/benchmark_results.csv)")
    args = parser.parse_args()

    sizes = [int(s.strip()) for s in args.sizes.split(",")]
    selected_types = [t.strip() for t in args.types.split(",") if t.strip()]
    unknown = sorted(set(selected_types) - set(GENERATORS))
    if unknown:
        log(f"ERROR: Unknown polygon types: {unknown} (known: {sorted(GENERATORS)})")
        sys.exit(2)

    policy = EarPolicy(args.policy)
    out_csv_path = Path(args.out_csv)
    out_csv_path.parent.mkdir(parents=True, exist_ok=True)

    log(f"Starting benchmark: sizes={sizes}, runs={args.runs}, policy={policy.value}")

    with open(out_csv_path, "w", encoding="utf-8") as csv_file:
        csv_file.write("polygon_type,num_vertices,run,reflex_count,triangles,complete,time_ms\n")

        for ptype in selected_types:
            log(f"=== {ptype.upper()} polygons ===")
            for n in sizes:
                pts = GENERATORS[ptype](n)
                times: List[float] = []
                for run in range(args.runs):
                    tri, time_ms = time_once(pts, policy)
                    times.append(time_ms)
                    csv_file.write(
                        f"{ptype},{len(pts)},{run},{tri.reflex_count},{len(tri.triangles)},"
                        f"{int(tri.complete)},{time_ms}\n"
                    )
                    if not tri.complete:
                        log(f"WARNING: {ptype}_{n} run {run}: partial result ({len(tri.triangles)} triangles)")

                mean = statistics.mean(times)
                stdev = statistics.stdev(times) if len(times) > 1 else 0.0
                log(f"  n={len(pts):>6}: {mean:10.3f} ms  (+/- {stdev:.3f})")

    log(f"Results written to {out_csv_path}")


if __name__ == "__main__":
    main()
