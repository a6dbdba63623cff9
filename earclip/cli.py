"""
Command line driver: triangulate a .poly file by ear clipping.

Prints one summary line, e.g.::

    earclip,vertices=10,triangles=8,time_ms=0.12
"""

from __future__ import annotations
import argparse
import logging
import sys
import time
from typing import List, Optional

from .earcut import EarPolicy, Triangulator
from .errors import TriangulationError
from .polyio import read_poly, write_tri


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="earclip", description="Ear-clipping polygon triangulation")
    parser.add_argument("--input", "-i", required=True, help="Input polygon file (.poly)")
    parser.add_argument("--output", "-o", help="Output triangulation file (.tri)")
    parser.add_argument(
        "--policy",
        choices=[p.value for p in EarPolicy],
        default=EarPolicy.CONTAINMENT.value,
        help="How vertices inside a candidate ear are treated (default: containment)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        points = read_poly(args.input)
        tri = Triangulator(points, policy=args.policy)

        start = time.perf_counter()
        triangles = tri.triangulate()
        end = time.perf_counter()

        if args.output:
            write_tri(points, triangles, args.output)
    except (TriangulationError, OSError) as e:
        print(f"earclip: error: {e}", file=sys.stderr)
        return 1

    elapsed_ms = (end - start) * 1000
    line = f"earclip,vertices={tri.n},triangles={len(triangles)},time_ms={elapsed_ms}"
    if not tri.complete:
        line += ",complete=0"
    print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
