#!/usr/bin/env python3
"""
Generate deterministic polygon datasets for benchmarking.
The format is:
N
x0 y0
x1 y1
...
"""

import argparse
from pathlib import Path

from earclip.generators import GENERATORS
from earclip.polyio import write_poly


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--output", default="polygons/generated", type=Path)
    parser.add_argument(
        "--sizes",
        nargs="+",
        type=int,
        default=[10, 50, 100, 500, 1000, 2000],
    )
    parser.add_argument("--types", nargs="+", default=sorted(GENERATORS), choices=sorted(GENERATORS))
    args = parser.parse_args()

    for n in args.sizes:
        for name in args.types:
            gen = GENERATORS[name]
            write_poly(gen(n), args.output / f"{name}_{n}.poly")

    print(f"Generated polygons in {args.output}")


if __name__ == "__main__":
    main()
