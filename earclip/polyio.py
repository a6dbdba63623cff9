"""
Reading and writing polygon (.poly) and triangulation (.tri) files.

.poly format::

    N
    x0 y0
    x1 y1
    ...

.tri format::

    # vertices
    N
    x0 y0
    ...
    # triangles
    M
    i j k
    ...

Blank lines and lines starting with ``#`` are skipped when reading.
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterator, List, Sequence, Tuple

from .errors import PolyFormatError
from .geometry import Point, Triangle

IndexTriangle = Tuple[int, int, int]


def _data_lines(path: Path) -> Iterator[Tuple[int, str]]:
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            yield lineno, line


class _Reader:
    def __init__(self, path: Path):
        self.path = path
        self.lines = _data_lines(path)
        self.lineno = 0

    def next_line(self, what: str) -> str:
        try:
            self.lineno, line = next(self.lines)
        except StopIteration:
            raise PolyFormatError(self.path, self.lineno, f"unexpected end of file, expected {what}") from None
        return line

    def count(self, what: str) -> int:
        line = self.next_line(what)
        try:
            n = int(line)
        except ValueError:
            raise PolyFormatError(self.path, self.lineno, f"expected {what}, got {line!r}") from None
        if n < 0:
            raise PolyFormatError(self.path, self.lineno, f"negative {what}: {n}")
        return n

    def fields(self, what: str, conv, width: int) -> list:
        line = self.next_line(what)
        parts = line.split()
        if len(parts) != width:
            raise PolyFormatError(self.path, self.lineno, f"expected {width} values for {what}, got {len(parts)}")
        try:
            return [conv(p) for p in parts]
        except ValueError:
            raise PolyFormatError(self.path, self.lineno, f"bad {what}: {line!r}") from None


def read_poly(path) -> List[Point]:
    """Read polygon vertices from a .poly file."""
    reader = _Reader(Path(path))
    n = reader.count("vertex count")
    pts = []
    for _ in range(n):
        x, y = reader.fields("vertex", float, 2)
        pts.append((x, y))
    return pts


def write_poly(points: Sequence[Point], path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{len(points)}\n")
        for x, y in points:
            f.write(f"{x:.17g} {y:.17g}\n")


def index_triangles(points: Sequence[Point], triangles: Sequence[Triangle]) -> List[IndexTriangle]:
    """Map triangle corners back to the first input vertex at that position."""
    lookup: Dict[Point, int] = {}
    for i, (x, y) in enumerate(points):
        lookup.setdefault((float(x), float(y)), i)

    out = []
    for tri in triangles:
        try:
            out.append(tuple(lookup[p] for p in tri))
        except KeyError as exc:
            raise ValueError(f"triangle corner {exc.args[0]} is not a polygon vertex") from None
    return out


def write_tri(points: Sequence[Point], triangles: Sequence[Triangle], path) -> None:
    """Write vertices and index triangles to a .tri file."""
    indexed = index_triangles(points, triangles)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# vertices\n")
        f.write(f"{len(points)}\n")
        for x, y in points:
            f.write(f"{x:.17g} {y:.17g}\n")

        f.write("# triangles\n")
        f.write(f"{len(indexed)}\n")
        for i, j, k in indexed:
            f.write(f"{i} {j} {k}\n")


def read_tri(path) -> Tuple[List[Point], List[IndexTriangle]]:
    """Read a .tri file written by write_tri."""
    reader = _Reader(Path(path))
    n = reader.count("vertex count")
    pts = []
    for _ in range(n):
        x, y = reader.fields("vertex", float, 2)
        pts.append((x, y))

    m = reader.count("triangle count")
    tris = []
    for _ in range(m):
        i, j, k = reader.fields("triangle", int, 3)
        for v in (i, j, k):
            if not 0 <= v < n:
                raise PolyFormatError(reader.path, reader.lineno, f"vertex index {v} out of range")
        tris.append((i, j, k))
    return pts, tris
