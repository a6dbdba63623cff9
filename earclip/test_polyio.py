import pytest

from earclip.earcut import triangulate
from earclip.errors import PolyFormatError
from earclip.generators import notch_polygon, random_polygon
from earclip.geometry import Triangle
from earclip.polyio import index_triangles, read_poly, read_tri, write_poly, write_tri


def test_poly_round_trip_is_exact(tmp_path):
    pts = random_polygon(30)
    path = tmp_path / "nested" / "random_30.poly"
    write_poly(pts, path)

    assert path.read_text().splitlines()[0] == "30"
    assert read_poly(path) == pts


def test_read_poly_skips_comments_and_blanks(tmp_path):
    path = tmp_path / "notch.poly"
    path.write_text("# notch\n5\n0 0\n4 0\n\n4 4\n2 1\n# top left\n0 4\n")
    assert read_poly(path) == [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (2.0, 1.0), (0.0, 4.0)]


@pytest.mark.parametrize("text,line,message", [
    ("", 0, "unexpected end of file"),
    ("three\n0 0\n", 1, "expected vertex count"),
    ("-1\n", 1, "negative vertex count"),
    ("3\n0 0\n1 0\n", 3, "unexpected end of file"),
    ("3\n0 0\n1 0 7\n0 1\n", 3, "expected 2 values"),
    ("3\n0 0\n1 x\n0 1\n", 3, "bad vertex"),
])
def test_read_poly_errors(tmp_path, text, line, message):
    path = tmp_path / "bad.poly"
    path.write_text(text)
    with pytest.raises(PolyFormatError, match=message) as info:
        read_poly(path)
    assert info.value.line == line
    assert str(path) in str(info.value)


def test_index_triangles():
    pts = notch_polygon()
    assert index_triangles(pts, triangulate(pts)) == [(1, 2, 3), (3, 4, 0), (3, 0, 1)]


def test_index_triangles_rejects_foreign_corner():
    with pytest.raises(ValueError, match="not a polygon vertex"):
        index_triangles([(0, 0), (1, 0), (0, 1)], [Triangle((0, 0), (1, 0), (5, 5))])


def test_tri_file(tmp_path):
    pts = notch_polygon()
    path = tmp_path / "notch.tri"
    write_tri(pts, triangulate(pts), path)

    text = path.read_text()
    assert text.startswith("# vertices\n5\n")
    assert "# triangles\n3\n" in text

    points, tris = read_tri(path)
    assert points == [(float(x), float(y)) for x, y in pts]
    assert tris == [(1, 2, 3), (3, 4, 0), (3, 0, 1)]


def test_read_tri_index_out_of_range(tmp_path):
    path = tmp_path / "bad.tri"
    path.write_text("# vertices\n3\n0 0\n1 0\n0 1\n# triangles\n1\n0 1 3\n")
    with pytest.raises(PolyFormatError, match="vertex index 3 out of range") as info:
        read_tri(path)
    assert info.value.line == 8
