"""
earclip: ear-clipping triangulation of simple polygons.

    from earclip import Ring, triangulate

    tris = triangulate(Ring([(0, 0), (2, 0), (2, 2), (0, 2)]))
"""

__version__ = "0.1.0"

from .errors import TriangulationError, InvalidInputError, PolyFormatError
from .geometry import Point, Triangle, cross, signed_area, polygon_area, triangles_to_array
from .ring import Node, Ring
from .earcut import EarPolicy, Triangulator, is_ear, clip_ears, triangulate
from .validate import validate_triangulation
