"""Input layer for polyrelate.

Turns inline vertex text, vertex files and batch case files into polygons.
"""

from polyrelate.io.reader import PolygonPair, load_cases, load_polygon, parse_vertices

__all__ = [
    "PolygonPair",
    "load_cases",
    "load_polygon",
    "parse_vertices",
]
