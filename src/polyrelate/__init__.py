"""Polyrelate - Classify the topological relationship between two polygons.

Polyrelate compares two simple polygons in the plane and reports whether they
are Intersecting, Touching, Disjoint (Enclosed) or Disjoint (Outside).

Example:
    $ polyrelate classify "0,0 1,0 1,1 0,1" "1,0 2,0 2,1 1,1"

This will print ``Relationship: Touching`` because the squares share an edge.
"""

from polyrelate.core import classify
from polyrelate.domain import Point, Polygon, Relationship

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = [
    "Point",
    "Polygon",
    "Relationship",
    "__author__",
    "__version__",
    "classify",
]
