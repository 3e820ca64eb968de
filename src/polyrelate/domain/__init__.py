"""Domain models for polyrelate.

This module contains the immutable geometric value types the classifier works
on. Every comparison between coordinates is approximate, routed through
``approx_equal`` with a shared tolerance.

Key classes:
- Point: A 2D point with per-axis approximate equality
- Line: An infinite line in standard form
- LineSegment: A bounded segment between two points
- Polygon: A closed ring of vertices
- Relationship: The four classification labels
"""

from polyrelate.domain.line import Line, LineSegment
from polyrelate.domain.point import EPSILON, Point, approx_equal, format_coordinate
from polyrelate.domain.polygon import Polygon
from polyrelate.domain.relationship import Relationship

__all__: list[str] = [
    # Tolerance
    "EPSILON",
    "approx_equal",
    "format_coordinate",
    # Core types
    "Point",
    "Line",
    "LineSegment",
    "Polygon",
    "Relationship",
]
