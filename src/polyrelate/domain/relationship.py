"""Relationship labels produced by polygon classification."""

from enum import Enum


class Relationship(str, Enum):
    """Topological relationship between two polygons.

    Members are string-valued so they compare equal to their labels and can
    be printed or serialized directly.
    """

    INTERSECTING = "Intersecting"
    TOUCHING = "Touching"
    DISJOINT_ENCLOSED = "Disjoint (Enclosed)"
    DISJOINT_OUTSIDE = "Disjoint (Outside)"

    def __str__(self) -> str:
        return self.value
