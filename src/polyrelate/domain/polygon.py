"""Polygon value type with edge extraction and point containment."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from polyrelate.domain.line import LineSegment
from polyrelate.domain.point import EPSILON, Point, approx_equal
from polyrelate.exceptions import DegenerateEdgeError, InvalidPolygonError


@dataclass(frozen=True, slots=True, eq=False)
class Polygon:
    """A closed ring of vertices.

    The ring is implicitly closed: edge i joins vertex i and vertex
    (i + 1) mod n, so the first vertex must not be repeated at the end.
    Construction rejects rings with fewer than 3 vertices and rings where two
    neighbouring vertices coincide. Self-intersection is not checked.

    Attributes:
        vertices: Vertices in ring order
    """

    vertices: tuple[Point, ...]

    def __post_init__(self) -> None:
        vertices = tuple(self.vertices)
        object.__setattr__(self, "vertices", vertices)

        n = len(vertices)
        if n < 3:
            raise InvalidPolygonError(n)

        for i in range(n):
            j = (i + 1) % n
            if vertices[i] == vertices[j]:
                raise DegenerateEdgeError(i, j)

    @classmethod
    def from_coordinates(cls, coordinates: Iterable[Sequence[float]]) -> "Polygon":
        """Build a polygon from (x, y) pairs.

        Args:
            coordinates: Iterable of coordinate pairs in ring order

        Returns:
            Polygon instance
        """
        return cls(tuple(Point(float(x), float(y)) for x, y in coordinates))

    @property
    def vertex_count(self) -> int:
        """Number of vertices (and edges) in the ring."""
        return len(self.vertices)

    def edges(self) -> list[LineSegment]:
        """Get the edges of the ring in vertex order.

        Returns:
            List of n segments, the last one closing the ring
        """
        n = len(self.vertices)
        return [LineSegment(self.vertices[i], self.vertices[(i + 1) % n]) for i in range(n)]

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Calculate bounding box of the polygon.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        xs = [p.x for p in self.vertices]
        ys = [p.y for p in self.vertices]
        return (min(xs), min(ys), max(xs), max(ys))

    def contains(self, point: Point, epsilon: float = EPSILON) -> bool:
        """Check if a point is inside the polygon or on its boundary.

        Any edge containing the point short-circuits to True. Otherwise a
        horizontal ray is cast to the right and crossings are counted; an odd
        count means inside. Horizontal edges are skipped since the ray runs
        parallel to them, and a crossing landing on the point itself counts
        as a boundary hit.

        Args:
            point: The point to test
            epsilon: Tolerance for boundary and horizontal-edge tests

        Returns:
            True if the point is inside or on the boundary

        Examples:
            >>> square = Polygon.from_coordinates([(0, 0), (2, 0), (2, 2), (0, 2)])
            >>> square.contains(Point(1.0, 1.0))
            True
            >>> square.contains(Point(2.0, 1.0))
            True
            >>> square.contains(Point(3.0, 3.0))
            False
        """
        count = 0
        n = len(self.vertices)

        for i in range(n):
            v1 = self.vertices[i]
            v2 = self.vertices[(i + 1) % n]

            if LineSegment(v1, v2).contains(point, epsilon):
                return True

            if approx_equal(v1.y, v2.y, epsilon):
                continue
            if point.y < min(v1.y, v2.y) or point.y > max(v1.y, v2.y):
                continue

            x_intersect = (point.y - v1.y) * (v2.x - v1.x) / (v2.y - v1.y) + v1.x
            if approx_equal(x_intersect, point.x, epsilon):
                return True
            if x_intersect > point.x:
                count += 1

        return count % 2 == 1

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with a list of [x, y] vertex pairs
        """
        return {"vertices": [list(p.to_tuple()) for p in self.vertices]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Polygon":
        """Deserialize from dictionary.

        Args:
            data: Dictionary produced by ``to_dict``

        Returns:
            Polygon instance
        """
        return cls.from_coordinates(data["vertices"])

    def __str__(self) -> str:
        return "Polygon: " + " ".join(str(p) for p in self.vertices)
