"""Infinite lines and bounded line segments.

Lines are kept in standard form ``a*x + b*y + c = 0`` so that vertical lines
need no special casing. Segments delegate to their supporting line and add a
bounding-box check.
"""

from dataclasses import dataclass

from polyrelate.domain.point import EPSILON, Point, approx_equal, format_coordinate


@dataclass(frozen=True, slots=True)
class Line:
    """An infinite line through two points in standard form.

    Built with ``Line.through(p1, p2)``. The two points must be distinct;
    coincident points give the degenerate line a = b = c = 0.

    Attributes:
        a: Coefficient of x
        b: Coefficient of y
        c: Constant term
    """

    a: float
    b: float
    c: float

    @classmethod
    def through(cls, p1: Point, p2: Point) -> "Line":
        """Create the line passing through two points."""
        return cls(
            a=p2.y - p1.y,
            b=p1.x - p2.x,
            c=p2.x * p1.y - p1.x * p2.y,
        )

    def contains(self, point: Point, epsilon: float = EPSILON) -> bool:
        """Check whether a point satisfies the line equation within tolerance."""
        return approx_equal(self.a * point.x + self.b * point.y + self.c, 0.0, epsilon)

    def intersection(self, other: "Line", epsilon: float = EPSILON) -> Point | None:
        """Find the single crossing point of two lines using Cramer's rule.

        Parallel and coincident lines both have a zero determinant and report
        no intersection. Coincident edges must be detected separately with
        ``polyrelate.core.are_collinear``.

        Args:
            other: Line to intersect with
            epsilon: Tolerance for treating the determinant as zero

        Returns:
            Crossing point, or None if the lines are parallel or coincident

        Examples:
            >>> diagonal = Line.through(Point(0, 0), Point(2, 2))
            >>> anti = Line.through(Point(0, 2), Point(2, 0))
            >>> print(diagonal.intersection(anti))
            (1, 1)
        """
        determinant = self.a * other.b - other.a * self.b
        if approx_equal(determinant, 0.0, epsilon):
            return None

        x = (self.b * other.c - other.b * self.c) / determinant
        y = (other.a * self.c - self.a * other.c) / determinant
        return Point(x, y)

    def __str__(self) -> str:
        return (
            f"{format_coordinate(self.a)}x + {format_coordinate(self.b)}y + "
            f"{format_coordinate(self.c)} = 0"
        )


@dataclass(frozen=True, slots=True, eq=False)
class LineSegment:
    """A bounded segment between two endpoints.

    The endpoints are ordered for edge bookkeeping, but the segment itself is
    an undirected set of points.

    Attributes:
        p1: First endpoint
        p2: Second endpoint
    """

    p1: Point
    p2: Point

    def line(self) -> Line:
        """Get the infinite line supporting this segment."""
        return Line.through(self.p1, self.p2)

    def contains(self, point: Point, epsilon: float = EPSILON) -> bool:
        """Check whether a point lies on the segment.

        The point must lie on the supporting line (within tolerance) and inside
        the axis-aligned bounding box of the endpoints. The box test is exact,
        which handles horizontal and vertical segments without special cases.

        Args:
            point: Point to test
            epsilon: Tolerance for the on-line test

        Returns:
            True if the point is on the segment, endpoints included
        """
        if not self.line().contains(point, epsilon):
            return False

        return (
            min(self.p1.x, self.p2.x) <= point.x <= max(self.p1.x, self.p2.x)
            and min(self.p1.y, self.p2.y) <= point.y <= max(self.p1.y, self.p2.y)
        )

    def intersection(self, other: "LineSegment", epsilon: float = EPSILON) -> Point | None:
        """Find the crossing point of two segments.

        Intersects the supporting lines and keeps the result only if it lies on
        both segments. Collinear segments report None.

        Args:
            other: Segment to intersect with
            epsilon: Tolerance passed to the line and containment tests

        Returns:
            Crossing point within both segments, or None
        """
        result = self.line().intersection(other.line(), epsilon)
        if result is None:
            return None

        if self.contains(result, epsilon) and other.contains(result, epsilon):
            return result
        return None

    def has_endpoint(self, point: Point, epsilon: float = EPSILON) -> bool:
        """Check whether a point coincides with either endpoint."""
        return self.p1.equals(point, epsilon) or self.p2.equals(point, epsilon)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineSegment):
            return NotImplemented
        return self.p1 == other.p1 and self.p2 == other.p2

    def __str__(self) -> str:
        return f"Segment[{self.p1} - {self.p2}]"
