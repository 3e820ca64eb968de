"""Tests for domain models to verify they work correctly."""

import pytest

from polyrelate.domain import (
    EPSILON,
    Line,
    LineSegment,
    Point,
    Polygon,
    Relationship,
    approx_equal,
)
from polyrelate.exceptions import DegenerateEdgeError, GeometryError, InvalidPolygonError


class TestApproxEqual:
    """Tests for the shared scalar tolerance."""

    def test_rounding_noise_absorbed(self) -> None:
        """Test that float rounding noise compares equal."""
        assert approx_equal(0.1 + 0.2, 0.3)

    def test_difference_at_epsilon_is_not_equal(self) -> None:
        """Test that the bound is strict."""
        assert not approx_equal(0.0, 2 * EPSILON)
        assert approx_equal(0.0, EPSILON / 2)

    def test_custom_epsilon(self) -> None:
        """Test comparison with an explicit tolerance."""
        assert approx_equal(1.0, 1.05, epsilon=0.1)
        assert not approx_equal(1.0, 1.05)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(1.5, -2.0).to_tuple() == (1.5, -2.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, 200.0)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_equality_is_approximate(self) -> None:
        """Test that points within tolerance on both axes are equal."""
        assert Point(1.0, 1.0) == Point(1.0 + EPSILON / 2, 1.0 - EPSILON / 2)
        assert Point(1.0, 1.0) != Point(1.0 + 2 * EPSILON, 1.0)

    def test_equality_is_per_axis(self) -> None:
        """Test that equality is checked per axis, not by Euclidean distance."""
        offset = 0.9 * EPSILON
        p = Point(0.0, 0.0)
        q = Point(offset, offset)
        # Diagonal distance is ~1.27 * epsilon, still equal per axis
        assert p == q

    def test_equality_is_not_transitive(self) -> None:
        """Test the accepted limitation that tolerance equality is not transitive."""
        step = 0.6 * EPSILON
        a = Point(0.0, 0.0)
        b = Point(step, 0.0)
        c = Point(2 * step, 0.0)
        assert a == b
        assert b == c
        assert a != c

    def test_points_are_unhashable(self) -> None:
        """Test that approximate equality disables hashing."""
        with pytest.raises(TypeError):
            hash(Point(0.0, 0.0))

    def test_str(self) -> None:
        """Test point formatting."""
        assert str(Point(4, -4)) == "(4, -4)"
        assert str(Point(0.5, 2.25)) == "(0.5, 2.25)"


class TestLine:
    """Tests for Line class."""

    def test_coefficients(self) -> None:
        """Test standard form coefficients from two points."""
        line = Line.through(Point(1, 2), Point(3, 5))
        assert line.a == 3
        assert line.b == -2
        assert line.c == 3 * 2 - 1 * 5

    def test_vertical_line(self) -> None:
        """Test that vertical lines need no special casing."""
        line = Line.through(Point(2, 0), Point(2, 5))
        assert line.contains(Point(2, 100))
        assert not line.contains(Point(3, 1))

    def test_str(self) -> None:
        """Test line formatting."""
        assert str(Line.through(Point(0, 0), Point(1, 1))) == "1x + -1y + 0 = 0"


class TestLineSegment:
    """Tests for LineSegment class."""

    def test_segment_line(self) -> None:
        """Test supporting line of a segment."""
        segment = LineSegment(Point(0, 0), Point(2, 0))
        assert segment.line() == Line.through(Point(0, 0), Point(2, 0))

    def test_has_endpoint(self) -> None:
        """Test endpoint detection."""
        segment = LineSegment(Point(0, 0), Point(2, 0))
        assert segment.has_endpoint(Point(0, 0))
        assert segment.has_endpoint(Point(2, 0))
        assert not segment.has_endpoint(Point(1, 0))

    def test_str(self) -> None:
        """Test segment formatting."""
        segment = LineSegment(Point(0, 0), Point(1, 2))
        assert str(segment) == "Segment[(0, 0) - (1, 2)]"


class TestPolygon:
    """Tests for Polygon class."""

    def test_from_coordinates(self) -> None:
        """Test building a polygon from coordinate pairs."""
        polygon = Polygon.from_coordinates([(0, 0), (1, 0), (1, 1)])
        assert polygon.vertex_count == 3
        assert polygon.vertices[1] == Point(1, 0)

    def test_vertices_stored_as_tuple(self) -> None:
        """Test that a vertex list is frozen into a tuple."""
        polygon = Polygon([Point(0, 0), Point(1, 0), Point(1, 1)])  # type: ignore[arg-type]
        assert isinstance(polygon.vertices, tuple)

    def test_too_few_vertices(self) -> None:
        """Test that fewer than three vertices are rejected."""
        with pytest.raises(InvalidPolygonError) as exc_info:
            Polygon.from_coordinates([(0, 0), (1, 0)])
        assert exc_info.value.vertex_count == 2

    def test_adjacent_duplicate_rejected(self) -> None:
        """Test that neighbouring duplicate vertices are rejected."""
        with pytest.raises(DegenerateEdgeError) as exc_info:
            Polygon.from_coordinates([(0, 0), (1, 0), (1, 0), (0, 1)])
        assert (exc_info.value.index, exc_info.value.next_index) == (1, 2)

    def test_closing_duplicate_rejected(self) -> None:
        """Test that repeating the first vertex at the end is rejected."""
        with pytest.raises(DegenerateEdgeError):
            Polygon.from_coordinates([(0, 0), (1, 0), (1, 1), (0, 0)])

    def test_non_adjacent_duplicate_allowed(self) -> None:
        """Test that a vertex may repeat when not adjacent to itself."""
        polygon = Polygon.from_coordinates([(2, 2), (2, -2), (-2, -2), (2, -2)])
        assert polygon.vertex_count == 4

    def test_errors_are_value_errors(self) -> None:
        """Test that construction errors fit both hierarchies."""
        with pytest.raises(ValueError):
            Polygon.from_coordinates([(0, 0)])
        with pytest.raises(GeometryError):
            Polygon.from_coordinates([(0, 0)])

    def test_bounding_box(self) -> None:
        """Test bounding box calculation."""
        polygon = Polygon.from_coordinates([(10, 20), (100, 30), (50, 150)])
        assert polygon.bounding_box() == (10.0, 20.0, 100.0, 150.0)

    def test_polygon_serialization(self) -> None:
        """Test polygon serialization and deserialization."""
        p1 = Polygon.from_coordinates([(0, 0), (100, 0), (100, 100)])
        data = p1.to_dict()
        assert data == {"vertices": [[0.0, 0.0], [100.0, 0.0], [100.0, 100.0]]}

        p2 = Polygon.from_dict(data)
        assert p2.vertices == p1.vertices

    def test_str(self) -> None:
        """Test polygon formatting."""
        polygon = Polygon.from_coordinates([(4, 4), (4, -4), (-4, -4)])
        assert str(polygon) == "Polygon: (4, 4) (4, -4) (-4, -4)"


class TestRelationship:
    """Tests for Relationship labels."""

    def test_labels(self) -> None:
        """Test the four label strings."""
        assert [r.value for r in Relationship] == [
            "Intersecting",
            "Touching",
            "Disjoint (Enclosed)",
            "Disjoint (Outside)",
        ]

    def test_compares_to_string(self) -> None:
        """Test that members compare equal to their label."""
        assert Relationship.TOUCHING == "Touching"
        assert str(Relationship.DISJOINT_OUTSIDE) == "Disjoint (Outside)"
