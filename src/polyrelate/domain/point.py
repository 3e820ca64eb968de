"""Scalar tolerance and the 2D point value type.

Every floating comparison in polyrelate goes through ``approx_equal`` so that
rounding noise from intersection and ray-casting arithmetic is absorbed.
"""

from dataclasses import dataclass
from typing import Any

EPSILON = 1e-6


def approx_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Check whether two scalars differ by less than ``epsilon``.

    Args:
        a: First value
        b: Second value
        epsilon: Strict upper bound on the allowed difference

    Returns:
        True if |a - b| < epsilon

    Examples:
        >>> approx_equal(0.1 + 0.2, 0.3)
        True
        >>> approx_equal(1.0, 1.00001)
        False
    """
    return abs(a - b) < epsilon


def format_coordinate(value: float) -> str:
    """Render a coordinate or coefficient compactly."""
    return f"{value:g}"


@dataclass(frozen=True, slots=True, eq=False)
class Point:
    """A point in 2D space.

    Equality is approximate and checked per axis: two points are equal when
    both their x and their y differ by less than the tolerance. This is not a
    Euclidean distance test, so points up to ~1.4 * epsilon apart diagonally
    still compare equal. The relation is not transitive near the tolerance
    boundary, and points are not hashable.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def equals(self, other: "Point", epsilon: float = EPSILON) -> bool:
        """Compare with another point using an explicit tolerance."""
        return approx_equal(self.x, other.x, epsilon) and approx_equal(self.y, other.y, epsilon)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.equals(other)

    def __str__(self) -> str:
        return f"({format_coordinate(self.x)}, {format_coordinate(self.y)})"

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))
