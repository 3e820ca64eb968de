"""Polygon relationship classification.

This module decides how two polygons relate by gathering boundary evidence
between every edge of one and every edge and vertex of the other:

- Vertex contacts: a vertex of one polygon lying on an edge of the other
- Collinear overlaps: edges sharing a supporting line with overlapping ranges
- Interior crossings: edges crossing at a point that is no edge endpoint

The evidence is folded into a label in priority order: a crossing means
Intersecting, any contact means Touching, and only then is vertex
containment checked to tell Disjoint (Enclosed) from Disjoint (Outside).
"""

import logging
from dataclasses import dataclass

from polyrelate.core.predicates import are_collinear, edges_overlap
from polyrelate.domain import EPSILON, LineSegment, Point, Polygon, Relationship

logger = logging.getLogger(__name__)


@dataclass
class ClassificationEvidence:
    """Evidence gathered while comparing two polygons.

    Containment is only evaluated when there is no boundary contact and no
    crossing, so ``a_inside_b`` and ``b_inside_a`` stay False otherwise.

    Attributes:
        vertex_contacts: Number of (edge, vertex) pairs where the vertex lies
            on the edge, counted in both directions
        collinear_overlaps: Number of edge pairs that are collinear and overlap
        crossing: First interior crossing point found, if any
        a_inside_b: Every vertex of the first polygon is inside the second
        b_inside_a: Every vertex of the second polygon is inside the first
    """

    vertex_contacts: int = 0
    collinear_overlaps: int = 0
    crossing: Point | None = None
    a_inside_b: bool = False
    b_inside_a: bool = False

    @property
    def is_intersecting(self) -> bool:
        return self.crossing is not None

    @property
    def is_touching(self) -> bool:
        return self.vertex_contacts > 0 or self.collinear_overlaps > 0

    @property
    def is_enclosed(self) -> bool:
        return self.a_inside_b or self.b_inside_a

    @property
    def relationship(self) -> Relationship:
        """Fold the evidence into a label, first match wins."""
        if self.is_intersecting:
            return Relationship.INTERSECTING
        if self.is_touching:
            return Relationship.TOUCHING
        if self.is_enclosed:
            return Relationship.DISJOINT_ENCLOSED
        return Relationship.DISJOINT_OUTSIDE


class PolygonClassifier:
    """Classifies the relationship between pairs of polygons.

    Stateless apart from the comparison tolerance, so one instance can be
    reused for any number of pairs.
    """

    def __init__(self, epsilon: float = EPSILON) -> None:
        self.epsilon = epsilon

    def classify(self, first: Polygon, second: Polygon) -> Relationship:
        """Classify the relationship between two polygons.

        Args:
            first: First polygon
            second: Second polygon

        Returns:
            The relationship label
        """
        return self.gather(first, second).relationship

    def gather(self, first: Polygon, second: Polygon) -> ClassificationEvidence:
        """Collect the boundary and containment evidence for a pair.

        Args:
            first: First polygon
            second: Second polygon

        Returns:
            Evidence from which the relationship is derived
        """
        first_edges = first.edges()
        second_edges = second.edges()
        evidence = ClassificationEvidence()

        evidence.vertex_contacts = self._count_vertex_contacts(
            first_edges, second.vertices
        ) + self._count_vertex_contacts(second_edges, first.vertices)
        evidence.collinear_overlaps = self._count_collinear_overlaps(first_edges, second_edges)
        evidence.crossing = self._find_crossing(first_edges, second_edges)

        if not evidence.is_intersecting and not evidence.is_touching:
            evidence.a_inside_b = self._all_inside(first.vertices, second)
            evidence.b_inside_a = self._all_inside(second.vertices, first)

        logger.debug(
            "Evidence: vertex_contacts=%d collinear_overlaps=%d crossing=%s "
            "a_inside_b=%s b_inside_a=%s",
            evidence.vertex_contacts,
            evidence.collinear_overlaps,
            evidence.crossing,
            evidence.a_inside_b,
            evidence.b_inside_a,
        )
        return evidence

    def _count_vertex_contacts(
        self, edges: list[LineSegment], vertices: tuple[Point, ...]
    ) -> int:
        return sum(
            1 for edge in edges for vertex in vertices if edge.contains(vertex, self.epsilon)
        )

    def _count_collinear_overlaps(
        self, first_edges: list[LineSegment], second_edges: list[LineSegment]
    ) -> int:
        return sum(
            1
            for edge1 in first_edges
            for edge2 in second_edges
            if self._share_line(edge1, edge2) and edges_overlap(edge1, edge2)
        )

    def _share_line(self, edge1: LineSegment, edge2: LineSegment) -> bool:
        # Residuals scale with the reference edge length; either edge may supply the line
        return are_collinear(edge1, edge2, self.epsilon) or are_collinear(
            edge2, edge1, self.epsilon
        )

    def _find_crossing(
        self, first_edges: list[LineSegment], second_edges: list[LineSegment]
    ) -> Point | None:
        # Crossings at an endpoint of either edge are contacts, not crossings
        for edge1 in first_edges:
            for edge2 in second_edges:
                point = edge1.intersection(edge2, self.epsilon)
                if point is None:
                    continue
                if edge1.has_endpoint(point, self.epsilon) or edge2.has_endpoint(
                    point, self.epsilon
                ):
                    continue
                logger.debug("Interior crossing at %s between %s and %s", point, edge1, edge2)
                return point
        return None

    def _all_inside(self, vertices: tuple[Point, ...], polygon: Polygon) -> bool:
        return all(polygon.contains(vertex, self.epsilon) for vertex in vertices)


def classify(first: Polygon, second: Polygon, epsilon: float = EPSILON) -> Relationship:
    """Classify the topological relationship between two polygons.

    Args:
        first: First polygon
        second: Second polygon
        epsilon: Tolerance for every coordinate comparison

    Returns:
        One of Intersecting, Touching, Disjoint (Enclosed), Disjoint (Outside)

    Examples:
        >>> a = Polygon.from_coordinates([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> b = Polygon.from_coordinates([(1, 0), (2, 0), (2, 1), (1, 1)])
        >>> classify(a, b).value
        'Touching'
    """
    return PolygonClassifier(epsilon).classify(first, second)
