"""Predicates for edges that lie along the same infinite line.

Line intersection reports nothing for coincident lines, so overlapping
collinear edges are caught here instead.
"""

from polyrelate.domain import EPSILON, LineSegment


def _is_between(bound1: float, bound2: float, value: float) -> bool:
    return min(bound1, bound2) <= value <= max(bound1, bound2)


def are_collinear(seg1: LineSegment, seg2: LineSegment, epsilon: float = EPSILON) -> bool:
    """Check whether both endpoints of seg2 lie on the line through seg1.

    Args:
        seg1: Segment defining the reference line
        seg2: Segment whose endpoints are tested

    Returns:
        True if the supporting lines coincide
    """
    line = seg1.line()
    return line.contains(seg2.p1, epsilon) and line.contains(seg2.p2, epsilon)


def edges_overlap(seg1: LineSegment, seg2: LineSegment) -> bool:
    """Check whether two collinear segments overlap.

    Tests 1-D interval overlap separately on the x and y axes: on each axis
    some endpoint of one segment must fall within the other's range. The
    result is only meaningful when ``are_collinear`` already holds, and for
    slanted segments it is a coarse test that can accept touching ranges.

    Args:
        seg1: First segment
        seg2: Second segment, collinear with the first

    Returns:
        True if the ranges overlap on both axes
    """
    x_overlap = (
        _is_between(seg1.p1.x, seg1.p2.x, seg2.p1.x)
        or _is_between(seg1.p1.x, seg1.p2.x, seg2.p2.x)
        or _is_between(seg2.p1.x, seg2.p2.x, seg1.p1.x)
        or _is_between(seg2.p1.x, seg2.p2.x, seg1.p2.x)
    )
    y_overlap = (
        _is_between(seg1.p1.y, seg1.p2.y, seg2.p1.y)
        or _is_between(seg1.p1.y, seg1.p2.y, seg2.p2.y)
        or _is_between(seg2.p1.y, seg2.p2.y, seg1.p1.y)
        or _is_between(seg2.p1.y, seg2.p2.y, seg1.p2.y)
    )
    return x_overlap and y_overlap
