"""Core classification algorithm for polyrelate.

Key functions:
- classify: Classify the relationship between two polygons
- are_collinear: Test whether two segments share a supporting line
- edges_overlap: Test whether two collinear segments overlap

Key classes:
- PolygonClassifier: Reusable classifier bound to a tolerance
- ClassificationEvidence: Contacts, overlaps and crossings found for a pair
"""

from polyrelate.core.classifier import ClassificationEvidence, PolygonClassifier, classify
from polyrelate.core.predicates import are_collinear, edges_overlap

__all__ = [
    "ClassificationEvidence",
    "PolygonClassifier",
    "are_collinear",
    "classify",
    "edges_overlap",
]
