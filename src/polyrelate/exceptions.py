"""Exception hierarchy for Polyrelate."""


class PolyrelateError(Exception):
    """Base exception for all Polyrelate errors."""

    pass


class GeometryError(PolyrelateError):
    """Errors in geometric construction."""

    pass


class InvalidPolygonError(GeometryError, ValueError):
    """Polygon has too few vertices to form a ring."""

    def __init__(self, vertex_count: int) -> None:
        self.vertex_count = vertex_count
        super().__init__(f"Polygon needs at least 3 vertices, got {vertex_count}")


class DegenerateEdgeError(GeometryError, ValueError):
    """Two ring-adjacent vertices coincide, producing a zero-length edge."""

    def __init__(self, index: int, next_index: int) -> None:
        self.index = index
        self.next_index = next_index
        super().__init__(
            f"Vertices {index} and {next_index} coincide; zero-length edges are unsupported"
        )


class InputError(PolyrelateError):
    """Errors related to reading polygon input."""

    pass


class VertexParseError(InputError):
    """Vertex text or JSON could not be parsed."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid vertex list '{source}': {reason}")


class PolygonLoadError(InputError):
    """Error reading a polygon or case file."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load '{source}': {reason}")
