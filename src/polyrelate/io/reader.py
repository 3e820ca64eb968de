"""Reading polygons from inline text and files.

Vertex lists are accepted in two notations:

- JSON: ``[[0, 0], [1, 0], [1, 1]]`` or ``{"vertices": [[0, 0], ...]}``
- Plain text: ``"0,0 1,0 1,1"``, tokens separated by whitespace or ``;``
"""

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from polyrelate.domain import Polygon
from polyrelate.exceptions import GeometryError, PolygonLoadError, VertexParseError

_TOKEN_SEPARATOR = re.compile(r"[\s;]+")


@dataclass(frozen=True)
class PolygonPair:
    """A named pair of polygons to classify.

    Attributes:
        name: Label used in output and logs
        first: First polygon
        second: Second polygon
    """

    name: str
    first: Polygon
    second: Polygon


def _coerce_pairs(data: Any, source: str) -> list[tuple[float, float]]:
    if isinstance(data, dict):
        if "vertices" not in data:
            raise VertexParseError(source, "object has no 'vertices' key")
        data = data["vertices"]

    if not isinstance(data, list):
        raise VertexParseError(source, "expected a list of [x, y] pairs")

    pairs = []
    for index, item in enumerate(data):
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            raise VertexParseError(source, f"vertex {index} is not an [x, y] pair")
        try:
            pairs.append((float(item[0]), float(item[1])))
        except (TypeError, ValueError, OverflowError) as e:
            raise VertexParseError(source, f"vertex {index}: {e}") from e
    return pairs


def parse_vertices(text: str, source: str | None = None) -> list[tuple[float, float]]:
    """Parse a vertex list from JSON or ``x,y`` text.

    Args:
        text: Vertex list in either notation
        source: Name used in error messages (defaults to the text itself)

    Returns:
        List of (x, y) coordinate pairs

    Raises:
        VertexParseError: If the text is in neither notation

    Examples:
        >>> parse_vertices("0,0 1,0; 1,1")
        [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]
        >>> parse_vertices('{"vertices": [[0, 0], [2, 0], [2, 2]]}')
        [(0.0, 0.0), (2.0, 0.0), (2.0, 2.0)]
    """
    source = source if source is not None else text
    stripped = text.strip()
    if not stripped:
        raise VertexParseError(source, "no vertices given")

    if stripped[0] in "[{":
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError as e:
            raise VertexParseError(source, f"invalid JSON: {e.msg}") from e
        return _coerce_pairs(data, source)

    pairs = []
    for token in _TOKEN_SEPARATOR.split(stripped):
        parts = token.split(",")
        if len(parts) != 2:
            raise VertexParseError(source, f"'{token}' is not an x,y pair")
        try:
            pairs.append((float(parts[0]), float(parts[1])))
        except ValueError as e:
            raise VertexParseError(source, f"'{token}': {e}") from e
    return pairs


def _build_polygon(pairs: list[tuple[float, float]], source: str) -> Polygon:
    try:
        return Polygon.from_coordinates(pairs)
    except GeometryError as e:
        raise VertexParseError(source, str(e)) from e


def load_polygon(source: str | Path) -> Polygon:
    """Load a polygon from a file path or inline vertex text.

    If ``source`` names an existing file its contents are parsed, otherwise
    ``source`` itself is parsed as a vertex list.

    Args:
        source: File path or inline vertex list

    Returns:
        Polygon instance

    Raises:
        PolygonLoadError: If the file exists but cannot be read
        VertexParseError: If the vertex list is malformed or degenerate
    """
    path = Path(source)
    try:
        is_file = path.is_file()
    except OSError:
        is_file = False

    if is_file:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise PolygonLoadError(str(path), str(e)) from e
        return _build_polygon(parse_vertices(text, source=str(path)), str(path))

    text = str(source)
    return _build_polygon(parse_vertices(text), text)


def load_cases(path: Path) -> list[PolygonPair]:
    """Load a batch of polygon pairs from a JSON file.

    The file holds a list of objects with ``a`` and ``b`` vertex lists and an
    optional ``name``. Unnamed cases are numbered from 1.

    Args:
        path: Path to the cases file

    Returns:
        List of polygon pairs in file order

    Raises:
        PolygonLoadError: If the file is missing or is not a list of cases
        VertexParseError: If a vertex list is malformed or degenerate
    """
    if not path.exists():
        raise PolygonLoadError(str(path), "file not found")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise PolygonLoadError(str(path), str(e)) from e
    except json.JSONDecodeError as e:
        raise PolygonLoadError(str(path), f"invalid JSON: {e.msg}") from e

    if not isinstance(data, list):
        raise PolygonLoadError(str(path), "expected a list of cases")

    cases = []
    for index, entry in enumerate(data, start=1):
        if not isinstance(entry, dict) or "a" not in entry or "b" not in entry:
            raise PolygonLoadError(str(path), f"case {index} needs 'a' and 'b' vertex lists")
        name = str(entry.get("name", f"case {index}"))
        first = _build_polygon(_coerce_pairs(entry["a"], f"{name}.a"), f"{name}.a")
        second = _build_polygon(_coerce_pairs(entry["b"], f"{name}.b"), f"{name}.b")
        cases.append(PolygonPair(name=name, first=first, second=second))
    return cases
