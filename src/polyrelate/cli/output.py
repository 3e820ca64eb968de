"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

import json

from rich.console import Console
from rich.table import Table
from rich.text import Text

from polyrelate.domain import Polygon, Relationship
from polyrelate.utils import ClassificationStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

RELATIONSHIP_STYLES = {
    Relationship.INTERSECTING: "bold red",
    Relationship.TOUCHING: "bold yellow",
    Relationship.DISJOINT_ENCLOSED: "bold cyan",
    Relationship.DISJOINT_OUTSIDE: "bold green",
}


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Polyrelate[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_polygon(polygon: Polygon) -> None:
    """Print a polygon's vertices.

    Args:
        polygon: Polygon to print
    """
    # Text keeps brackets in coordinates from being read as markup
    console.print(Text(f"  {polygon}"))


def print_relationship(relationship: Relationship) -> None:
    """Print the classification result.

    Args:
        relationship: Relationship label to print
    """
    line = Text("Relationship: ")
    line.append(relationship.value, style=RELATIONSHIP_STYLES[relationship])
    console.print(line)


def print_json(payload: dict) -> None:
    """Print a JSON document without rich highlighting."""
    console.print(
        json.dumps(payload), markup=False, emoji=False, highlight=False, soft_wrap=True
    )


def print_batch_results(rows: list[tuple[str, Relationship]]) -> None:
    """Print batch classification results as a table.

    Args:
        rows: Tuples of (pair name, relationship)
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("Pair")
    table.add_column("Relationship")

    for name, relationship in rows:
        table.add_row(name, Text(relationship.value, style=RELATIONSHIP_STYLES[relationship]))

    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_summary(stats: ClassificationStats) -> None:
    """Print batch summary with per-label counts.

    Args:
        stats: Statistics collected during the run
    """
    time_str = _format_time(stats.duration_seconds)
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    console.print(f"  {stats.classified_count} pairs")
    for relationship in Relationship:
        count = stats.by_relationship.get(relationship.value, 0)
        if count:
            console.print(f"  {relationship.value:<22}{count}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] ", end="")
    console.print(Text(message))
    if details:
        console.print(Text(f"  {details}"))
