"""CLI application entry point for polyrelate.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer

from polyrelate import __version__
from polyrelate.cli.output import (
    console,
    print_batch_results,
    print_error,
    print_header,
    print_json,
    print_polygon,
    print_relationship,
    print_step,
    print_summary,
)
from polyrelate.config import GeometryConfig, LoggingConfig, OutputConfig, PolyrelateSettings
from polyrelate.core import PolygonClassifier
from polyrelate.domain import EPSILON, Polygon, Relationship
from polyrelate.exceptions import PolygonLoadError, PolyrelateError, VertexParseError
from polyrelate.io import PolygonPair, load_cases, load_polygon
from polyrelate.utils import ClassificationLogger, configure_logging

# Reference pair: an 8x8 square around the origin and a ring inside it
DEMO_PAIR = PolygonPair(
    name="demo",
    first=Polygon.from_coordinates([(4, 4), (4, -4), (-4, -4), (-4, 4)]),
    second=Polygon.from_coordinates([(2, 2), (2, -2), (-2, -2), (2, -2)]),
)

# Create the Typer app
app = typer.Typer(
    name="polyrelate",
    help="Classify the topological relationship between two polygons.",
    add_completion=False,
    no_args_is_help=True,
)

EpsilonOption = Annotated[
    float,
    typer.Option(
        "--epsilon",
        "-e",
        help="Comparison tolerance for coordinates",
        min=0.0,
    ),
]
JsonOption = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Print results as JSON",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Polyrelate[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Classify polygon pairs as Intersecting, Touching or Disjoint."""


def _build_settings(
    epsilon: float,
    json_output: bool,
    show_polygons: bool,
    log_file: Path | None,
    log_level: str,
) -> PolyrelateSettings:
    """Create settings from CLI arguments, reporting validation failures."""
    try:
        return PolyrelateSettings(
            geometry=GeometryConfig(epsilon=epsilon),
            output=OutputConfig(show_polygons=show_polygons, json_output=json_output),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
    except ValueError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1) from None


def _start_logging(settings: PolyrelateSettings, quiet: bool) -> ClassificationLogger:
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    return ClassificationLogger(logger)


def _classify_pair(
    pair: PolygonPair,
    classifier: PolygonClassifier,
    run_logger: ClassificationLogger,
) -> Relationship:
    run_logger.log_pair_start(pair.name, pair.first.vertex_count, pair.second.vertex_count)
    start = time.perf_counter()
    relationship = classifier.classify(pair.first, pair.second)
    run_logger.log_pair_result(pair.name, relationship, (time.perf_counter() - start) * 1000)
    return relationship


def _report_pair(
    pair: PolygonPair,
    relationship: Relationship,
    settings: PolyrelateSettings,
    quiet: bool,
) -> None:
    if settings.output.json_output:
        print_json(
            {
                "relationship": relationship.value,
                "epsilon": settings.geometry.epsilon,
                "first": pair.first.to_dict(),
                "second": pair.second.to_dict(),
            }
        )
        return

    if not quiet:
        print_header(__version__)
        if settings.output.show_polygons:
            print_step("Polygons")
            print_polygon(pair.first)
            print_polygon(pair.second)
            console.print()
    print_relationship(relationship)


def _run_single(pair: PolygonPair, settings: PolyrelateSettings, quiet: bool) -> None:
    run_logger = _start_logging(settings, quiet)
    run_logger.start()
    relationship = _classify_pair(pair, PolygonClassifier(settings.geometry.epsilon), run_logger)
    run_logger.finish()
    _report_pair(pair, relationship, settings, quiet)


@app.command()
def classify(
    first: Annotated[
        str,
        typer.Argument(
            help="First polygon: vertex file or inline list such as '0,0 1,0 1,1'",
            show_default=False,
        ),
    ],
    second: Annotated[
        str,
        typer.Argument(
            help="Second polygon: vertex file or inline list",
            show_default=False,
        ),
    ],
    epsilon: EpsilonOption = EPSILON,
    json_output: JsonOption = False,
    no_polygons: Annotated[
        bool,
        typer.Option(
            "--no-polygons",
            help="Do not print the polygons before the result",
        ),
    ] = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Classify the relationship between two polygons.

    Each polygon is given as a path to a vertex file or as an inline vertex
    list. Vertices are listed in ring order without repeating the first one.

    Example:
        polyrelate classify "0,0 1,0 1,1 0,1" "1,0 2,0 2,1 1,1"

    This prints "Relationship: Touching" since the squares share an edge.
    """
    settings = _build_settings(epsilon, json_output, not no_polygons, log_file, log_level)

    try:
        pair = PolygonPair(name="pair", first=load_polygon(first), second=load_polygon(second))
        _run_single(pair, settings, quiet)
    except VertexParseError as e:
        print_error(f"Could not read polygon: {e.reason}", details=f"Input: {e.source}")
        raise typer.Exit(code=1)
    except PolygonLoadError as e:
        print_error(f"Could not load polygon: {e.reason}", details=f"Source: {e.source}")
        raise typer.Exit(code=1)
    except PolyrelateError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def batch(
    cases_file: Annotated[
        Path,
        typer.Argument(
            help="JSON file with a list of {name, a, b} polygon pairs",
            show_default=False,
        ),
    ],
    epsilon: EpsilonOption = EPSILON,
    json_output: JsonOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Classify every polygon pair listed in a cases file."""
    settings = _build_settings(epsilon, json_output, False, log_file, log_level)

    try:
        cases = load_cases(cases_file)
    except VertexParseError as e:
        print_error(f"Could not read polygon: {e.reason}", details=f"Case: {e.source}")
        raise typer.Exit(code=1)
    except PolygonLoadError as e:
        print_error(f"Could not load cases: {e.reason}", details=f"Source: {e.source}")
        raise typer.Exit(code=1)
    except PolyrelateError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    run_logger = _start_logging(settings, quiet)
    classifier = PolygonClassifier(settings.geometry.epsilon)

    if not quiet and not json_output:
        print_header(__version__)
        print_step(f"Classifying {len(cases)} pairs")

    run_logger.start()
    rows = [(pair.name, _classify_pair(pair, classifier, run_logger)) for pair in cases]
    run_logger.finish()

    if json_output:
        print_json({"results": [{"name": name, "relationship": r.value} for name, r in rows]})
        return

    print_batch_results(rows)
    if not quiet:
        print_summary(run_logger.stats)


@app.command()
def demo(
    epsilon: EpsilonOption = EPSILON,
    json_output: JsonOption = False,
    quiet: QuietOption = False,
) -> None:
    """Classify the built-in reference pair of polygons."""
    settings = _build_settings(epsilon, json_output, True, None, "WARNING")
    _run_single(DEMO_PAIR, settings, quiet)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
