"""Unit tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from polyrelate import __version__
from polyrelate.cli import app

runner = CliRunner()

UNIT_SQUARE = "0,0 1,0 1,1 0,1"
NEIGHBOUR_SQUARE = "1,0 2,0 2,1 1,1"


class TestClassifyCommand:
    """Tests for the classify command."""

    def test_touching(self):
        """Two squares sharing an edge are reported as touching."""
        result = runner.invoke(app, ["classify", UNIT_SQUARE, NEIGHBOUR_SQUARE])
        assert result.exit_code == 0
        assert "Relationship: Touching" in result.output
        assert "Polygon: (0, 0) (1, 0) (1, 1) (0, 1)" in result.output

    def test_quiet(self):
        """Quiet mode prints only the relationship."""
        result = runner.invoke(
            app, ["classify", UNIT_SQUARE, "10,10 11,10 11,11 10,11", "--quiet"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "Relationship: Disjoint (Outside)"

    def test_no_polygons(self):
        """Polygons can be left out of the output."""
        result = runner.invoke(app, ["classify", UNIT_SQUARE, NEIGHBOUR_SQUARE, "--no-polygons"])
        assert result.exit_code == 0
        assert "Polygon:" not in result.output

    def test_json(self):
        """JSON output carries the label and both polygons."""
        result = runner.invoke(
            app, ["classify", "0,0 4,0 4,4 0,4", "2,-2 2,6 6,2", "--json"]
        )
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["relationship"] == "Intersecting"
        assert payload["first"]["vertices"][1] == [4.0, 0.0]

    def test_files(self, tmp_path: Path):
        """Polygons can be read from files."""
        outer = tmp_path / "outer.txt"
        inner = tmp_path / "inner.json"
        outer.write_text("-4,-4 4,-4 4,4 -4,4", encoding="utf-8")
        inner.write_text("[[-1, -1], [1, -1], [1, 1], [-1, 1]]", encoding="utf-8")

        result = runner.invoke(app, ["classify", str(outer), str(inner), "-q"])

        assert result.exit_code == 0
        assert "Disjoint (Enclosed)" in result.output

    def test_epsilon(self):
        """A looser tolerance changes a near miss into a touch."""
        args = ["classify", "0,0 4,0 0,4", "2.01,2.01 4,4 2,5", "-q"]
        assert "Disjoint (Outside)" in runner.invoke(app, args).output
        assert "Touching" in runner.invoke(app, [*args, "--epsilon", "0.1"]).output

    def test_zero_epsilon_rejected(self):
        """A zero tolerance fails validation."""
        result = runner.invoke(app, ["classify", UNIT_SQUARE, NEIGHBOUR_SQUARE, "-e", "0"])
        assert result.exit_code == 1
        assert "Invalid options" in result.output

    def test_unknown_log_level_rejected(self):
        """An unknown log level fails validation instead of crashing."""
        result = runner.invoke(
            app, ["classify", UNIT_SQUARE, NEIGHBOUR_SQUARE, "--log-level", "LOUD"]
        )
        assert result.exit_code == 1
        assert "Invalid options" in result.output

    def test_log_level_any_case(self):
        """Log level names are accepted in lower case."""
        result = runner.invoke(
            app, ["classify", UNIT_SQUARE, NEIGHBOUR_SQUARE, "-q", "--log-level", "error"]
        )
        assert result.exit_code == 0
        assert "Touching" in result.output

    def test_bad_vertices(self):
        """Malformed vertex lists exit with an error."""
        result = runner.invoke(app, ["classify", UNIT_SQUARE, "0,0 1,1"])
        assert result.exit_code == 1
        assert "Could not read polygon" in result.output

    def test_log_file(self, tmp_path: Path):
        """A log file receives the classification record."""
        log_file = tmp_path / "run.log"
        result = runner.invoke(
            app,
            ["classify", UNIT_SQUARE, NEIGHBOUR_SQUARE, "-q", "--log-file", str(log_file)],
        )
        assert result.exit_code == 0
        assert "Pair classified" in log_file.read_text(encoding="utf-8")


class TestBatchCommand:
    """Tests for the batch command."""

    @pytest.fixture
    def cases_file(self, tmp_path: Path) -> Path:
        path = tmp_path / "cases.json"
        path.write_text(
            json.dumps(
                [
                    {"name": "shared-edge", "a": [[0, 0], [1, 0], [1, 1], [0, 1]],
                     "b": [[1, 0], [2, 0], [2, 1], [1, 1]]},
                    {"name": "far", "a": [[0, 0], [1, 0], [1, 1], [0, 1]],
                     "b": [[10, 10], [11, 10], [11, 11], [10, 11]]},
                ]
            ),
            encoding="utf-8",
        )
        return path

    def test_table(self, cases_file: Path):
        """Every case appears with its label."""
        result = runner.invoke(app, ["batch", str(cases_file)])
        assert result.exit_code == 0
        assert "shared-edge" in result.output
        assert "Touching" in result.output
        assert "Disjoint (Outside)" in result.output
        assert "2 pairs" in result.output

    def test_json(self, cases_file: Path):
        """JSON output lists results in file order."""
        result = runner.invoke(app, ["batch", str(cases_file), "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "results": [
                {"name": "shared-edge", "relationship": "Touching"},
                {"name": "far", "relationship": "Disjoint (Outside)"},
            ]
        }

    def test_missing_file(self, tmp_path: Path):
        """A missing cases file exits with an error."""
        result = runner.invoke(app, ["batch", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "file not found" in result.output


class TestDemoAndVersion:
    """Tests for the demo command and version flag."""

    def test_demo(self):
        """The reference ring sits inside the square."""
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0
        assert "Polygon: (4, 4) (4, -4) (-4, -4) (-4, 4)" in result.output
        assert "Relationship: Disjoint (Enclosed)" in result.output

    def test_version(self):
        """The version flag prints the version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
