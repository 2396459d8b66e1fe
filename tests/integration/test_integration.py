"""Integration tests for the CLI and the MCP tool handlers."""

import asyncio
import json
import tempfile
from pathlib import Path

import pytest
from typer.testing import CliRunner

from eulertrail.cli import app
from eulertrail.core.exceptions import InvalidGraphError, UnknownSampleError
from eulertrail.core.graph.samples import SAMPLES, square
from eulertrail.mcp.server import _handle_check, _handle_samples, _handle_solve, call_tool

runner = CliRunner()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as td:
        yield Path(td)


@pytest.fixture
def graph_file(temp_dir: Path) -> Path:
    """Write the square graph as an edge-list JSON file."""
    data = {
        "edges": {
            "n": ["north", "east"],
            "e": ["east", "south"],
            "s": ["south", "west"],
            "w": ["west", "north"],
        }
    }
    file_path = temp_dir / "square.json"
    file_path.write_text(json.dumps(data))
    return file_path


class TestSolveCommand:
    """Tests for `eulertrail solve`."""

    def test_solve_default_sample(self) -> None:
        result = runner.invoke(app, ["solve", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["mode"] == "path"
        assert len(data["solutions"]) == 32
        assert data["solutions"][0] == "a 1 b 2 c 3 d 4 g 5 e 6 f 7 a 8 g 9 b"

    def test_solve_circuit_text(self) -> None:
        result = runner.invoke(app, ["solve", "--sample", "square", "--mode", "circuit"])
        assert result.exit_code == 0
        assert "The following solutions found:" in result.stdout
        assert "a e1 b e2 c e3 d e4 a" in result.stdout

    def test_solve_no_solutions(self) -> None:
        result = runner.invoke(app, ["solve", "--sample", "koenigsberg"])
        assert result.exit_code == 0
        assert "No solutions found" in result.stdout

    def test_solve_json_paths(self) -> None:
        result = runner.invoke(app, ["solve", "-s", "square", "-m", "circuit", "--json"])
        data = json.loads(result.stdout)
        first = data["paths"][0]
        assert first["vertices"] == ["a", "b", "c", "d", "a"]
        assert first["edges"] == ["e1", "e2", "e3", "e4"]
        assert data["stats"]["solutions"] == 8

    def test_solve_limit(self) -> None:
        result = runner.invoke(app, ["solve", "-s", "square", "--limit", "2", "--json"])
        data = json.loads(result.stdout)
        assert len(data["solutions"]) == 2
        assert data["stats"]["stopped"] is True

    def test_solve_trace(self) -> None:
        result = runner.invoke(app, ["solve", "-s", "square", "-m", "circuit", "--trace"])
        assert result.exit_code == 0
        assert "Starting with vertex a" in result.stdout
        assert "Solution found: a e1 b e2 c e3 d e4 a" in result.stdout

    def test_solve_trace_reports_dead_ends(self) -> None:
        result = runner.invoke(app, ["solve", "-s", "two-triangles", "-m", "circuit", "--trace"])
        assert result.exit_code == 0
        assert "Dead end: cannot exit vertex a." in result.stdout

    def test_solve_from_file(self, graph_file: Path) -> None:
        result = runner.invoke(app, ["solve", str(graph_file), "--mode", "circuit", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data["solutions"]) == 8
        assert data["solutions"][0] == "north n east e south s west w north"

    def test_solve_unknown_sample(self) -> None:
        result = runner.invoke(app, ["solve", "--sample", "nope"])
        assert result.exit_code == 1

    def test_solve_invalid_file(self, temp_dir: Path) -> None:
        file_path = temp_dir / "bad.json"
        file_path.write_text(json.dumps({"a": ["x"], "b": ["x"], "c": ["x"]}))

        result = runner.invoke(app, ["solve", str(file_path)])
        assert result.exit_code == 1

    def test_solve_no_validate_surfaces_ambiguity(self, temp_dir: Path) -> None:
        file_path = temp_dir / "bad.json"
        file_path.write_text(json.dumps({"a": ["x"], "b": ["x"], "c": ["x"]}))

        result = runner.invoke(app, ["solve", str(file_path), "--no-validate"])
        assert result.exit_code == 1

    def test_solve_nested_edge_ids(self, temp_dir: Path) -> None:
        file_path = temp_dir / "nested.json"
        file_path.write_text(json.dumps({"a": [["x"]], "b": [["x"]]}))

        result = runner.invoke(app, ["solve", str(file_path)])
        assert result.exit_code == 1
        assert not isinstance(result.exception, TypeError)

    def test_solve_nested_endpoints(self, temp_dir: Path) -> None:
        file_path = temp_dir / "nested.json"
        file_path.write_text(json.dumps({"edges": {"e1": [["a"], "b"]}}))

        result = runner.invoke(app, ["solve", str(file_path)])
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestCheckCommand:
    """Tests for `eulertrail check`."""

    def test_check_json(self) -> None:
        result = runner.invoke(app, ["check", "--sample", "koenigsberg", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["euler"] == "none"
        assert data["odd_vertices"] == ["a", "b", "c", "d"]
        assert data["degrees"]["b"] == 5
        assert data["connected"] is True

    def test_check_text(self) -> None:
        result = runner.invoke(app, ["check", "--sample", "two-odd-vertices"])
        assert result.exit_code == 0
        assert "Euler: trail" in result.stdout

    def test_check_file(self, graph_file: Path) -> None:
        result = runner.invoke(app, ["check", str(graph_file), "--json"])
        data = json.loads(result.stdout)
        assert data["euler"] == "circuit"
        assert data["vertices"] == 4


class TestSamplesCommand:
    """Tests for `eulertrail samples`."""

    def test_samples_json(self) -> None:
        result = runner.invoke(app, ["samples", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [s["name"] for s in data] == list(SAMPLES)
        by_name = {s["name"]: s for s in data}
        assert by_name["square"]["incidence"] == square()

    def test_samples_text(self) -> None:
        result = runner.invoke(app, ["samples"])
        assert result.exit_code == 0
        for name in SAMPLES:
            assert name in result.stdout


class TestMcpHandlers:
    """Tests for the MCP tool handlers."""

    def test_solve_sample(self) -> None:
        result = _handle_solve({"sample": "square"}, "circuit", 1000)
        assert result["count"] == 8
        assert result["solutions"][0]["path"] == "a e1 b e2 c e3 d e4 a"
        assert result["solutions"][0]["is_circuit"] is True

    def test_solve_inline_incidence(self) -> None:
        incidence = {"a": ["p", "q", "r"], "b": ["p", "q", "r"]}
        result = _handle_solve({"incidence": incidence}, "path", 1000)
        assert result["count"] == 12

    def test_solve_respects_max_solutions(self) -> None:
        result = _handle_solve({"sample": "two-odd-vertices"}, "path", 5)
        assert result["count"] == 5
        assert result["stats"]["stopped"] is True

    def test_solve_bad_mode(self) -> None:
        with pytest.raises(ValueError):
            _handle_solve({"sample": "square"}, "zigzag", 10)

    def test_solve_invalid_incidence(self) -> None:
        with pytest.raises(InvalidGraphError):
            _handle_solve({"incidence": {"a": ["x"]}}, "path", 10)

    def test_solve_unknown_sample(self) -> None:
        with pytest.raises(UnknownSampleError):
            _handle_solve({"sample": "nope"}, "path", 10)

    def test_check(self) -> None:
        result = _handle_check({"sample": "two-triangles"})
        assert result["euler"] == "circuit"
        assert result["degrees"]["b"] == 4

    def test_samples(self) -> None:
        result = _handle_samples()
        assert result["default"] == "two-odd-vertices"
        assert len(result["results"]) == len(SAMPLES)

    @pytest.mark.parametrize("max_solutions", [0, -3, "5", 2.5, True])
    def test_solve_rejects_bad_max_solutions(self, max_solutions: object) -> None:
        with pytest.raises(ValueError) as exc_info:
            _handle_solve({"sample": "square"}, "path", max_solutions)  # type: ignore[arg-type]
        assert "positive integer" in str(exc_info.value)

    def test_solve_trace_events(self) -> None:
        result = _handle_solve({"sample": "square"}, "circuit", 1000, trace=True)
        events = result["events"]
        assert events[0] == {"event": "start", "vertex": "a"}
        assert [e["path"] for e in events if e["event"] == "solution"][0] == (
            "a e1 b e2 c e3 d e4 a"
        )
        assert sum(e["event"] == "backtrack" for e in events) == 32

    def test_solve_without_trace_has_no_events(self) -> None:
        result = _handle_solve({"sample": "square"}, "circuit", 1000)
        assert "events" not in result


class TestMcpCallTool:
    """Tests for the MCP tool dispatcher."""

    @staticmethod
    def _call(name: str, arguments: dict) -> dict:
        contents = asyncio.run(call_tool(name, arguments))
        assert len(contents) == 1
        return json.loads(contents[0].text)

    def test_solve(self) -> None:
        data = self._call("euler_solve", {"sample": "square", "mode": "circuit"})
        assert data["count"] == 8

    def test_unknown_sample_is_reported(self) -> None:
        data = self._call("euler_solve", {"sample": "nope"})
        assert "Unknown sample" in data["error"]

    def test_nested_incidence_is_reported(self) -> None:
        data = self._call("euler_check", {"incidence": {"a": [["x"]], "b": [["x"]]}})
        assert "items must be strings or numbers" in data["error"]

    def test_bad_max_solutions_is_reported(self) -> None:
        data = self._call("euler_solve", {"sample": "square", "max_solutions": 0})
        assert "positive integer" in data["error"]

    def test_unknown_tool(self) -> None:
        data = self._call("euler_nope", {})
        assert data == {"error": "Unknown tool: euler_nope"}
