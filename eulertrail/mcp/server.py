"""MCP server implementation for EulerTrail."""

from __future__ import annotations

import json
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from eulertrail.core.exceptions import EulerTrailError
from eulertrail.core.graph import BacktrackSolver, IncidenceGraph, RecordingObserver, Solution
from eulertrail.core.graph.analysis import classify, degrees, is_connected, odd_vertices
from eulertrail.core.graph.loader import load_from_data
from eulertrail.core.graph.samples import DEFAULT_SAMPLE, SAMPLES, get_sample
from eulertrail.core.models import SearchMode

server = Server("eulertrail")

_DEFAULT_MAX_SOLUTIONS = 1000

_GRAPH_PROPERTIES: dict[str, Any] = {
    "sample": {
        "type": "string",
        "enum": list(SAMPLES),
        "description": "Name of a built-in sample graph (used when 'incidence' is absent)",
    },
    "incidence": {
        "type": "object",
        "description": (
            "Graph as vertex -> list of incident edge ids, e.g. "
            '{"a": ["e1", "e2"], "b": ["e1", "e2"]}'
        ),
        "additionalProperties": {"type": "array", "items": {"type": "string"}},
    },
}


def _get_graph(arguments: dict[str, Any]) -> IncidenceGraph:
    """Build the graph named or described by tool arguments."""
    if "incidence" in arguments:
        return load_from_data({"incidence": arguments["incidence"]})
    return get_sample(arguments.get("sample", DEFAULT_SAMPLE))


def _solution_to_dict(solution: Solution) -> dict[str, Any]:
    """Convert a Solution to a JSON-serializable dict."""
    return {
        "path": str(solution),
        "vertices": [str(v) for v in solution.vertices],
        "edges": [str(e) for e in solution.edges],
        "is_circuit": solution.is_circuit,
    }


@server.list_tools()  # type: ignore[no-untyped-call, untyped-decorator]
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="euler_solve",
            description=(
                "Enumerate every Euler trail (mode 'path') or Euler circuit (mode 'circuit') "
                "of an undirected multigraph, trying every vertex as the start. "
                "Rotations and reversals of the same circuit are listed separately."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    **_GRAPH_PROPERTIES,
                    "mode": {
                        "type": "string",
                        "enum": [m.value for m in SearchMode],
                        "description": "Search mode (default: path)",
                        "default": SearchMode.ANY_PATH.value,
                    },
                    "max_solutions": {
                        "type": "integer",
                        "minimum": 1,
                        "description": f"Stop after this many solutions (default: {_DEFAULT_MAX_SOLUTIONS})",
                        "default": _DEFAULT_MAX_SOLUTIONS,
                    },
                    "trace": {
                        "type": "boolean",
                        "description": "Include the search events (start, dead_end, solution, backtrack)",
                        "default": False,
                    },
                },
            },
        ),
        Tool(
            name="euler_check",
            description=(
                "Report vertex degrees, odd-degree vertices, connectivity and whether "
                "a graph admits an Euler circuit, an Euler trail, or neither."
            ),
            inputSchema={
                "type": "object",
                "properties": dict(_GRAPH_PROPERTIES),
            },
        ),
        Tool(
            name="euler_samples",
            description="List the built-in sample graphs with their incidence lists.",
            inputSchema={
                "type": "object",
                "properties": {},
            },
        ),
    ]


@server.call_tool()  # type: ignore[untyped-decorator]
async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "euler_solve":
            result = _handle_solve(
                arguments,
                arguments.get("mode", SearchMode.ANY_PATH.value),
                arguments.get("max_solutions", _DEFAULT_MAX_SOLUTIONS),
                arguments.get("trace", False),
            )
        elif name == "euler_check":
            result = _handle_check(arguments)
        elif name == "euler_samples":
            result = _handle_samples()
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except EulerTrailError as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]
    except Exception as e:
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]


def _handle_solve(
    arguments: dict[str, Any], mode: str, max_solutions: int, trace: bool = False
) -> dict[str, Any]:
    """Handle euler_solve tool."""
    if isinstance(max_solutions, bool) or not isinstance(max_solutions, int) or max_solutions < 1:
        raise ValueError(f"max_solutions must be a positive integer, got {max_solutions!r}")

    graph = _get_graph(arguments)
    observer = RecordingObserver() if trace else None
    solver = BacktrackSolver(graph, observer=observer, max_solutions=max_solutions)
    solutions = solver.find_paths(SearchMode(mode))

    result: dict[str, Any] = {
        "mode": mode,
        "count": len(solutions),
        "solutions": [_solution_to_dict(s) for s in solutions],
        "stats": solver.stats.as_dict(),
    }
    if observer is not None:
        result["events"] = [_event_to_dict(event, payload) for event, payload in observer.events]
    return result


def _event_to_dict(event: str, payload: Any) -> dict[str, Any]:
    """Convert a recorded search event to a JSON-serializable dict."""
    if event == "backtrack":
        edge, walk = payload
        return {"event": event, "edge": str(edge), "walk": walk}
    if event == "solution":
        return {"event": event, "path": payload}
    return {"event": event, "vertex": str(payload)}


def _handle_check(arguments: dict[str, Any]) -> dict[str, Any]:
    """Handle euler_check tool."""
    graph = _get_graph(arguments)
    return {
        "vertices": graph.num_vertices,
        "edges": graph.edge_count(),
        "degrees": {str(v): d for v, d in degrees(graph).items()},
        "odd_vertices": [str(v) for v in odd_vertices(graph)],
        "connected": is_connected(graph),
        "euler": classify(graph).value,
    }


def _handle_samples() -> dict[str, Any]:
    """Handle euler_samples tool."""
    return {
        "default": DEFAULT_SAMPLE,
        "results": [
            {"name": name, "incidence": factory()} for name, factory in SAMPLES.items()
        ],
    }


async def serve() -> None:
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())
