"""CLI entry point for EulerTrail."""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from eulertrail.core.exceptions import EulerTrailError
from eulertrail.core.graph import BacktrackSolver, IncidenceGraph, SearchState, Solution
from eulertrail.core.graph.analysis import classify, degrees, is_connected, odd_vertices
from eulertrail.core.graph.base import Edge, Vertex
from eulertrail.core.graph.loader import load_from_json
from eulertrail.core.graph.samples import DEFAULT_SAMPLE, SAMPLES, get_sample
from eulertrail.core.models import SearchMode

app = typer.Typer(
    name="eulertrail",
    help="Enumerate Euler trails and circuits of small undirected multigraphs.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

GraphFileArg = Annotated[
    Path | None, typer.Argument(help="JSON graph file (defaults to a sample graph)")
]
SampleOpt = Annotated[
    str | None, typer.Option("--sample", "-s", help=f"Sample graph: {', '.join(SAMPLES)}")
]
JsonOpt = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


class ConsoleObserver:
    """Prints search events with rich markup."""

    def __init__(self, out: Console) -> None:
        self._out = out

    def on_start(self, vertex: Vertex) -> None:
        self._out.print(f"Starting with vertex [cyan]{escape(str(vertex))}[/]")

    def on_dead_end(self, state: SearchState) -> None:
        self._out.print(
            f"[yellow]Dead end: cannot exit vertex {escape(str(state.current))}.[/] "
            f"[dim]{escape(str(state))}[/]"
        )

    def on_solution(self, solution: Solution) -> None:
        self._out.print(f"[green]Solution found: {escape(str(solution))}[/]")

    def on_backtrack(self, state: SearchState, edge: Edge, found: bool) -> None:
        if not found:
            self._out.print(
                f"[yellow]Backtracking over {escape(str(edge))}...[/] [dim]{escape(str(state))}[/]"
            )


def get_graph(graph_file: Path | None, sample: str | None, validate: bool = True) -> IncidenceGraph:
    """Load the graph from a file, or fall back to a sample."""
    if graph_file is not None:
        return load_from_json(graph_file, validate=validate)
    return get_sample(sample or DEFAULT_SAMPLE)


def _fail(error: EulerTrailError) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    return typer.Exit(code=1)


@app.command()
def solve(
    graph_file: GraphFileArg = None,
    sample: SampleOpt = None,
    mode: Annotated[
        SearchMode, typer.Option("--mode", "-m", help="path: any Euler trail, circuit: closed only")
    ] = SearchMode.ANY_PATH,
    trace: Annotated[bool, typer.Option("--trace", "-t", help="Print search events")] = False,
    limit: Annotated[
        int | None, typer.Option("--limit", "-l", min=1, help="Stop after this many solutions")
    ] = None,
    no_validate: Annotated[
        bool, typer.Option("--no-validate", help="Skip the two-endpoints-per-edge check")
    ] = False,
    output_json: JsonOpt = False,
) -> None:
    """Find every Euler trail or circuit of a graph."""
    try:
        graph = get_graph(graph_file, sample, validate=not no_validate)
        observer = ConsoleObserver(err_console if output_json else console) if trace else None
        solver = BacktrackSolver(graph, observer=observer, max_solutions=limit)
        solutions = solver.find_paths(mode)
    except EulerTrailError as e:
        raise _fail(e) from e

    if output_json:
        result = {
            "mode": mode.value,
            "solutions": [str(s) for s in solutions],
            "paths": [
                {
                    "vertices": [str(v) for v in s.vertices],
                    "edges": [str(e) for e in s.edges],
                }
                for s in solutions
            ],
            "stats": solver.stats.as_dict(),
        }
        print(json.dumps(result))
        return

    console.print()
    if solutions:
        console.print("The following solutions found:")
        for solution in solutions:
            console.print(escape(str(solution)))
    else:
        console.print("[yellow]No solutions found[/]")

    stats = solver.stats
    console.print(
        f"\n[dim]Solutions: {stats.solutions} | Dead ends: {stats.dead_ends} | "
        f"Backtracks: {stats.backtracks}[/]"
    )
    if stats.stopped:
        console.print(f"[dim]Stopped early after {stats.solutions} solutions[/]")


@app.command()
def check(
    graph_file: GraphFileArg = None,
    sample: SampleOpt = None,
    output_json: JsonOpt = False,
) -> None:
    """Show degrees, odd vertices and which Euler traversal a graph admits."""
    try:
        graph = get_graph(graph_file, sample)
        degree_map = degrees(graph)
        odd = odd_vertices(graph)
        connected = is_connected(graph)
        kind = classify(graph)
    except EulerTrailError as e:
        raise _fail(e) from e

    if output_json:
        result = {
            "vertices": graph.num_vertices,
            "edges": graph.edge_count(),
            "degrees": {str(v): d for v, d in degree_map.items()},
            "odd_vertices": [str(v) for v in odd],
            "connected": connected,
            "euler": kind.value,
        }
        print(json.dumps(result))
        return

    console.print(f"Vertices: {graph.num_vertices}")
    console.print(f"Edges: {graph.edge_count()}")
    for vertex, degree in degree_map.items():
        color = "yellow" if degree % 2 else "green"
        console.print(f"  [cyan]{escape(str(vertex))}[/] degree [{color}]{degree}[/]")
    console.print(f"Odd vertices: {', '.join(escape(str(v)) for v in odd) or '-'}")
    console.print(f"Connected: {'yes' if connected else 'no'}")
    console.print(f"Euler: [bold]{kind.value}[/]")


@app.command()
def samples(output_json: JsonOpt = False) -> None:
    """List the built-in sample graphs."""
    graphs = {name: get_sample(name) for name in SAMPLES}

    if output_json:
        result = [
            {
                "name": name,
                "vertices": graph.num_vertices,
                "edges": graph.edge_count(),
                "euler": classify(graph).value,
                "incidence": {str(v): [str(e) for e in es] for v, es in graph.to_dict().items()},
            }
            for name, graph in graphs.items()
        ]
        print(json.dumps(result))
        return

    for name, graph in graphs.items():
        marker = " [dim](default)[/]" if name == DEFAULT_SAMPLE else ""
        console.print(f"[cyan]{name}[/]{marker}")
        console.print(
            f"  {graph.num_vertices} vertices, {graph.edge_count()} edges, "
            f"euler: {classify(graph).value}"
        )


if __name__ == "__main__":
    app()
