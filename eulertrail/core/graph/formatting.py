"""Render walks as alternating vertex/edge strings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eulertrail.core.graph.base import Edge, IncidenceGraph, Vertex

SEPARATOR = " "


def replay(initial: Vertex, edges: Iterable[Edge], graph: IncidenceGraph) -> tuple[Vertex, ...]:
    """Vertices visited when walking edges from initial. O(len(edges))."""
    vertices = [initial]
    for edge in edges:
        vertices.append(graph.other_endpoint(edge, vertices[-1]))
    return tuple(vertices)


def format_path(vertices: Sequence[Vertex], edges: Sequence[Edge]) -> str:
    """Interleave vertices and edges: "a e1 b e2 c"."""
    if len(vertices) != len(edges) + 1:
        raise ValueError(
            f"A walk over {len(edges)} edges needs {len(edges) + 1} vertices, got {len(vertices)}"
        )
    tokens = [str(vertices[0])]
    for edge, vertex in zip(edges, vertices[1:]):
        tokens.append(str(edge))
        tokens.append(str(vertex))
    return SEPARATOR.join(tokens)


def format_solution(initial: Vertex, edges: Sequence[Edge], graph: IncidenceGraph) -> str:
    """Format an edge sequence by replaying it from initial.

    Depends only on (initial, edges) and the graph, so recorded
    solutions can be formatted after the search has finished.
    """
    return format_path(replay(initial, edges, graph), edges)
