"""Graph analysis: degrees, parity, connectivity, Euler classification.

These helpers are informational. The solver never consults them; it
finds out that a graph has no solutions by exhausting the search.
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eulertrail.core.graph.base import IncidenceGraph, Vertex


class EulerClass(Enum):
    """What kind of Euler traversal a graph admits."""

    CIRCUIT = "circuit"
    TRAIL = "trail"
    NONE = "none"


def degrees(graph: IncidenceGraph) -> dict[Vertex, int]:
    """Degree of every vertex, in graph order. O(V)."""
    return {v: graph.degree(v) for v in graph.vertices}


def odd_vertices(graph: IncidenceGraph) -> list[Vertex]:
    """Vertices with odd degree. O(V)."""
    return [v for v, d in degrees(graph).items() if d % 2]


def is_connected(graph: IncidenceGraph) -> bool:
    """Check that all non-isolated vertices share one component using BFS. O(V + E)."""
    active = [v for v in graph.vertices if graph.degree(v)]
    if not active:
        return True

    visited: set[Vertex] = {active[0]}
    queue: deque[Vertex] = deque([active[0]])

    while queue:
        vertex = queue.popleft()
        for edge in graph.incident_edges(vertex):
            neighbor = graph.other_endpoint(edge, vertex)
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return all(v in visited for v in active)


def classify(graph: IncidenceGraph) -> EulerClass:
    """Euler classification by the degree-parity theorem."""
    if not is_connected(graph):
        return EulerClass.NONE
    odd = len(odd_vertices(graph))
    if odd == 0:
        return EulerClass.CIRCUIT
    if odd == 2:
        return EulerClass.TRAIL
    return EulerClass.NONE
