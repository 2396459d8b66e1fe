"""Data models for the backtracking search."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from eulertrail.core.graph.formatting import format_path

if TYPE_CHECKING:
    from eulertrail.core.graph.base import Edge, Vertex


class SearchState:
    """Partial walk for one start vertex.

    The marked-edge set always equals the set of edges on the walk;
    push and pop are exact inverses.
    """

    __slots__ = ("initial", "vertices", "edges", "marked")

    def __init__(self, initial: Vertex) -> None:
        self.initial = initial
        self.vertices: list[Vertex] = [initial]
        self.edges: list[Edge] = []
        self.marked: set[Edge] = set()

    @property
    def current(self) -> Vertex:
        return self.vertices[-1]

    def push(self, edge: Edge, vertex: Vertex) -> None:
        """Traverse edge, arriving at vertex."""
        self.edges.append(edge)
        self.vertices.append(vertex)
        self.marked.add(edge)

    def pop(self) -> Edge:
        """Undo the last push and return its edge."""
        edge = self.edges.pop()
        self.vertices.pop()
        self.marked.discard(edge)
        return edge

    def is_marked(self, edge: Edge) -> bool:
        return edge in self.marked

    def __len__(self) -> int:
        """Edges traversed so far."""
        return len(self.edges)

    def __str__(self) -> str:
        return format_path(self.vertices, self.edges)

    def __repr__(self) -> str:
        return f"SearchState({self})"


@dataclass(frozen=True)
class Solution:
    """A completed Euler trail: vertex, edge, vertex, ..., edge, vertex."""

    vertices: tuple[Vertex, ...]
    edges: tuple[Edge, ...]

    @classmethod
    def from_state(cls, state: SearchState) -> Solution:
        return cls(vertices=tuple(state.vertices), edges=tuple(state.edges))

    @property
    def start(self) -> Vertex:
        return self.vertices[0]

    @property
    def end(self) -> Vertex:
        return self.vertices[-1]

    @property
    def is_circuit(self) -> bool:
        return self.start == self.end

    def steps(self) -> Iterator[tuple[Vertex, Edge, Vertex]]:
        """Yield (from, edge, to) for every traversed edge."""
        for i, edge in enumerate(self.edges):
            yield self.vertices[i], edge, self.vertices[i + 1]

    def __len__(self) -> int:
        return len(self.edges)

    def __str__(self) -> str:
        return format_path(self.vertices, self.edges)
