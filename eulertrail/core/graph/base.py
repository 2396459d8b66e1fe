"""Core IncidenceGraph class: vertex -> ordered incident edges."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping

from eulertrail.core.exceptions import (
    AmbiguousEdgeError,
    DanglingEdgeError,
    InvalidGraphError,
    UnknownVertexError,
)

Vertex = Hashable
Edge = Hashable


class IncidenceGraph:
    """Undirected multigraph given by its incidence lists.

    Vertex order and the order of each incidence list are kept exactly as
    supplied; the solver explores in that order.
    """

    __slots__ = ("_incidence", "_edges", "_endpoints")

    def __init__(
        self, incidence: Mapping[Vertex, Iterable[Edge]], validate: bool = True
    ) -> None:
        self._incidence: dict[Vertex, tuple[Edge, ...]] = {
            vertex: tuple(edges) for vertex, edges in incidence.items()
        }
        self._endpoints: dict[Edge, list[Vertex]] = {}

        for vertex, edges in self._incidence.items():
            for edge in edges:
                owners = self._endpoints.setdefault(edge, [])
                if not owners or owners[-1] != vertex:
                    owners.append(vertex)
                elif validate:
                    raise InvalidGraphError(
                        f"Edge {edge!r} is listed more than once at vertex {vertex!r}"
                    )

        self._edges: tuple[Edge, ...] = tuple(self._endpoints)
        if not self._edges:
            raise InvalidGraphError("Graph has no edges")

        if validate:
            for edge, owners in self._endpoints.items():
                if len(owners) != 2:
                    raise InvalidGraphError(
                        f"Edge {edge!r} is incident to {len(owners)} vertices, expected 2"
                    )

    @classmethod
    def build(
        cls, incidence: Mapping[Vertex, Iterable[Edge]], validate: bool = True
    ) -> IncidenceGraph:
        """Build a graph from an incidence mapping."""
        return cls(incidence, validate=validate)

    def edge_count(self) -> int:
        """Number of distinct edges. O(1)."""
        return len(self._edges)

    def incident_edges(self, vertex: Vertex) -> tuple[Edge, ...]:
        """Edges touching vertex, in original order. O(1)."""
        try:
            return self._incidence[vertex]
        except KeyError:
            raise UnknownVertexError(f"Vertex {vertex!r} not found") from None

    def other_endpoint(self, edge: Edge, excluding: Vertex) -> Vertex:
        """The single vertex other than excluding that edge touches."""
        candidates = [v for v in self._endpoints.get(edge, ()) if v != excluding]
        if not candidates:
            raise DanglingEdgeError(
                f"Edge {edge!r} has no endpoint other than {excluding!r}"
            )
        if len(candidates) > 1:
            raise AmbiguousEdgeError(
                f"Edge {edge!r} has several endpoints other than {excluding!r}: "
                f"{', '.join(repr(v) for v in candidates)}"
            )
        return candidates[0]

    def has_vertex(self, vertex: Vertex) -> bool:
        return vertex in self._incidence

    def degree(self, vertex: Vertex) -> int:
        """Number of incident edges. O(1)."""
        return len(self.incident_edges(vertex))

    def to_dict(self) -> dict[Vertex, list[Edge]]:
        """Incidence mapping as plain lists."""
        return {vertex: list(edges) for vertex, edges in self._incidence.items()}

    @property
    def vertices(self) -> tuple[Vertex, ...]:
        return tuple(self._incidence)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._edges

    @property
    def num_vertices(self) -> int:
        return len(self._incidence)

    def __repr__(self) -> str:
        return f"IncidenceGraph(vertices={self.num_vertices}, edges={self.edge_count()})"
