"""Load an IncidenceGraph from mappings, edge lists or JSON files."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from eulertrail.core.exceptions import InvalidGraphError
from eulertrail.core.graph.base import Edge, IncidenceGraph, Vertex

_SCALARS = (str, int, float, bool, type(None))


def load_from_mapping(
    incidence: Mapping[Vertex, Iterable[Edge]], validate: bool = True
) -> IncidenceGraph:
    """Build a graph from vertex -> incident edges."""
    return IncidenceGraph(incidence, validate=validate)


def load_from_edge_list(
    edges: Mapping[Edge, Sequence[Vertex]] | Iterable[tuple[Edge, Vertex, Vertex]],
    validate: bool = True,
) -> IncidenceGraph:
    """Build a graph from edge -> (u, v) or (edge, u, v) triples.

    Vertices appear in first-seen order; each incidence list follows the
    order the edges were given in.
    """
    if isinstance(edges, Mapping):
        triples: Iterable[Sequence[Any]] = ((edge, *ends) for edge, ends in edges.items())
    else:
        triples = edges

    incidence: dict[Vertex, list[Edge]] = {}
    for triple in triples:
        if len(triple) != 3:
            raise InvalidGraphError(f"Expected (edge, u, v), got {tuple(triple)!r}")
        edge, u, v = triple
        if u == v:
            raise InvalidGraphError(f"Edge {edge!r} is a self-loop at {u!r}")
        incidence.setdefault(u, []).append(edge)
        incidence.setdefault(v, []).append(edge)

    return IncidenceGraph(incidence, validate=validate)


def load_from_json(path: Path, validate: bool = True) -> IncidenceGraph:
    """Load a graph from a JSON file.

    Accepted shapes:
        {"incidence": {"a": ["e1", "e2"], ...}}
        {"edges": {"e1": ["a", "b"], ...}}
        {"a": ["e1", "e2"], ...}
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidGraphError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InvalidGraphError(f"Invalid JSON in {path}: {e}") from e

    return load_from_data(data, validate=validate)


def load_from_data(data: Any, validate: bool = True) -> IncidenceGraph:
    """Build a graph from decoded JSON data (see load_from_json)."""
    if not isinstance(data, dict):
        raise InvalidGraphError("Graph description must be a JSON object")

    if "edges" in data and isinstance(data["edges"], dict):
        edges = data["edges"]
        _check_lists(edges, "edges")
        return load_from_edge_list(edges, validate=validate)

    incidence = data.get("incidence", data)
    if not isinstance(incidence, dict):
        raise InvalidGraphError("'incidence' must be a JSON object")
    _check_lists(incidence, "incidence")
    return load_from_mapping(incidence, validate=validate)


def _check_lists(mapping: dict[str, Any], section: str) -> None:
    for key, value in mapping.items():
        if not isinstance(value, list):
            raise InvalidGraphError(f"{section}[{key!r}] must be a list, got {type(value).__name__}")
        for item in value:
            if not isinstance(item, _SCALARS):
                raise InvalidGraphError(
                    f"{section}[{key!r}] items must be strings or numbers, "
                    f"got {type(item).__name__}"
                )
