"""Sample graphs used by the CLI, the MCP server and the tests."""

from __future__ import annotations

from collections.abc import Callable

from eulertrail.core.exceptions import UnknownSampleError
from eulertrail.core.graph.base import IncidenceGraph


def two_odd_vertices() -> dict[str, list[str]]:
    """Seven bridges rearranged so only a and b have odd degree."""
    return {
        "a": ["1", "7", "8"],
        "b": ["1", "2", "9"],
        "c": ["2", "3"],
        "d": ["3", "4"],
        "e": ["5", "6"],
        "f": ["6", "7"],
        "g": ["4", "5", "8", "9"],
    }


def square() -> dict[str, list[str]]:
    """Four-cycle a-b-c-d."""
    return {
        "a": ["e1", "e4"],
        "b": ["e1", "e2"],
        "c": ["e2", "e3"],
        "d": ["e3", "e4"],
    }


def two_triangles() -> dict[str, list[str]]:
    """Triangles a-b-e and b-c-d sharing vertex b."""
    return {
        "a": ["e1", "e3"],
        "b": ["e3", "e2", "e4", "e6"],
        "c": ["e5", "e6"],
        "d": ["e4", "e5"],
        "e": ["e1", "e2"],
    }


def koenigsberg() -> dict[str, list[str]]:
    """The original seven bridges: four landmasses, all of odd degree."""
    return {
        "a": ["e1", "e2", "e5"],
        "b": ["e1", "e2", "e3", "e4", "e6"],
        "c": ["e3", "e4", "e7"],
        "d": ["e5", "e6", "e7"],
    }


SAMPLES: dict[str, Callable[[], dict[str, list[str]]]] = {
    "two-odd-vertices": two_odd_vertices,
    "square": square,
    "two-triangles": two_triangles,
    "koenigsberg": koenigsberg,
}

DEFAULT_SAMPLE = "two-odd-vertices"


def get_sample(name: str) -> IncidenceGraph:
    """Build the named sample graph."""
    try:
        factory = SAMPLES[name]
    except KeyError:
        raise UnknownSampleError(
            f"Unknown sample '{name}'. Available: {', '.join(SAMPLES)}"
        ) from None
    return IncidenceGraph(factory())
