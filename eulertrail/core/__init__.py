"""
Core module: data models, exceptions, and the graph layer.

Models (models.py):
    - SearchMode: ANY_PATH (Euler trail) or CIRCUIT (Euler circuit)
    - SearchStats: Counters for one search run

Exceptions (exceptions.py):
    - EulerTrailError: Base exception for all eulertrail errors
    - InvalidGraphError: Incidence data cannot form a graph
    - UnknownVertexError: Vertex was never registered
    - AmbiguousEdgeError/DanglingEdgeError: Edge does not resolve to one other endpoint

Graph (graph/):
    - IncidenceGraph: Vertex -> ordered incident edges
    - BacktrackSolver: Exhaustive trail/circuit enumeration
"""

from eulertrail.core.exceptions import (
    AmbiguousEdgeError,
    DanglingEdgeError,
    EulerTrailError,
    InvalidGraphError,
    UnknownSampleError,
    UnknownVertexError,
)
from eulertrail.core.graph import IncidenceGraph
from eulertrail.core.models import SearchMode, SearchStats

__all__ = [
    # Models
    "SearchMode",
    "SearchStats",
    "IncidenceGraph",
    # Exceptions
    "EulerTrailError",
    "InvalidGraphError",
    "UnknownVertexError",
    "AmbiguousEdgeError",
    "DanglingEdgeError",
    "UnknownSampleError",
]
