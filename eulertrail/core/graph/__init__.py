"""
Incidence graph structures and the Euler search.

Data Structures:
    - IncidenceGraph: Vertex -> ordered incident edges, with endpoint lookup
    - SearchState: The walk under construction, with exact push/pop
    - Solution: A completed trail as alternating vertices and edges

Algorithms:
    - solver: Backtracking enumeration of Euler trails and circuits
    - analysis: Degrees, odd vertices, connectivity, classification
    - formatting: "a e1 b e2 c" rendering and replay

Loading:
    - load_from_mapping() / load_from_edge_list() / load_from_json()
    - samples.get_sample(): Built-in example graphs
"""

from eulertrail.core.graph.base import IncidenceGraph
from eulertrail.core.graph.formatting import format_path, format_solution
from eulertrail.core.graph.loader import load_from_edge_list, load_from_json, load_from_mapping
from eulertrail.core.graph.models import SearchState, Solution
from eulertrail.core.graph.observers import NullObserver, RecordingObserver, SearchObserver
from eulertrail.core.graph.solver import BacktrackSolver, find_euler_circuits, find_euler_paths

__all__ = [
    "IncidenceGraph",
    "SearchState",
    "Solution",
    "BacktrackSolver",
    "find_euler_paths",
    "find_euler_circuits",
    "format_path",
    "format_solution",
    "SearchObserver",
    "NullObserver",
    "RecordingObserver",
    "load_from_mapping",
    "load_from_edge_list",
    "load_from_json",
]
