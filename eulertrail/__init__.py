"""
EulerTrail: exhaustive Euler trail and circuit enumeration.

EulerTrail takes an undirected multigraph as incidence lists and, by
depth-first backtracking from every vertex, lists:
- Every Euler trail (each edge used exactly once)
- Every Euler circuit (a trail that ends where it started)

Usage:
    from eulertrail.core import IncidenceGraph, SearchMode
    from eulertrail.core.graph import BacktrackSolver

    graph = IncidenceGraph({"a": ["e1", "e2"], "b": ["e1", "e2"]})
    for solution in BacktrackSolver(graph).find_paths(SearchMode.CIRCUIT):
        print(solution)
"""

__version__ = "0.1.0"
