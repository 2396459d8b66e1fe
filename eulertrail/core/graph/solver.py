"""Exhaustive Euler trail/circuit enumeration by DFS with backtracking."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from eulertrail.core.graph.models import SearchState, Solution
from eulertrail.core.graph.observers import NullObserver
from eulertrail.core.models import SearchMode, SearchStats

if TYPE_CHECKING:
    from eulertrail.core.graph.base import Edge, IncidenceGraph
    from eulertrail.core.graph.observers import SearchObserver

StopCheck = Callable[[], bool]


class BacktrackSolver:
    """Finds every Euler trail or circuit of an incidence graph.

    Every vertex is tried as a start, in graph order, and every unmarked
    incident edge is tried in incidence-list order. A recorded solution
    never prunes its siblings, so rotations and reversals of the same
    circuit are all reported.
    """

    def __init__(
        self,
        graph: IncidenceGraph,
        observer: SearchObserver | None = None,
        max_solutions: int | None = None,
        should_stop: StopCheck | None = None,
    ) -> None:
        """Initialize with a graph and optional trace sink and limits.

        Args:
            graph: Graph to search
            observer: Receives start/dead-end/solution/backtrack events
            max_solutions: Stop once this many solutions are recorded
            should_stop: Consulted between branch attempts; True stops the search
        """
        self._graph = graph
        self._observer: SearchObserver = observer or NullObserver()
        self._max_solutions = max_solutions
        self._should_stop = should_stop
        self._solutions: list[Solution] = []
        self.stats = SearchStats()

    @property
    def graph(self) -> IncidenceGraph:
        return self._graph

    def find_paths(self, mode: SearchMode = SearchMode.ANY_PATH) -> list[Solution]:
        """Enumerate all solutions for mode.

        Returns:
            Solutions in discovery order, duplicates across starts included.
            Empty when the graph has none.
        """
        self._solutions = []
        self.stats = SearchStats()

        if self._graph.edge_count() == 0:
            return self._solutions

        for v0 in self._graph.vertices:
            if self._halted():
                break
            self.stats.starts += 1
            self._observer.on_start(v0)
            self._search(SearchState(v0), mode)

        return self._solutions

    def find_cycles(self) -> list[Solution]:
        """Euler circuits only."""
        return self.find_paths(SearchMode.CIRCUIT)

    def find_trails(self) -> list[Solution]:
        """Euler trails, closed or not."""
        return self.find_paths(SearchMode.ANY_PATH)

    def find_path_strings(self, mode: SearchMode = SearchMode.ANY_PATH) -> list[str]:
        return [str(solution) for solution in self.find_paths(mode)]

    def _search(self, state: SearchState, mode: SearchMode) -> bool:
        """Extend state recursively, recording every completion.

        Returns:
            True if the walk completed here or any solution has been
            recorded so far in this find_paths call. Informational only.
        """
        current = state.current

        if len(state) == self._graph.edge_count() and (
            mode is SearchMode.ANY_PATH or current == state.initial
        ):
            self._record(state)
            return True

        candidates = self._unmarked_edges(state)
        if not candidates:
            self.stats.dead_ends += 1
            self._observer.on_dead_end(state)
            return False

        for edge in candidates:
            if self._halted():
                break
            state.push(edge, self._graph.other_endpoint(edge, current))
            found = self._search(state, mode)
            self.stats.backtracks += 1
            self._observer.on_backtrack(state, edge, found)
            state.pop()

        return len(self._solutions) > 0

    def _unmarked_edges(self, state: SearchState) -> list[Edge]:
        """Incident edges of state.current not on the walk, in incidence order."""
        incident = dict.fromkeys(self._graph.incident_edges(state.current))
        return [edge for edge in incident if not state.is_marked(edge)]

    def _record(self, state: SearchState) -> None:
        solution = Solution.from_state(state)
        self._solutions.append(solution)
        self.stats.solutions += 1
        self._observer.on_solution(solution)

    def _halted(self) -> bool:
        if self.stats.stopped:
            return True
        if self._max_solutions is not None and len(self._solutions) >= self._max_solutions:
            self.stats.stopped = True
        elif self._should_stop is not None and self._should_stop():
            self.stats.stopped = True
        return self.stats.stopped


def find_euler_paths(
    graph: IncidenceGraph,
    observer: SearchObserver | None = None,
    max_solutions: int | None = None,
) -> list[Solution]:
    """All Euler trails of graph, closed or not."""
    return BacktrackSolver(graph, observer, max_solutions).find_paths(SearchMode.ANY_PATH)


def find_euler_circuits(
    graph: IncidenceGraph,
    observer: SearchObserver | None = None,
    max_solutions: int | None = None,
) -> list[Solution]:
    """All Euler circuits of graph."""
    return BacktrackSolver(graph, observer, max_solutions).find_paths(SearchMode.CIRCUIT)
