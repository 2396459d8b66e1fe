"""Trace sinks for the backtracking solver."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from eulertrail.core.graph.base import Edge, Vertex
    from eulertrail.core.graph.models import SearchState, Solution


class SearchObserver(Protocol):
    """Receives search events. The solver never writes to a terminal itself."""

    def on_start(self, vertex: Vertex) -> None:
        """A new top-level search starts at vertex."""
        ...

    def on_dead_end(self, state: SearchState) -> None:
        """No unmarked edge leaves state.current while edges remain."""
        ...

    def on_solution(self, solution: Solution) -> None:
        """A solution was recorded."""
        ...

    def on_backtrack(self, state: SearchState, edge: Edge, found: bool) -> None:
        """About to unmark edge; found tells whether any solution exists yet."""
        ...


class NullObserver:
    """Ignores every event."""

    def on_start(self, vertex: Vertex) -> None:
        pass

    def on_dead_end(self, state: SearchState) -> None:
        pass

    def on_solution(self, solution: Solution) -> None:
        pass

    def on_backtrack(self, state: SearchState, edge: Edge, found: bool) -> None:
        pass


class RecordingObserver:
    """Keeps every event as an (event, payload) tuple.

    Payloads are copied out of the live state, so they stay valid after
    the search moves on.
    """

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def on_start(self, vertex: Vertex) -> None:
        self.events.append(("start", vertex))

    def on_dead_end(self, state: SearchState) -> None:
        self.events.append(("dead_end", state.current))

    def on_solution(self, solution: Solution) -> None:
        self.events.append(("solution", str(solution)))

    def on_backtrack(self, state: SearchState, edge: Edge, found: bool) -> None:
        self.events.append(("backtrack", (edge, str(state))))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]

    def of(self, name: str) -> list[Any]:
        """Payloads of one event kind."""
        return [payload for event, payload in self.events if event == name]
