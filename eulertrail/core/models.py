"""Data models for EulerTrail."""

from __future__ import annotations

from enum import Enum


class SearchMode(Enum):
    """What counts as a finished traversal."""

    ANY_PATH = "path"
    CIRCUIT = "circuit"


class SearchStats:
    """Statistics from a single find_paths call."""

    def __init__(self) -> None:
        self.starts: int = 0
        self.dead_ends: int = 0
        self.backtracks: int = 0
        self.solutions: int = 0
        self.stopped: bool = False

    def as_dict(self) -> dict[str, int | bool]:
        return {
            "starts": self.starts,
            "dead_ends": self.dead_ends,
            "backtracks": self.backtracks,
            "solutions": self.solutions,
            "stopped": self.stopped,
        }

    def __repr__(self) -> str:
        return (
            f"SearchStats(starts={self.starts}, dead_ends={self.dead_ends}, "
            f"backtracks={self.backtracks}, solutions={self.solutions}, "
            f"stopped={self.stopped})"
        )
