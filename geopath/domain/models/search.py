from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .graph import Node, NodeId


class Algorithm(str, Enum):
    DIJKSTRA = "dijkstra"
    ASTAR = "astar"

    @property
    def display_name(self) -> str:
        return "Dijkstra" if self is Algorithm.DIJKSTRA else "A*"


class SearchErrorKind(str, Enum):
    NODE_NOT_FOUND = "node_not_found"
    NO_PATH_FOUND = "no_path_found"


_ERROR_MESSAGES = {
    SearchErrorKind.NODE_NOT_FOUND: "Start or goal node not found",
    SearchErrorKind.NO_PATH_FOUND: "No path found",
}


@dataclass(frozen=True, slots=True)
class Waypoint:
    id: NodeId
    lat: float
    lng: float

    @classmethod
    def from_node(cls, node: Node) -> Waypoint:
        return cls(id=node.id, lat=node.lat, lng=node.lng)


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Outcome of a single shortest-path query.

    Failures are carried as data: `error` is set and `path` is empty, except
    for Dijkstra on an unreachable goal, which keeps its reconstructed stub
    path with an infinite distance.
    """

    algorithm: Algorithm
    path: tuple[Waypoint, ...] = ()
    distance_km: float = 0.0
    expanded: int = 0
    error: SearchErrorKind | None = None

    @property
    def found(self) -> bool:
        return self.error is None

    @property
    def error_message(self) -> str | None:
        if self.error is None:
            return None
        return _ERROR_MESSAGES[self.error]

    @classmethod
    def failure(
        cls, algorithm: Algorithm, error: SearchErrorKind, *, expanded: int = 0
    ) -> SearchResult:
        return cls(algorithm=algorithm, error=error, expanded=expanded)
