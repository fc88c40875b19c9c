from __future__ import annotations

import heapq
import itertools
from abc import ABC, abstractmethod

from geopath.domain.algorithms.geo_utils import heuristic
from geopath.domain.models import (
    Algorithm,
    Graph,
    Node,
    NodeId,
    SearchErrorKind,
    SearchResult,
    Waypoint,
)


class SearchStrategy(ABC):
    """Variant of the best-first label-setting search.

    Strategies differ only in the frontier priority and in what is reported
    when the frontier runs dry before the goal is reached.
    """

    algorithm: Algorithm

    @abstractmethod
    def priority(self, cost: float, node: Node, goal: Node) -> float:
        raise NotImplementedError

    @abstractmethod
    def exhausted(
        self,
        graph: Graph,
        goal_id: NodeId,
        came_from: dict[NodeId, NodeId],
        expanded: int,
    ) -> SearchResult:
        raise NotImplementedError


class DijkstraStrategy(SearchStrategy):
    algorithm = Algorithm.DIJKSTRA

    def priority(self, cost: float, node: Node, goal: Node) -> float:
        return cost

    def exhausted(
        self,
        graph: Graph,
        goal_id: NodeId,
        came_from: dict[NodeId, NodeId],
        expanded: int,
    ) -> SearchResult:
        # Dijkstra still reports whatever chain leads back from the goal.
        return SearchResult(
            algorithm=self.algorithm,
            path=reconstruct_path(graph, came_from, goal_id),
            distance_km=float("inf"),
            expanded=expanded,
            error=SearchErrorKind.NO_PATH_FOUND,
        )


class AStarStrategy(SearchStrategy):
    algorithm = Algorithm.ASTAR

    def priority(self, cost: float, node: Node, goal: Node) -> float:
        return cost + heuristic(node.location, goal.location)

    def exhausted(
        self,
        graph: Graph,
        goal_id: NodeId,
        came_from: dict[NodeId, NodeId],
        expanded: int,
    ) -> SearchResult:
        return SearchResult.failure(
            self.algorithm, SearchErrorKind.NO_PATH_FOUND, expanded=expanded
        )


STRATEGIES: dict[Algorithm, SearchStrategy] = {
    Algorithm.DIJKSTRA: DijkstraStrategy(),
    Algorithm.ASTAR: AStarStrategy(),
}


def reconstruct_path(
    graph: Graph, came_from: dict[NodeId, NodeId], goal_id: NodeId
) -> tuple[Waypoint, ...]:
    """Follow predecessor links back from goal_id and return them in order."""

    out: list[Waypoint] = []
    cur: NodeId | None = goal_id
    while cur is not None:
        out.append(Waypoint.from_node(graph.node(cur)))
        cur = came_from.get(cur)
    out.reverse()
    return tuple(out)


def best_first_search(
    graph: Graph, start_id: NodeId, goal_id: NodeId, strategy: SearchStrategy
) -> SearchResult:
    """Label-setting search from start_id to goal_id.

    Each node is settled at most once. Equal priorities are served in the
    order they were pushed, so results are deterministic. Missing endpoints
    and unreachable goals are returned as failed results, never raised.
    """

    start = graph.get(start_id)
    goal = graph.get(goal_id)
    if start is None or goal is None:
        return SearchResult.failure(strategy.algorithm, SearchErrorKind.NODE_NOT_FOUND)

    seq = itertools.count()
    cost: dict[NodeId, float] = {start_id: 0.0}
    came_from: dict[NodeId, NodeId] = {}
    settled: set[NodeId] = set()
    frontier = [(strategy.priority(0.0, start, goal), next(seq), start_id)]

    while frontier:
        _, _, current_id = heapq.heappop(frontier)
        if current_id in settled:
            continue  # stale entry
        if current_id == goal_id:
            return SearchResult(
                algorithm=strategy.algorithm,
                path=reconstruct_path(graph, came_from, goal_id),
                distance_km=cost[goal_id],
                expanded=len(settled),
            )

        settled.add(current_id)
        current_cost = cost[current_id]
        for edge in graph.node(current_id).edges:
            neighbor_id = edge.target_id
            if neighbor_id in settled:
                continue

            tentative = current_cost + edge.weight
            if tentative < cost.get(neighbor_id, float("inf")):
                cost[neighbor_id] = tentative
                came_from[neighbor_id] = current_id
                neighbor = graph.node(neighbor_id)
                heapq.heappush(
                    frontier,
                    (
                        strategy.priority(tentative, neighbor, goal),
                        next(seq),
                        neighbor_id,
                    ),
                )

    return strategy.exhausted(graph, goal_id, came_from, len(settled))


def dijkstra(graph: Graph, start_id: NodeId, goal_id: NodeId) -> SearchResult:
    return best_first_search(graph, start_id, goal_id, STRATEGIES[Algorithm.DIJKSTRA])


def a_star(graph: Graph, start_id: NodeId, goal_id: NodeId) -> SearchResult:
    return best_first_search(graph, start_id, goal_id, STRATEGIES[Algorithm.ASTAR])


def shortest_path(
    graph: Graph, start_id: NodeId, goal_id: NodeId, algorithm: Algorithm
) -> SearchResult:
    """Run the requested algorithm between two nodes of `graph`."""

    return best_first_search(graph, start_id, goal_id, STRATEGIES[Algorithm(algorithm)])
