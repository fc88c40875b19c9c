from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from geopath.app.ports.output import IGeocoder
from geopath.domain.algorithms.graph_builder import attach_endpoints, base_graph
from geopath.domain.algorithms.search import shortest_path
from geopath.domain.models import (
    DESTINATION_ID,
    START_ID,
    Algorithm,
    GeoPoint,
    Graph,
    SearchResult,
)

logger = logging.getLogger(__name__)

Location = Union[GeoPoint, str]

ALGORITHM_CATALOGUE: tuple[dict[str, str], ...] = (
    {
        "id": Algorithm.DIJKSTRA.value,
        "name": "Dijkstra's Algorithm",
        "description": "Finds the shortest path between two nodes in a graph",
    },
    {
        "id": Algorithm.ASTAR.value,
        "name": "A* Algorithm",
        "description": (
            "An informed search algorithm that uses heuristics to find the "
            "optimal path"
        ),
    },
)


@dataclass(frozen=True, slots=True)
class PlannedPath:
    start: GeoPoint
    destination: GeoPoint
    result: SearchResult


@dataclass(slots=True)
class PathfindingService:
    """Application service (use case) for path finding between two locations.

    Each call overlays the endpoints on the shared base graph and searches
    that private snapshot, so concurrent calls never interfere.
    """

    geocoder: IGeocoder | None = None
    graph: Graph = field(default_factory=base_graph)

    async def resolve_location(self, location: Location) -> GeoPoint:
        if isinstance(location, GeoPoint):
            return location

        if self.geocoder is None:
            raise RuntimeError("Geocoder not configured")
        place = await self.geocoder.geocode(location)
        return place.location

    def compute_path(
        self, *, start: GeoPoint, destination: GeoPoint, algorithm: Algorithm
    ) -> SearchResult:
        query_graph = attach_endpoints(self.graph, start, destination)
        result = shortest_path(query_graph, START_ID, DESTINATION_ID, algorithm)
        logger.debug(
            "%s search finished: found=%s distance_km=%s expanded=%d",
            result.algorithm.display_name,
            result.found,
            result.distance_km,
            result.expanded,
        )
        return result

    async def find_path(
        self, *, start: Location, destination: Location, algorithm: Algorithm
    ) -> PlannedPath:
        start_point = await self.resolve_location(start)
        destination_point = await self.resolve_location(destination)
        result = self.compute_path(
            start=start_point, destination=destination_point, algorithm=algorithm
        )
        return PlannedPath(
            start=start_point, destination=destination_point, result=result
        )

    @staticmethod
    def list_algorithms() -> tuple[dict[str, str], ...]:
        return ALGORITHM_CATALOGUE
