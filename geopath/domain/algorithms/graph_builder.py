from __future__ import annotations

from typing import Iterable

from geopath.domain.algorithms.geo_utils import haversine_distance_km
from geopath.domain.exceptions import GraphConfigurationError
from geopath.domain.models import DESTINATION_ID, START_ID, Edge, GeoPoint, Graph, Node

# Reference road network: ten US cities, weights in km.
_CITIES: dict[int, tuple[float, float]] = {
    1: (40.7128, -74.006),  # New York
    2: (34.0522, -118.2437),  # Los Angeles
    3: (41.8781, -87.6298),  # Chicago
    4: (29.7604, -95.3698),  # Houston
    5: (33.749, -84.388),  # Atlanta
    6: (39.9526, -75.1652),  # Philadelphia
    7: (25.7617, -80.1918),  # Miami
    8: (47.6062, -122.3321),  # Seattle
    9: (39.7392, -104.9903),  # Denver
    10: (32.7767, -96.797),  # Dallas
}

# Road lengths as surveyed. Links listed to node 0 in the source data meant
# New York (1); duplicate and self-loop entries are kept as given.
_ROADS: dict[int, tuple[tuple[int, float], ...]] = {
    1: ((2, 3935), (3, 1147), (6, 97)),
    2: ((1, 3935), (3, 2800), (4, 2180)),
    3: ((1, 1147), (1, 2800), (4, 715), (8, 1730)),
    4: ((4, 940), (9, 239)),
    5: ((1, 2180), (2, 715), (3, 940), (5, 640)),
    6: ((1, 97), (4, 640)),
    7: ((4, 660),),
    8: ((2, 1730), (8, 1310)),
    9: ((2, 1730), (7, 1310), (9, 780)),
    10: ((3, 239), (8, 780)),
}

# Roads whose listed length is used as is, even below the great-circle
# distance. Every other road is at least as long as the straight line.
_EXACT_ROADS = frozenset({(1, 6), (6, 1)})


def _road_length(source: int, target: int, listed: float) -> float:
    if (source, target) in _EXACT_ROADS:
        return float(listed)
    crow_flies = haversine_distance_km(
        GeoPoint(*_CITIES[source]), GeoPoint(*_CITIES[target])
    )
    return max(float(listed), crow_flies)


_BASE_GRAPH = Graph(
    nodes=tuple(
        Node(
            id=node_id,
            location=GeoPoint(lat=lat, lng=lng),
            edges=tuple(
                Edge(target_id=target, weight=_road_length(node_id, target, weight))
                for target, weight in _ROADS[node_id]
            ),
        )
        for node_id, (lat, lng) in _CITIES.items()
    )
)


def base_graph() -> Graph:
    """Return the constant reference graph shared by every query."""

    return _BASE_GRAPH


resolve_graph = base_graph


def nearest_node(nodes: Iterable[Node], point: GeoPoint) -> tuple[Node, float]:
    """Return the node closest to `point` and its distance in km.

    Ties go to the node met first.
    """

    best_node: Node | None = None
    best_d = float("inf")
    for node in nodes:
        d = haversine_distance_km(node.location, point)
        if d < best_d:
            best_d = d
            best_node = node

    if best_node is None:
        raise GraphConfigurationError("Cannot attach endpoints to an empty graph")
    return best_node, best_d


def attach_endpoints(base: Graph, start: GeoPoint, destination: GeoPoint) -> Graph:
    """Overlay synthetic start/destination nodes on `base` for one query.

    `start` gets a single edge to its nearest base node and the base node
    nearest to `destination` gets a single edge to it. `base` itself is left
    untouched: the node receiving the extra edge is replaced by a copy.
    """

    closest_to_start, start_d = nearest_node(base, start)
    closest_to_dest, dest_d = nearest_node(base, destination)

    start_node = Node(
        id=START_ID,
        location=start,
        edges=(Edge(target_id=closest_to_start.id, weight=start_d),),
    )
    dest_node = Node(id=DESTINATION_ID, location=destination)

    dest_edge = Edge(target_id=DESTINATION_ID, weight=dest_d)
    nodes = tuple(
        node.with_edge(dest_edge) if node.id == closest_to_dest.id else node
        for node in base
    )
    return Graph(nodes=(*nodes, start_node, dest_node))


build_query_graph = attach_endpoints
