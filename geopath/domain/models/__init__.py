from .geo import GeoPoint
from .graph import DESTINATION_ID, START_ID, Edge, Graph, Node, NodeId
from .place import IpLocation, Place
from .search import Algorithm, SearchErrorKind, SearchResult, Waypoint

__all__ = [
    "Algorithm",
    "DESTINATION_ID",
    "Edge",
    "GeoPoint",
    "Graph",
    "IpLocation",
    "Node",
    "NodeId",
    "Place",
    "START_ID",
    "SearchErrorKind",
    "SearchResult",
    "Waypoint",
]
