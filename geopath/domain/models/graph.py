from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Union

from .geo import GeoPoint

NodeId = Union[int, str]

START_ID: NodeId = "start"
DESTINATION_ID: NodeId = "destination"


@dataclass(frozen=True, slots=True)
class Edge:
    """Directed, weighted link to another node of the same graph (weight in km)."""

    target_id: NodeId
    weight: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.weight) or self.weight < 0.0:
            raise ValueError(f"Invalid edge weight: {self.weight}")


@dataclass(frozen=True, slots=True)
class Node:
    id: NodeId
    location: GeoPoint
    edges: tuple[Edge, ...] = ()

    @property
    def lat(self) -> float:
        return self.location.lat

    @property
    def lng(self) -> float:
        return self.location.lng

    def with_edge(self, edge: Edge) -> Node:
        """Return a copy of this node with one more outgoing edge."""

        return Node(id=self.id, location=self.location, edges=(*self.edges, edge))


@dataclass(frozen=True, slots=True)
class Graph:
    """Immutable snapshot of nodes, indexed by id.

    Every edge must point at a node of the same snapshot.
    """

    nodes: tuple[Node, ...]
    _index: dict[NodeId, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[NodeId, int] = {}
        for i, node in enumerate(self.nodes):
            if node.id in index:
                raise ValueError(f"Duplicate node id: {node.id!r}")
            index[node.id] = i

        for node in self.nodes:
            for edge in node.edges:
                if edge.target_id not in index:
                    raise ValueError(
                        f"Edge {node.id!r} -> {edge.target_id!r} "
                        "targets an unknown node"
                    )

        object.__setattr__(self, "_index", index)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def node(self, node_id: NodeId) -> Node:
        try:
            return self.nodes[self._index[node_id]]
        except KeyError:
            raise KeyError(f"Unknown node id: {node_id!r}") from None

    def get(self, node_id: NodeId) -> Node | None:
        i = self._index.get(node_id)
        return None if i is None else self.nodes[i]
