from __future__ import annotations

import math

import pytest

from geopath.domain.models import Edge, GeoPoint, Graph, Node


def _node(node_id, *edges: Edge) -> Node:
    return Node(id=node_id, location=GeoPoint(lat=0.0, lng=0.0), edges=edges)


def test_graph_looks_up_nodes_by_id() -> None:
    g = Graph(nodes=(_node(1, Edge(2, 5.0)), _node(2), _node("start", Edge(1, 0.0))))

    assert len(g) == 3
    assert 2 in g
    assert "missing" not in g
    assert g.node("start").edges[0].target_id == 1
    assert g.get(42) is None
    assert [n.id for n in g] == [1, 2, "start"]


def test_graph_node_raises_for_unknown_id() -> None:
    g = Graph(nodes=(_node(1),))
    with pytest.raises(KeyError):
        g.node(2)


def test_graph_rejects_duplicate_ids() -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        Graph(nodes=(_node(1), _node(1)))


def test_graph_rejects_edges_to_unknown_nodes() -> None:
    with pytest.raises(ValueError, match="unknown node"):
        Graph(nodes=(_node(1, Edge(0, 3.0)),))


@pytest.mark.parametrize("weight", [-0.1, math.inf, math.nan])
def test_edge_rejects_negative_or_non_finite_weights(weight: float) -> None:
    with pytest.raises(ValueError):
        Edge(target_id=1, weight=weight)


def test_with_edge_returns_copy() -> None:
    original = _node(1)
    extended = original.with_edge(Edge(2, 1.5))

    assert original.edges == ()
    assert extended.edges == (Edge(2, 1.5),)
    assert extended.location == original.location
