# tests/conftest.py
"""
Shared test fixtures.

    scenario_graph – a(1), b(2), c(1); a→b, a→c, b→c
    cyclic_graph   – s(1) → x(1) → y(1) → s, y → z(5), z → z
    tie_graph      – two disjoint equal-cost paths from s to t
    network_graph  – 8 nodes, mixed costs, one unreachable node
"""
import pytest

from api.api.models.graph import Graph
from api.api.models.node import WeightedNode
from core.graph_platform.core import GraphPlatform


def build_graph(name, nodes, edges) -> Graph:
    """Build a graph from (name, cost) pairs and (parent, child) pairs."""
    g = Graph(name)
    for node_name, cost in nodes:
        g.add_node(WeightedNode(node_name, cost))
    for parent, child in edges:
        g.add_edge(parent, child)
    return g


def path_is_connected(graph: Graph, names) -> bool:
    """Every consecutive pair of names is an edge of the graph."""
    return all(graph.has_edge(p, c) for p, c in zip(names, names[1:]))


# ── Node / edge definitions ──────────────────────────────────────
_SCENARIO_NODES = [("a", 1), ("b", 2), ("c", 1)]
_SCENARIO_EDGES = [("a", "b"), ("a", "c"), ("b", "c")]

_CYCLIC_NODES = [("s", 1), ("x", 1), ("y", 1), ("z", 5)]
_CYCLIC_EDGES = [("s", "x"), ("x", "y"), ("y", "s"), ("y", "z"), ("z", "z")]

# s → q → t and s → p → t both cost 6; "p" < "q" so s p t wins
_TIE_NODES = [("s", 1), ("q", 4), ("p", 4), ("t", 1)]
_TIE_EDGES = [("s", "q"), ("q", "t"), ("s", "p"), ("p", "t")]

_NETWORK_NODES = [
    ("n1", 3), ("n2", 1), ("n3", 7), ("n4", 2),
    ("n5", 0), ("n6", 4), ("n7", 1), ("island", 1),
]
_NETWORK_EDGES = [
    ("n1", "n2"), ("n1", "n3"), ("n2", "n4"), ("n3", "n4"),
    ("n4", "n5"), ("n5", "n6"), ("n2", "n6"), ("n6", "n7"),
    ("n5", "n7"), ("n7", "n1"),
]


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def scenario_graph() -> Graph:
    return build_graph("G", _SCENARIO_NODES, _SCENARIO_EDGES)


@pytest.fixture
def cyclic_graph() -> Graph:
    return build_graph("cyc", _CYCLIC_NODES, _CYCLIC_EDGES)


@pytest.fixture
def tie_graph() -> Graph:
    return build_graph("tie", _TIE_NODES, _TIE_EDGES)


@pytest.fixture
def network_graph() -> Graph:
    return build_graph("net", _NETWORK_NODES, _NETWORK_EDGES)


@pytest.fixture
def platform() -> GraphPlatform:
    """Fresh platform holding graph G with the scenario nodes and edges."""
    p = GraphPlatform()
    p.create_graph("G")
    for name, cost in _SCENARIO_NODES:
        p.create_node(name, cost)
        p.add_node("G", name)
    for parent, child in _SCENARIO_EDGES:
        p.add_edge("G", parent, child)
    return p


@pytest.fixture(autouse=True)
def _reset_singleton():
    yield
    GraphPlatform.reset_instance()
