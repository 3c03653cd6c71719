import networkx as nx
import pytest

from aspectgraph.graph.connection_graph import ConnectionGraph


def test_is_undirected_multigraph():
    graph = ConnectionGraph()
    assert isinstance(graph, nx.MultiGraph)
    assert not graph.is_directed()
    assert graph.is_multigraph()


def test_add_edge_creates_missing_nodes_and_returns_keys():
    graph = ConnectionGraph()
    k1 = graph.add_edge("A", "B")
    k2 = graph.add_edge("A", "B")
    k3 = graph.add_edge("B", "C", label="x")
    assert (k1, k2, k3) == (0, 1, 2)
    assert set(graph.nodes) == {"A", "B", "C"}
    assert graph.number_of_edges("A", "B") == 2
    assert graph.edges["B", "C", 2]["label"] == "x"


def test_ordered_neighbors_keep_duplicates_and_insertion_order():
    graph = ConnectionGraph.from_recipes(
        {"steam": ["fire", "water"], "mist": ["water", "air", "water"]},
        nodes=["fire", "water", "air", "steam", "mist", "lonely"],
    )
    assert graph.neighbors_ordered("water") == ["steam", "mist", "mist"]
    assert graph.neighbors_ordered("mist") == ["water", "air", "water"]
    assert graph.neighbors_ordered("lonely") == []
    # Every recipe occurrence is its own edge
    assert graph.number_of_edges() == 5


def test_from_recipes_declares_nodes_in_order():
    graph = ConnectionGraph.from_recipes({"c": ["a", "b"]}, nodes=["b", "a"])
    assert list(graph.nodes) == ["b", "a", "c"]


def test_self_loop_listed_twice():
    graph = ConnectionGraph()
    graph.add_edge("echo", "echo")
    assert graph.neighbors_ordered("echo") == ["echo", "echo"]
    assert graph.number_of_edges() == 1


def test_ordering_follows_networkx_mutators():
    graph = ConnectionGraph.from_recipes({"m": ["a", "b", "a"], "n": ["b"]})

    graph.remove_edge("m", "a", key=0)
    assert graph.neighbors_ordered("m") == ["b", "a"]

    graph.remove_nodes_from(["b"])
    assert "b" not in graph
    assert graph.neighbors_ordered("m") == ["a"]
    assert graph.neighbors_ordered("n") == []
    with pytest.raises(KeyError):
        graph.neighbors_ordered("b")


def test_clear_drops_ordering():
    graph = ConnectionGraph.from_recipes({"m": ["a", "b"]})
    graph.clear()
    graph.add_node("m")
    assert graph.neighbors_ordered("m") == []

    # Keys keep increasing after a clear
    assert graph.add_edge("m", "c") == 2
    assert graph.neighbors_ordered("m") == ["c"]


def test_copy_keeps_order_and_key_counter():
    graph = ConnectionGraph.from_recipes({"mist": ["water", "air", "water"]})
    clone = graph.copy()

    assert isinstance(clone, ConnectionGraph)
    assert clone.neighbors_ordered("mist") == ["water", "air", "water"]
    assert clone.add_edge("mist", "fire") == 3
    assert clone.number_of_edges("mist", "water") == 2
    assert clone.neighbors_ordered("mist") == ["water", "air", "water", "fire"]


def test_unknown_node_raises_key_error():
    graph = ConnectionGraph.from_recipes({"m": ["a"]})
    with pytest.raises(KeyError):
        graph.neighbors_ordered("z")
