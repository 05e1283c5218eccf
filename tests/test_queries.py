from algorithms import Connectivity, ComponentPolicy
from algorithms.queries import (
    build_graph, query_bipartite, query_connectivity, query_cycle, query_degree, query_isomorphism,
)


def test_triangle_scenario(representation):
    g = build_graph(["A", "B", "C"], [("A", "B"), ("B", "C"), ("C", "A")], representation=representation)

    cycle = query_cycle(g)
    assert cycle[0] == cycle[-1]
    assert len(cycle) - 1 == 3 == g.vertex_count()

    assert query_bipartite(g) is False
    assert query_connectivity(g) == Connectivity(connected=True, component_count=1)
    assert [query_degree(g, v) for v in "ABC"] == [2, 2, 2]


def test_two_edge_scenario():
    g = build_graph(["X", "Y", "Z", "W"], [("X", "Y"), ("Z", "W")])
    result = query_connectivity(g)
    assert result.component_count == 2
    assert result.connected is False


def test_connectivity_policy_is_passed_through():
    g = build_graph(["A", "B", "C"], [("A", "B")])
    assert query_connectivity(g, ComponentPolicy.EXCLUDE_ISOLATED).component_count == 1
    assert query_connectivity(g, "include_isolated").component_count == 2


def test_isomorphism_scenario():
    triangle = build_graph(["A", "B", "C"], [("A", "B"), ("B", "C"), ("C", "A")]).adjacency_matrix()
    relabelled = build_graph(["P", "Q", "R"], [("R", "P"), ("Q", "R"), ("P", "Q")]).adjacency_matrix()
    path = build_graph(["A", "B", "C"], [("A", "B"), ("B", "C")]).adjacency_matrix()

    assert query_isomorphism(triangle, relabelled) is not None
    assert query_isomorphism(triangle, path) is None


def test_tree_reports_no_cycle():
    g = build_graph(list("ABCDEF"), [("A", "B"), ("A", "C"), ("B", "D"), ("B", "E"), ("C", "F")])
    assert query_cycle(g) is None


def test_registry_lookup():
    from algorithms import REGISTRY, get_query, list_queries, queries_by_tag

    assert get_query("cycle").label == "Cycle Detection"
    assert get_query("nope") is None
    assert [q.key for q in list_queries()] == list(REGISTRY)
    assert {q.key for q in queries_by_tag("reporter")} == {"degree", "degrees"}
    assert get_query("degree").required == ["label"]
