import pytest

from algorithms import detect_cycle, find_cycle_indices, format_cycle, has_cycle
from graph import build_graph

from tests.conftest import path, ring


def assert_closed_walk(graph, labels):
    assert labels[0] == labels[-1]
    for a, b in zip(labels, labels[1:]):
        assert graph.has_edge(a, b)


def test_triangle_is_a_cycle(triangle):
    result = detect_cycle(triangle)
    assert result.vertices == ["A", "B", "C", "A"]
    assert result.length == 3
    assert result.spans_graph
    assert_closed_walk(triangle, result.vertices)


@pytest.mark.parametrize("k", [1, 2, 5, 12])
def test_trees_have_no_cycle(k, representation):
    assert detect_cycle(path(k, representation)) is None


def test_star_tree_has_no_cycle(representation):
    g = build_graph(list("HABCD"), [("H", x) for x in "ABCD"], representation=representation)
    assert not has_cycle(g)


@pytest.mark.parametrize("k", [3, 4, 7])
def test_full_ring_spans_graph(k, representation):
    result = detect_cycle(ring(k, representation))
    assert result.length == k
    assert result.spans_graph


def test_sub_cycle_reported_with_correct_length():
    g = build_graph([1, 2, 3, 4, 5], [(1, 2), (2, 3), (3, 4), (4, 1), (4, 5)])
    result = detect_cycle(g)
    assert result.length == 4
    assert not result.spans_graph
    assert_closed_walk(g, result.vertices)


def test_pendant_vertex_is_not_part_of_the_cycle():
    g = build_graph(["A", "B", "C", "D"], [("D", "A"), ("A", "B"), ("B", "C"), ("C", "A")])
    result = detect_cycle(g)
    assert result.vertices == ["A", "B", "C", "A"]
    assert not result.spans_graph


def test_cycle_in_later_component_is_found():
    g = build_graph(list("ABCDE"), [("A", "B"), ("C", "D"), ("D", "E"), ("E", "C")])
    result = detect_cycle(g)
    assert result.vertices == ["C", "D", "E", "C"]


def test_parallel_edge_is_a_two_cycle(representation):
    g = build_graph(["A", "B"], [("A", "B", False, 2)], representation=representation)
    result = detect_cycle(g)
    assert result.vertices == ["A", "B", "A"]
    assert result.spans_graph


def test_same_edges_give_same_cycle_in_every_representation(representation):
    g = build_graph(["A", "B", "C"], [("A", "C"), ("C", "B"), ("B", "A")], representation=representation)
    assert detect_cycle(g).vertices == ["A", "C", "B", "A"]


def test_self_loop_is_a_one_cycle(representation):
    g = build_graph(["A", "B"], [("A", "B"), ("B", "B")], representation=representation)
    assert detect_cycle(g).vertices == ["B", "B"]


def test_directed_cycle_respects_direction():
    cyc = build_graph(list("ABC"), [("A", "B"), ("B", "C"), ("C", "A")], directed=True)
    assert detect_cycle(cyc).vertices == ["A", "B", "C", "A"]

    dag = build_graph(list("ABC"), [("A", "B"), ("B", "C"), ("A", "C")], directed=True)
    assert detect_cycle(dag) is None


def test_opposite_arcs_form_a_directed_two_cycle():
    g = build_graph(["A", "B"], [("A", "B"), ("B", "A")], directed=True)
    assert find_cycle_indices(g) == [0, 1]


def test_empty_graph_has_no_cycle():
    assert detect_cycle(build_graph([])) is None


def test_format_cycle(triangle):
    assert format_cycle(detect_cycle(triangle)) == "A -> B -> C -> A"
    assert format_cycle([1, 2, 1], arrow="-") == "1-2-1"
